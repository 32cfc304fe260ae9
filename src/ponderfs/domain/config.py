from __future__ import annotations

"""
Inspector Configuration Model.

Defines the immutable set of limits and filter lists handed to the traversal
and reading engine. Hosts build one value up front (or use the defaults) and
pass it into every call, so tests can inject tighter bounds without touching
module state.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, FrozenSet

from ponderfs.domain.constants import (
    ALLOWED_HIDDEN_DIRS,
    ALWAYS_IGNORED_DIRS,
    ALWAYS_IGNORED_FILES,
    BINARY_PROBE_BYTES,
    DEFAULT_MAX_READ_BYTES,
    LARGE_FILE_THRESHOLD,
    MAX_DEPTH,
    MAX_NODES,
)

_POSITIVE_FIELDS = (
    "max_depth",
    "max_nodes",
    "large_file_threshold",
    "default_max_read_bytes",
    "binary_probe_bytes",
)


@dataclass(frozen=True)
class InspectorConfig:
    """
    Immutable specification of the workspace inspection limits.

    Attributes:
        max_depth: Deepest level (root = 0) admitted into a tree.
        max_nodes: Ceiling on admitted tree nodes, root excluded.
        large_file_threshold: Size above which a file is flagged too large.
        default_max_read_bytes: Read ceiling used when the caller passes none.
        binary_probe_bytes: Prefix length sniffed for null bytes.
        ignored_dirs: Directory names pruned with their whole subtree.
        ignored_files: File names never listed.
        allowed_hidden_dirs: Dotted directory names that are still walked.
    """
    max_depth: int = MAX_DEPTH
    max_nodes: int = MAX_NODES
    large_file_threshold: int = LARGE_FILE_THRESHOLD
    default_max_read_bytes: int = DEFAULT_MAX_READ_BYTES
    binary_probe_bytes: int = BINARY_PROBE_BYTES

    ignored_dirs: FrozenSet[str] = ALWAYS_IGNORED_DIRS
    ignored_files: FrozenSet[str] = ALWAYS_IGNORED_FILES
    allowed_hidden_dirs: FrozenSet[str] = ALLOWED_HIDDEN_DIRS

    def __post_init__(self) -> None:
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        # Accept any iterable of names for the filter sets
        for name in ("ignored_dirs", "ignored_files", "allowed_hidden_dirs"):
            value = getattr(self, name)
            if isinstance(value, str):
                raise TypeError(f"{name} must be a collection of names, not a string")
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(value))

    def with_overrides(self, **overrides: Any) -> InspectorConfig:
        """
        Return a copy with the given fields replaced.

        Keys whose value is None are ignored so that unset CLI flags can be
        passed straight through.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = InspectorConfig()
