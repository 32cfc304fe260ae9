from __future__ import annotations

"""
Unit tests for the domain models and configuration value.
"""

import pytest

from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig
from ponderfs.domain.constants import (
    ALLOWED_HIDDEN_DIRS,
    ALWAYS_IGNORED_DIRS,
    BINARY_PROBE_BYTES,
    DEFAULT_MAX_READ_BYTES,
    LARGE_FILE_THRESHOLD,
    MAX_DEPTH,
    MAX_NODES,
)
from ponderfs.domain.errors import TooLargeError, TraversalError
from ponderfs.domain.read_models import FileReadResult
from ponderfs.domain.tree_models import NodeKind, TreeNode


def test_default_config_matches_constants() -> None:
    assert DEFAULT_CONFIG.max_depth == MAX_DEPTH == 10
    assert DEFAULT_CONFIG.max_nodes == MAX_NODES == 50_000
    assert DEFAULT_CONFIG.large_file_threshold == LARGE_FILE_THRESHOLD == 2 * 1024 * 1024
    assert DEFAULT_CONFIG.default_max_read_bytes == DEFAULT_MAX_READ_BYTES == 200 * 1024
    assert DEFAULT_CONFIG.binary_probe_bytes == BINARY_PROBE_BYTES == 8 * 1024
    assert ALLOWED_HIDDEN_DIRS == {".github", ".vscode"}
    assert "node_modules" in ALWAYS_IGNORED_DIRS


@pytest.mark.parametrize("field", ["max_depth", "max_nodes", "binary_probe_bytes"])
@pytest.mark.parametrize("value", [0, -1, True])
def test_config_rejects_non_positive_limits(field: str, value: object) -> None:
    with pytest.raises(ValueError, match=field):
        InspectorConfig(**{field: value})


def test_config_normalizes_filter_collections() -> None:
    config = InspectorConfig(ignored_dirs=["vendor", "vendor"])

    assert config.ignored_dirs == frozenset({"vendor"})
    with pytest.raises(TypeError):
        InspectorConfig(ignored_files="name")


def test_with_overrides_skips_unset_values() -> None:
    assert DEFAULT_CONFIG.with_overrides(max_depth=None) is DEFAULT_CONFIG

    tuned = DEFAULT_CONFIG.with_overrides(max_depth=2, max_nodes=None)
    assert tuned.max_depth == 2
    assert tuned.max_nodes == DEFAULT_CONFIG.max_nodes

    with pytest.raises(ValueError):
        DEFAULT_CONFIG.with_overrides(max_nodes=0)


def test_tree_node_wire_form_omits_unset_fields() -> None:
    file_node = TreeNode(name="a.txt", path="src/a.txt", kind=NodeKind.FILE, size_bytes=3)
    unknown = TreeNode(name="b.txt", path="src/b.txt", kind=NodeKind.FILE)
    big = TreeNode(name="c.bin", path="src/c.bin", kind=NodeKind.FILE, size_bytes=9, is_too_large=True)
    src = TreeNode(name="src", path="src", kind=NodeKind.DIRECTORY, children=(file_node, unknown, big))
    root = TreeNode(name="ws", path="", kind=NodeKind.DIRECTORY, children=(src,))

    assert root.to_dict() == {
        "name": "ws",
        "path": "",
        "node_type": "dir",
        "children": [
            {
                "name": "src",
                "path": "src",
                "node_type": "dir",
                "children": [
                    {"name": "a.txt", "path": "src/a.txt", "node_type": "file", "size_bytes": 3},
                    {"name": "b.txt", "path": "src/b.txt", "node_type": "file"},
                    {
                        "name": "c.bin",
                        "path": "src/c.bin",
                        "node_type": "file",
                        "size_bytes": 9,
                        "is_too_large": True,
                    },
                ],
            }
        ],
    }
    assert [n.path for n in root.iter_nodes()] == ["", "src", "src/a.txt", "src/b.txt", "src/c.bin"]


def test_file_read_result_truncated_defaults_false() -> None:
    assert FileReadResult(content="x", size_bytes=1).truncated is False


def test_error_kinds_and_messages() -> None:
    err = TooLargeError(300, 200)

    assert str(err) == "File too large: 300 bytes (max: 200 bytes)"
    assert err.to_dict() == {"kind": "too_large", "message": str(err)}
    assert TraversalError("x").kind == "traversal"
