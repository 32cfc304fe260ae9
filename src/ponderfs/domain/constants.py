from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the default resource bounds and the name-based filtering sets
applied to every workspace walk and file read.
"""

from typing import FrozenSet

# -----------------------------------------------------------------------------
# RESOURCE BOUNDS
# -----------------------------------------------------------------------------

MAX_DEPTH = 10
MAX_NODES = 50_000
LARGE_FILE_THRESHOLD = 2 * 1024 * 1024  # 2 MiB
DEFAULT_MAX_READ_BYTES = 200 * 1024  # 200 KiB
BINARY_PROBE_BYTES = 8 * 1024  # 8 KiB

TEXT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# NAME-BASED FILTERS
# -----------------------------------------------------------------------------

# Build output, dependency caches and version-control metadata
ALWAYS_IGNORED_DIRS: FrozenSet[str] = frozenset({
    ".git",
    "node_modules",
    "dist",
    "build",
    "target",
    ".next",
    ".turbo",
    ".cache",
})

ALWAYS_IGNORED_FILES: FrozenSet[str] = frozenset({
    ".DS_Store",
})

# Dotted directories that are still walked
ALLOWED_HIDDEN_DIRS: FrozenSet[str] = frozenset({
    ".github",
    ".vscode",
})
