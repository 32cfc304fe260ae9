from __future__ import annotations

"""
ponderfs: sandboxed workspace introspection.

Lists the filtered, bounded directory tree of a workspace and reads text
files from it without ever leaving the workspace root.
"""

from ponderfs.core.analysis.tree_builder import build_tree
from ponderfs.core.analysis.tree_filter import filter_tree
from ponderfs.core.services.file_reader import read_text_file
from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig
from ponderfs.domain.errors import (
    BinaryContentError,
    NotAFileError,
    TextDecodeError,
    TooLargeError,
    TraversalError,
    WorkspaceError,
    WorkspaceIOError,
)
from ponderfs.domain.read_models import FileReadResult
from ponderfs.domain.tree_models import NodeKind, TreeNode

__version__ = "0.1.0"

list_tree = build_tree

__all__ = [
    "BinaryContentError",
    "DEFAULT_CONFIG",
    "FileReadResult",
    "InspectorConfig",
    "NodeKind",
    "NotAFileError",
    "TextDecodeError",
    "TooLargeError",
    "TraversalError",
    "TreeNode",
    "WorkspaceError",
    "WorkspaceIOError",
    "build_tree",
    "filter_tree",
    "list_tree",
    "read_text_file",
]
