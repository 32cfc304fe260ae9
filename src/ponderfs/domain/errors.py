from __future__ import annotations

"""
Workspace Error Hierarchy.

Every failure reported by the public operations derives from WorkspaceError
and carries a stable 'kind' identifier used by machine-readable outputs.
"""

from typing import Dict


class WorkspaceError(Exception):
    """Base class for failures of a workspace listing or read request."""

    kind: str = "workspace"

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "message": str(self)}


class WorkspaceIOError(WorkspaceError):
    """Underlying OS failure: missing path, permission denied, read error."""

    kind = "io"


class TraversalError(WorkspaceError):
    """The resolved path escapes the workspace root."""

    kind = "traversal"


class NotAFileError(WorkspaceError):
    """The resolved path exists but is not a regular file."""

    kind = "not_a_file"


class TooLargeError(WorkspaceError):
    """The file exceeds the read ceiling."""

    kind = "too_large"

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(f"File too large: {size_bytes} bytes (max: {max_bytes} bytes)")
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class BinaryContentError(WorkspaceError):
    """The probed prefix of the file contains binary data."""

    kind = "binary_content"


class TextDecodeError(WorkspaceError):
    """The file is not valid text in the expected encoding."""

    kind = "decode"
