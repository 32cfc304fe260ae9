from __future__ import annotations

"""
Binary Content Classifier.

Sniffs a bounded prefix of a file for null bytes. This rejects the common
binary formats before text decoding is attempted; a null byte placed after
the probe window goes unnoticed.
"""

from ponderfs.domain.constants import BINARY_PROBE_BYTES
from ponderfs.domain.errors import WorkspaceIOError


def contains_null_byte(data: bytes) -> bool:
    return b"\x00" in data


def is_binary(path: str, probe_bytes: int = BINARY_PROBE_BYTES) -> bool:
    """
    Classify a file as binary from its first bytes.

    Files shorter than the probe are classified with the bytes available.

    Args:
        path: File to inspect.
        probe_bytes: Maximum number of leading bytes to read.

    Returns:
        bool: True if a null byte appears in the probed prefix.

    Raises:
        WorkspaceIOError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            head = f.read(probe_bytes)
    except OSError as e:
        raise WorkspaceIOError(f"Failed to probe file content: {e}") from e
    return contains_null_byte(head)
