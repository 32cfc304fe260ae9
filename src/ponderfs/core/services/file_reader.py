from __future__ import annotations

"""
Guarded Text File Reader.

Serves whole-file text reads relative to a workspace root. A request either
fully qualifies and is returned whole, or is rejected: the path must stay
inside the root, name a regular file, fit the byte ceiling, pass the binary
probe and decode as text. There is no truncation path.
"""

import logging
import os
from typing import Optional

from ponderfs.core.analysis.content_classifier import is_binary
from ponderfs.core.security.path_guard import containment_check
from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig
from ponderfs.domain.constants import TEXT_ENCODING
from ponderfs.domain.errors import (
    BinaryContentError,
    NotAFileError,
    TextDecodeError,
    TooLargeError,
    WorkspaceError,
    WorkspaceIOError,
)
from ponderfs.domain.read_models import FileReadResult
from ponderfs.infra.fs import join_relative

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_text_file(
        root: str,
        relative_path: str,
        max_bytes: Optional[int] = None,
        config: Optional[InspectorConfig] = None,
) -> FileReadResult:
    """
    Read a workspace file as text.

    Args:
        root: Workspace root directory.
        relative_path: File path relative to the root, forward slashes allowed.
        max_bytes: Size ceiling; the configured default applies when None.
        config: Limits; defaults apply when omitted.

    Returns:
        FileReadResult: Whole decoded content and the file size.

    Raises:
        TraversalError: If the path resolves outside the root.
        WorkspaceIOError: If the root or file cannot be resolved or read.
        NotAFileError: If the path is not a regular file.
        TooLargeError: If the file is larger than the ceiling.
        BinaryContentError: If the file looks binary.
        TextDecodeError: If the file is not valid UTF-8.
        ValueError: If max_bytes is negative.
    """
    config = config or DEFAULT_CONFIG
    limit = config.default_max_read_bytes if max_bytes is None else max_bytes
    if limit < 0:
        raise ValueError(f"max_bytes must be non-negative, got {limit}")

    try:
        return _read_guarded(os.fspath(root), relative_path, limit, config)
    except WorkspaceError as e:
        logger.info(f"Read rejected for '{relative_path}' ({e.kind}): {e}")
        raise

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_guarded(
        root: str,
        relative_path: str,
        limit: int,
        config: InspectorConfig,
) -> FileReadResult:
    # 1. Containment
    candidate = join_relative(root, relative_path)
    canonical_path = containment_check(candidate, root)

    # 2. Kind
    if not os.path.isfile(canonical_path):
        raise NotAFileError(f"Not a file: {relative_path}")

    # 3. Size ceiling
    try:
        size = os.stat(canonical_path).st_size
    except OSError as e:
        raise WorkspaceIOError(f"Failed to read file metadata: {e}") from e
    if size > limit:
        raise TooLargeError(size, limit)

    # 4. Binary probe
    if is_binary(canonical_path, config.binary_probe_bytes):
        raise BinaryContentError("Cannot display binary file")

    # 5. Bounded read; the file may have grown since the size check
    try:
        with open(canonical_path, "rb") as f:
            raw = f.read(limit + 1)
            if len(raw) > limit:
                raise TooLargeError(max(len(raw), os.fstat(f.fileno()).st_size), limit)
    except OSError as e:
        raise WorkspaceIOError(f"Failed to read file: {e}") from e

    # 6. Strict decode
    try:
        content = raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise TextDecodeError(f"File is not valid {TEXT_ENCODING} text: {e}") from e

    logger.debug(f"Read {len(raw)} bytes from '{relative_path}'.")
    return FileReadResult(content=content, size_bytes=len(raw), truncated=False)
