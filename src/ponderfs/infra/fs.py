from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path manipulation helpers shared by the engine and the interfaces. Converts
between host paths and the forward-slash relative paths exposed to clients.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a user-entered path string into an absolute filesystem path.

    Handles user home shortcuts (~/) and environment variable expansion.
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_posix_relpath(path: str, root: str) -> str:
    """
    Express a path below root as a forward-slash relative path.

    Returns an empty string for the root itself.
    """
    rel = os.path.relpath(path, root)
    if rel == os.curdir:
        return ""
    return rel.replace(os.sep, "/")


def join_relative(root: str, relative_path: str) -> str:
    """
    Join a client-supplied forward-slash path onto a root directory.

    No validation happens here; the result must go through the path guard.
    """
    native = relative_path.replace("/", os.sep)
    return os.path.join(root, native)


def to_display_text(text: str) -> str:
    """
    Make a host name or path safe to emit as UTF-8 text.

    Bytes that are not valid in the filesystem encoding come back from the
    os module as lone surrogates; they are replaced with U+FFFD here.
    """
    return os.fsencode(text).decode("utf-8", "replace")
