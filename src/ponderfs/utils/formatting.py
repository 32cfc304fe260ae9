from __future__ import annotations

"""
Presentation Helpers.

Small formatting utilities used when showing tree nodes and file reads to
people: human-readable sizes, extension extraction and syntax language
detection for viewers.
"""

import posixpath
from typing import Dict

_KIB = 1024
_MIB = _KIB * 1024
_GIB = _MIB * 1024

_LANGUAGE_BY_EXTENSION: Dict[str, str] = {
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "html": "html",
    "htm": "html",
    "css": "css",
    "scss": "scss",
    "less": "less",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "xml": "xml",
    "rs": "rust",
    "py": "python",
    "rb": "ruby",
    "go": "go",
    "sh": "shell",
    "bash": "shell",
    "zsh": "shell",
    "md": "markdown",
    "mdx": "markdown",
    "gitignore": "gitignore",
    "env": "dotenv",
}

DEFAULT_LANGUAGE = "plaintext"


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count for display.

    Args:
        size_bytes: Size in bytes.

    Returns:
        str: e.g. '512 B', '1.5 KB', '2.0 MB', '1.1 GB'.
    """
    if size_bytes < _KIB:
        return f"{size_bytes} B"
    if size_bytes < _MIB:
        return f"{size_bytes / _KIB:.1f} KB"
    if size_bytes < _GIB:
        return f"{size_bytes / _MIB:.1f} MB"
    return f"{size_bytes / _GIB:.1f} GB"


def get_file_extension(filename: str) -> str:
    """
    Return the lowercase extension without its dot.

    Names without a dot, or whose only dot is leading ('.env'), have none.
    """
    last_dot = filename.rfind(".")
    if last_dot <= 0:
        return ""
    return filename[last_dot + 1:].lower()


def language_for_path(path: str) -> str:
    """Map a file path to a syntax-highlighting language identifier."""
    name = posixpath.basename(path)
    extension = get_file_extension(name)
    if not extension and name.startswith("."):
        # Dotfiles such as '.gitignore' are keyed by their full name
        extension = name[1:].lower()
    return _LANGUAGE_BY_EXTENSION.get(extension, DEFAULT_LANGUAGE)
