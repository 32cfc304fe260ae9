from __future__ import annotations

"""
Workspace Path Guard.

The single security boundary of the service. Every filesystem access derived
from a user-supplied path is canonicalized against the live filesystem and
checked for component-wise containment inside the canonical workspace root
before it is touched.

The containment primitive comes in two forms: 'is_contained' for paths that
are already canonical, and 'link_target_is_contained' which resolves a
symlink first. Directory walking and direct reads share both.
"""

import logging
import os

from ponderfs.domain.errors import TraversalError, WorkspaceIOError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CANONICALIZATION
# -----------------------------------------------------------------------------

def canonicalize(path: str) -> str:
    """
    Resolve a path to its absolute, symlink-free, normalized form.

    Resolution is strict: every component must exist on disk.

    Args:
        path: Path to resolve, absolute or relative to the working directory.

    Returns:
        str: Canonical absolute path.

    Raises:
        WorkspaceIOError: If the path does not exist, is not accessible or
            contains a symlink loop.
    """
    try:
        return os.path.realpath(os.fspath(path), strict=True)
    except (OSError, ValueError) as e:
        raise WorkspaceIOError(f"Failed to canonicalize path '{path}': {e}") from e


def resolve_link_target(link_path: str) -> str:
    """
    Canonicalize the target of a symbolic link.

    Relative targets are anchored to the directory containing the link.

    Raises:
        WorkspaceIOError: If the link cannot be read or its target resolved.
    """
    try:
        target = os.readlink(link_path)
    except OSError as e:
        raise WorkspaceIOError(f"Failed to read link '{link_path}': {e}") from e

    if not os.path.isabs(target):
        target = os.path.join(os.path.dirname(link_path), target)
    return canonicalize(target)

# -----------------------------------------------------------------------------
# CONTAINMENT PRIMITIVES
# -----------------------------------------------------------------------------

def is_contained(canonical_path: str, canonical_root: str) -> bool:
    """
    Check component-wise containment of an already canonical path.

    A sibling sharing a string prefix ('/ws-evil' for root '/ws') is not
    contained. The root itself is.
    """
    try:
        return os.path.commonpath([canonical_root, canonical_path]) == canonical_root
    except ValueError:
        # Mixed absolute/relative inputs or different drives
        return False


def link_target_is_contained(link_path: str, canonical_root: str) -> bool:
    """
    Resolve a symlink and check that its target stays inside the root.

    Any resolution failure (dangling link, loop, permission) counts as not
    contained.
    """
    try:
        target = resolve_link_target(link_path)
    except WorkspaceIOError as e:
        logger.debug(f"Unresolvable link '{link_path}': {e}")
        return False
    return is_contained(target, canonical_root)


def containment_check(candidate_path: str, root_path: str) -> str:
    """
    Verify that a candidate path resolves inside a workspace root.

    The root must canonicalize before anything else is attempted. A
    candidate that cannot be canonicalized is reported as a traversal when
    its lexical form already leaves the root, so escapes are rejected
    whether or not their target exists.

    Args:
        candidate_path: Path requested by the caller.
        root_path: Workspace root directory.

    Returns:
        str: Canonical absolute path of the candidate.

    Raises:
        WorkspaceIOError: If the root or an in-root candidate cannot be resolved.
        TraversalError: If the candidate resolves outside the root.
    """
    canonical_root = canonicalize(root_path)

    try:
        canonical_path = canonicalize(candidate_path)
    except WorkspaceIOError:
        lexical_root = os.path.normpath(os.path.abspath(root_path))
        lexical_path = os.path.normpath(os.path.abspath(candidate_path))
        if not is_contained(lexical_path, lexical_root):
            raise TraversalError(
                "Path traversal detected: path is outside workspace root"
            ) from None
        raise

    if not is_contained(canonical_path, canonical_root):
        raise TraversalError("Path traversal detected: path is outside workspace root")

    return canonical_path
