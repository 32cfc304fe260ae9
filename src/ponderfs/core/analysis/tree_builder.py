from __future__ import annotations

"""
Workspace Tree Builder.

Walks a workspace once under the entry filter, admitting entries until the
depth and node ceilings are reached, and materializes a nested tree in
deterministic order. Entries are first collected flat, keyed by their parent
path, and then attached recursively so that no node needs a reference back
to its parent.
"""

import dataclasses
import logging
import os
from typing import Dict, Iterator, List, Optional, Tuple

from ponderfs.core.analysis.entry_filter import should_ignore
from ponderfs.core.security.path_guard import canonicalize
from ponderfs.domain.config import DEFAULT_CONFIG, InspectorConfig
from ponderfs.domain.errors import WorkspaceIOError
from ponderfs.domain.tree_models import NodeKind, TreeNode
from ponderfs.infra.fs import to_display_text, to_posix_relpath

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root: str, config: Optional[InspectorConfig] = None) -> TreeNode:
    """
    Build the filtered, bounded directory tree of a workspace.

    A bad root fails the whole call. Failures on individual entries below
    the root (unreadable directories, unreadable metadata, unresolvable
    links) only drop those entries. Reaching the node ceiling yields a
    partial tree, not an error.

    Args:
        root: Workspace root directory.
        config: Limits and filter lists; defaults apply when omitted.

    Returns:
        TreeNode: Root directory node with its path set to "".

    Raises:
        WorkspaceIOError: If the root does not exist, is not a directory or
            cannot be canonicalized.
    """
    config = config or DEFAULT_CONFIG
    root_str = os.fspath(root)

    if not os.path.exists(root_str):
        raise WorkspaceIOError(f"Root path does not exist: {root_str}")
    if not os.path.isdir(root_str):
        raise WorkspaceIOError(f"Root path is not a directory: {root_str}")

    canonical_root = canonicalize(root_str)
    logger.info(f"Building workspace tree for: {canonical_root}")

    # 1. Flat collection keyed by parent path
    children_by_parent: Dict[str, List[TreeNode]] = {"": []}
    admitted = 0

    for entry, is_dir in _walk_entries(canonical_root, config):
        if admitted >= config.max_nodes:
            logger.info(f"Node ceiling of {config.max_nodes} reached; tree is partial.")
            break

        rel_path = to_display_text(to_posix_relpath(entry.path, canonical_root))
        parent_path = rel_path.rpartition("/")[0]

        if is_dir:
            node = TreeNode(name=to_display_text(entry.name), path=rel_path, kind=NodeKind.DIRECTORY)
            children_by_parent.setdefault(rel_path, [])
        else:
            node = _file_node(entry, rel_path, config)

        children_by_parent.setdefault(parent_path, []).append(node)
        admitted += 1

    # 2. Recursive attachment
    root_node = TreeNode(
        name=to_display_text(os.path.basename(canonical_root) or canonical_root),
        path="",
        kind=NodeKind.DIRECTORY,
    )
    tree = _attach_children(root_node, children_by_parent)

    logger.debug(f"Workspace tree built with {admitted} nodes.")
    return tree


def node_sort_key(is_dir: bool, name: str) -> Tuple[int, str, str]:
    """
    Ordering key for siblings: directories first, then case-insensitive name.

    The raw name breaks ties between names differing only in case so the
    order is total.
    """
    return (0 if is_dir else 1, name.lower(), name)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (WALK)
# -----------------------------------------------------------------------------

def _walk_entries(
        canonical_root: str,
        config: InspectorConfig,
) -> Iterator[Tuple[os.DirEntry, bool]]:
    """
    Yield admitted entries in pre-order, never descending into symlinks.

    Siblings are visited in output order, which makes truncation at the node
    ceiling deterministic.
    """

    def visit(dir_path: str, depth: int) -> Iterator[Tuple[os.DirEntry, bool]]:
        try:
            with os.scandir(dir_path) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory '{to_display_text(dir_path)}': {e}")
            return

        kept: List[Tuple[bool, os.DirEntry]] = []
        for entry in entries:
            if should_ignore(entry, canonical_root, config):
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Skipping entry '{to_display_text(entry.path)}': {e}")
                continue
            kept.append((is_dir, entry))

        kept.sort(key=lambda item: node_sort_key(item[0], to_display_text(item[1].name)))

        for is_dir, entry in kept:
            yield entry, is_dir
            if is_dir and depth < config.max_depth:
                yield from visit(entry.path, depth + 1)

    yield from visit(canonical_root, 1)


def _file_node(entry: os.DirEntry, rel_path: str, config: InspectorConfig) -> TreeNode:
    """Create a file node, annotating size when metadata is readable."""
    name = to_display_text(entry.name)
    try:
        size = entry.stat().st_size  # follows admitted in-root symlinks
    except OSError as e:
        logger.debug(f"Metadata unavailable for '{rel_path}': {e}")
        return TreeNode(name=name, path=rel_path, kind=NodeKind.FILE)

    return TreeNode(
        name=name,
        path=rel_path,
        kind=NodeKind.FILE,
        size_bytes=size,
        is_too_large=size > config.large_file_threshold,
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (ASSEMBLY)
# -----------------------------------------------------------------------------

def _attach_children(node: TreeNode, children_by_parent: Dict[str, List[TreeNode]]) -> TreeNode:
    """Return a copy of a directory node with its collected children nested."""
    if not node.is_dir:
        return node

    collected = children_by_parent.get(node.path, [])
    ordered = sorted(collected, key=lambda child: node_sort_key(child.is_dir, child.name))
    children = tuple(_attach_children(child, children_by_parent) for child in ordered)
    return dataclasses.replace(node, children=children)
