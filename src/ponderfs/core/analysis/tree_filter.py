from __future__ import annotations

"""
Tree Name Filter.

Narrows an already built tree to the entries whose names contain a query,
case-insensitively. A directory survives when its own name matches or when
any descendant does, so every match keeps the chain of ancestors that leads
to it. Nothing here touches the filesystem.
"""

import dataclasses
from typing import Set

from ponderfs.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def node_matches(node: TreeNode, query: str) -> bool:
    """Return True if the node or any of its descendants has a matching name."""
    return _subtree_matches(node, query.lower())


def filter_tree(root: TreeNode, query: str) -> TreeNode:
    """
    Return a copy of the tree keeping only matching branches.

    The root itself is always kept. An empty query returns the tree unchanged.

    Args:
        root: Tree produced by the tree builder.
        query: Substring to look for in entry names.

    Returns:
        TreeNode: Filtered copy of the root.
    """
    if not query:
        return root
    return _prune(root, query.lower())


def expanded_paths(root: TreeNode, query: str) -> Set[str]:
    """
    Collect the directory paths that must be open to reveal every match.

    The root path "" is included whenever anything below it matches.
    """
    paths: Set[str] = set()
    if not query:
        return paths
    needle = query.lower()

    for node in root.iter_nodes():
        if not node.is_dir:
            continue
        if any(_subtree_matches(child, needle) for child in node.children):
            paths.add(node.path)
    return paths

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _subtree_matches(node: TreeNode, needle: str) -> bool:
    return any(needle in candidate.name.lower() for candidate in node.iter_nodes())


def _prune(node: TreeNode, needle: str) -> TreeNode:
    if not node.is_dir:
        return node
    kept = tuple(
        _prune(child, needle)
        for child in node.children
        if _subtree_matches(child, needle)
    )
    return dataclasses.replace(node, children=kept)
