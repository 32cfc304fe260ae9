from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode models into visual ASCII representations with
human-readable file sizes.
"""

from typing import List, Optional

from ponderfs.domain.tree_models import TreeNode
from ponderfs.utils.formatting import format_file_size

TOO_LARGE_MARKER = "[too large]"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: TreeNode, show_sizes: bool = True) -> List[str]:
    """
    Render a tree as a list of lines, the root name first.

    Args:
        root: Root node produced by the tree builder.
        show_sizes: Append file sizes and the too-large marker.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [f"{root.name}/"]
    render_tree_structure(root, lines, prefix="", show_sizes=show_sizes)
    return lines


def render_tree_structure(
        node: TreeNode,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = True,
) -> None:
    """
    Recursively append the children of a directory node to 'lines'.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested directories.
    """
    children = node.children or ()
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if child.is_dir:
            lines.append(f"{prefix}{connector}{child.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(child, lines, prefix=new_prefix, show_sizes=show_sizes)
            continue

        label = child.name
        annotation = _file_annotation(child) if show_sizes else None
        if annotation:
            label = f"{label} {annotation}"
        lines.append(f"{prefix}{connector}{label}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _file_annotation(node: TreeNode) -> Optional[str]:
    if node.size_bytes is None:
        return None
    text = f"({format_file_size(node.size_bytes)})"
    if node.is_too_large:
        text = f"{text} {TOO_LARGE_MARKER}"
    return text
