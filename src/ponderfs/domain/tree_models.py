from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node types produced by the tree builder and their wire-level
dictionary form consumed by file-browser front-ends.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Kind of filesystem entry; the value is the wire identifier."""
    DIRECTORY = "dir"
    FILE = "file"


@dataclass(frozen=True)
class TreeNode:
    """
    One filesystem entry relative to a workspace root.

    Attributes:
        name: Base name of the entry.
        path: Root-relative path with forward slashes; empty for the root.
        kind: Directory or file.
        children: Ordered child nodes for directories, None for files.
        size_bytes: File size when its metadata was readable.
        is_too_large: Whether the file exceeds the large-file threshold.
    """
    name: str
    path: str
    kind: NodeKind
    children: Optional[Tuple[TreeNode, ...]] = None
    size_bytes: Optional[int] = None
    is_too_large: bool = False

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield this node and all of its descendants in pre-order."""
        yield self
        for child in self.children or ():
            yield from child.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the wire form.

        Optional members are omitted rather than emitted as null, and the
        too-large flag only appears when it is set.
        """
        data: Dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "node_type": self.kind.value,
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        if self.size_bytes is not None:
            data["size_bytes"] = self.size_bytes
        if self.is_too_large:
            data["is_too_large"] = True
        return data
