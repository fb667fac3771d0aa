from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the two node variants stored in the DirectoryTree arena. Nodes
never reference each other directly: parent and children are integer ids
into the arena owned by the tree.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

# Index of a node inside the DirectoryTree arena
NodeId = int

ROOT_ID: NodeId = 0
ROOT_NAME = "/"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        name: Label, unique only among siblings.
        parent: Id of the containing directory.
        size: Literal byte count, fixed at creation.
    """
    name: str
    parent: Optional[NodeId]
    size: int


@dataclass
class DirectoryNode:
    """
    Represents a directory entry in the directory tree.

    Attributes:
        name: Label, unique only among siblings.
        parent: Id of the containing directory, None for the root.
        size: Aggregate size of every file in the subtree.
        children: Ids of the direct children, in insertion order.
    """
    name: str
    parent: Optional[NodeId]
    size: int = 0
    children: List[NodeId] = field(default_factory=list)


Node = Union[FileNode, DirectoryNode]
