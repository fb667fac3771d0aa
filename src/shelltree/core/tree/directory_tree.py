from __future__ import annotations

"""
Directory Tree Model.

Arena-backed tree of FileNode / DirectoryNode entries with a navigation
cursor. Directory sizes are maintained incrementally: every add_file walks
the ancestor chain from the cursor to the root and adds the file size to
each directory on the way.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from shelltree.domain.errors import (
    DirectoryNotFoundError,
    NoCandidateError,
    NoParentError,
    NotADirectoryNodeError,
    UnknownNodeError,
)
from shelltree.domain.transcript_models import PARENT_MARKER
from shelltree.domain.tree_models import (
    ROOT_ID,
    ROOT_NAME,
    DirectoryNode,
    FileNode,
    Node,
    NodeId,
)

logger = logging.getLogger(__name__)


class DirectoryTree:
    """
    In-memory directory hierarchy rebuilt from a shell transcript.

    The arena is a flat list; a node's id is its index. The root is created
    with the tree and is always at ROOT_ID.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = [DirectoryNode(name=ROOT_NAME, parent=None)]
        self._cursor: NodeId = ROOT_ID

    # -------------------------------------------------------------------------
    # ACCESSORS
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> DirectoryNode:
        return self._directory(ROOT_ID)

    @property
    def cursor(self) -> NodeId:
        return self._cursor

    @property
    def current_directory(self) -> DirectoryNode:
        return self._directory(self._cursor)

    def get_node(self, node_id: NodeId) -> Node:
        """Return the node stored at node_id or raise UnknownNodeError."""
        if not 0 <= node_id < len(self._nodes):
            raise UnknownNodeError(node_id)
        return self._nodes[node_id]

    def find_child(
            self,
            name: str,
            *,
            directories_only: bool = False,
            files_only: bool = False,
    ) -> Optional[NodeId]:
        """
        Look up a direct child of the cursor directory by name.

        Args:
            name: Child label to match.
            directories_only: Skip file children when True.
            files_only: Skip directory children when True.

        Returns:
            Optional[NodeId]: Id of the first match, or None.
        """
        for child_id in self.current_directory.children:
            child = self._nodes[child_id]
            is_dir = isinstance(child, DirectoryNode)
            if (directories_only and not is_dir) or (files_only and is_dir):
                continue
            if child.name == name:
                return child_id
        return None

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    def change_directory(self, target: str) -> NodeId:
        """
        Move the cursor to the parent ('..') or to a named child directory.

        Raises:
            NoParentError: '..' requested while at the root.
            NotADirectoryNodeError: the cursor references a file.
            DirectoryNotFoundError: no child directory named target.
        """
        current = self.get_node(self._cursor)
        if not isinstance(current, DirectoryNode):
            raise NotADirectoryNodeError(current.name)

        if target == PARENT_MARKER:
            if current.parent is None:
                raise NoParentError(current.name)
            self._cursor = current.parent
            logger.debug(f"cd .. -> {self.path_of(self._cursor)}")
            return self._cursor

        child_id = self.find_child(target, directories_only=True)
        if child_id is None:
            raise DirectoryNotFoundError(target, self.path_of(self._cursor))

        self._cursor = child_id
        logger.debug(f"cd {target} -> {self.path_of(self._cursor)}")
        return self._cursor

    def change_to_root(self) -> NodeId:
        """Reset the cursor to the root directory."""
        self._cursor = ROOT_ID
        return self._cursor

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def add_directory(self, name: str) -> NodeId:
        """Append an empty directory under the cursor and return its id."""
        new_id = self._append(DirectoryNode(name=name, parent=self._cursor))
        logger.debug(f"mkdir {self.path_of(new_id)}")
        return new_id

    def add_file(self, name: str, size: int) -> NodeId:
        """
        Append a file under the cursor and back-propagate its size.

        Every directory from the cursor up to and including the root has
        `size` added to its aggregate exactly once.

        Args:
            name: File label.
            size: Non-negative byte count.

        Returns:
            NodeId: Id of the new file node.
        """
        if size < 0:
            raise ValueError(f"File size must be non-negative, got {size}")

        new_id = self._append(FileNode(name=name, parent=self._cursor, size=size))
        for ancestor_id in self.ancestors(new_id):
            self._directory(ancestor_id).size += size

        logger.debug(f"add {self.path_of(new_id)} ({size})")
        return new_id

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def ancestors(self, node_id: NodeId) -> Iterator[NodeId]:
        """Yield the ids of node_id's parent, grandparent, ... up to the root."""
        parent = self.get_node(node_id).parent
        while parent is not None:
            yield parent
            parent = self._nodes[parent].parent

    def iter_directories(self) -> Iterator[Tuple[NodeId, DirectoryNode]]:
        for node_id, node in enumerate(self._nodes):
            if isinstance(node, DirectoryNode):
                yield node_id, node

    def iter_files(self) -> Iterator[Tuple[NodeId, FileNode]]:
        for node_id, node in enumerate(self._nodes):
            if isinstance(node, FileNode):
                yield node_id, node

    def path_of(self, node_id: NodeId) -> str:
        """Absolute slash-separated path of a node, '/' for the root."""
        parts = [self.get_node(node_id).name]
        parts.extend(self._nodes[a].name for a in self.ancestors(node_id))
        parts.reverse()
        if len(parts) == 1:
            return ROOT_NAME
        return ROOT_NAME + "/".join(parts[1:])

    def directory_sizes(self) -> Dict[str, int]:
        """Map every directory path to its aggregate size."""
        return {self.path_of(node_id): node.size for node_id, node in self.iter_directories()}

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def total_size_under(self, threshold: int) -> int:
        """Sum the sizes of all directories whose size is strictly below threshold."""
        return sum(node.size for _, node in self.iter_directories() if node.size < threshold)

    def smallest_directory_at_least(self, disk_capacity: int, required_free: int) -> int:
        """
        Size of the smallest directory whose removal frees enough space.

        The deficit is `required_free - (disk_capacity - root.size)` and is
        used as-is, so a non-positive deficit selects the smallest directory.

        Raises:
            NoCandidateError: no directory is at least as large as the deficit.
        """
        free = disk_capacity - self.root.size
        deficit = required_free - free

        candidates = [node.size for _, node in self.iter_directories() if node.size >= deficit]
        if not candidates:
            raise NoCandidateError(deficit)
        return min(candidates)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _directory(self, node_id: NodeId) -> DirectoryNode:
        node = self.get_node(node_id)
        if not isinstance(node, DirectoryNode):
            raise NotADirectoryNodeError(node.name)
        return node

    def _append(self, node: Node) -> NodeId:
        parent = self.current_directory
        new_id = len(self._nodes)
        self._nodes.append(node)
        parent.children.append(new_id)
        return new_id
