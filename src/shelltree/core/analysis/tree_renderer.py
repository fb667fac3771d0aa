from __future__ import annotations

"""
Tree Renderer.

Converts a DirectoryTree into a visual ASCII representation annotated with
node kinds and sizes.
"""

from typing import List

from shelltree.core.tree.directory_tree import DirectoryTree
from shelltree.domain.tree_models import ROOT_ID, DirectoryNode, Node, NodeId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: DirectoryTree, show_files: bool = True) -> List[str]:
    """
    Render the whole tree, root first.

    Args:
        tree: Populated DirectoryTree.
        show_files: Include file entries; directories are always shown.

    Returns:
        List[str]: One string per rendered node.
    """
    lines: List[str] = [_label(tree.root)]
    render_tree_structure(tree, ROOT_ID, lines, prefix="", show_files=show_files)
    return lines


def render_tree_structure(
        tree: DirectoryTree,
        node_id: NodeId,
        lines: List[str],
        prefix: str = "",
        show_files: bool = True,
) -> None:
    """
    Recursively append the children of node_id to lines.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested directories. Children are sorted by name.

    Args:
        tree: Tree holding the arena.
        node_id: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_files: Include file entries.
    """
    directory = tree.get_node(node_id)
    if not isinstance(directory, DirectoryNode):
        return

    entries = [(tree.get_node(child_id), child_id) for child_id in directory.children]
    if not show_files:
        entries = [(child, child_id) for child, child_id in entries if isinstance(child, DirectoryNode)]
    entries.sort(key=lambda item: item[0].name)
    total = len(entries)

    for i, (child, child_id) in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(child)}")

        if isinstance(child, DirectoryNode):
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(tree, child_id, lines, prefix=new_prefix, show_files=show_files)


def _label(node: Node) -> str:
    kind = "dir" if isinstance(node, DirectoryNode) else "file"
    return f"{node.name} ({kind}, size={node.size})"
