from __future__ import annotations

"""
Tree Renderer.

Converts a finished filesystem tree into an ASCII listing annotated with
node kinds and sizes.
"""

from typing import List, Tuple

from shelltree.core.builder import FileSystemTree
from shelltree.domain.tree_models import ROOT_ID, DirectoryNode, Node, NodeId

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: FileSystemTree, show_files: bool = True) -> List[str]:
    """
    Render the whole tree, root first.

    Args:
        tree: The tree to render.
        show_files: If False, only directories are listed.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [_label(tree.root)]

    # Explicit stack of (node, prefix, is_last) frames
    stack: List[Tuple[Node, str, bool]] = _child_frames(tree, ROOT_ID, "", show_files)
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(node)}")

        if isinstance(node, DirectoryNode):
            new_prefix = prefix + ("    " if is_last else "│   ")
            stack.extend(_child_frames(tree, node.node_id, new_prefix, show_files))
    return lines


def _child_frames(
        tree: FileSystemTree,
        node_id: NodeId,
        prefix: str,
        show_files: bool,
) -> List[Tuple[Node, str, bool]]:
    """
    Stack frames for the children of a directory, sorted by entry name.

    Frames come out reversed so that popping yields them in display order.
    """
    entries = sorted(tree.children_of(node_id), key=lambda n: n.name)
    if not show_files:
        entries = [n for n in entries if isinstance(n, DirectoryNode)]
    last = len(entries) - 1
    return [(node, prefix, i == last) for i, node in reversed(list(enumerate(entries)))]


def _label(node: Node) -> str:
    name = node.name or node.path
    kind = "dir" if node.is_dir else "file"
    return f"{name} ({kind}, size={node.size})"
