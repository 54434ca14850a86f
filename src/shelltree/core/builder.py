from __future__ import annotations

"""
Filesystem Tree Builder.

Owns the node arena rebuilt from a transcript. Nodes are stored by id and
linked to their parent by id, with a path index for absolute `cd` lookups
and a cursor tracking the current directory. Directory sizes are kept up
to date eagerly: declaring a file adds its size to every ancestor.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from shelltree.domain.errors import (
    AtRootError,
    DuplicateEntryError,
    NameContainsSlashError,
    NotDirectoryError,
    PathNotFoundError,
    ShellTreeError,
)
from shelltree.domain.events import (
    ChangeDirectory,
    Event,
    ListCommand,
    NewDirectory,
    NewFile,
)
from shelltree.domain.tree_models import (
    ROOT_ID,
    ROOT_PATH,
    DirectoryNode,
    FileNode,
    Node,
    NodeId,
    canonical_path,
    child_path,
)

logger = logging.getLogger(__name__)


class FileSystemTree:
    """
    Arena of files and directories with a current-directory cursor.

    Attributes:
        cwd: Identifier of the current directory.
    """

    def __init__(self) -> None:
        root = DirectoryNode(node_id=ROOT_ID, parent_id=None, name="", path=ROOT_PATH)
        self._nodes: Dict[NodeId, Node] = {ROOT_ID: root}
        self._paths: Dict[str, NodeId] = {ROOT_PATH: ROOT_ID}
        self._next_id: NodeId = ROOT_ID + 1
        self.cwd: NodeId = ROOT_ID

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"FileSystemTree(nodes={len(self._nodes)}, cwd={self.cwd_node.path!r})"

    # -------------------------------------------------------------------------
    # READ ACCESS
    # -------------------------------------------------------------------------

    @property
    def root(self) -> DirectoryNode:
        return self._directory(ROOT_ID)

    @property
    def cwd_node(self) -> DirectoryNode:
        return self._directory(self.cwd)

    def node(self, node_id: NodeId) -> Node:
        return self._nodes[node_id]

    def lookup(self, path: str) -> Optional[Node]:
        """Resolve an absolute path to its node, or None."""
        node_id = self._paths.get(canonical_path(path))
        return None if node_id is None else self._nodes[node_id]

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def directories(self) -> Iterator[DirectoryNode]:
        for node in self._nodes.values():
            if isinstance(node, DirectoryNode):
                yield node

    def files(self) -> Iterator[FileNode]:
        for node in self._nodes.values():
            if isinstance(node, FileNode):
                yield node

    def children_of(self, node_id: NodeId) -> List[Node]:
        """Immediate children of a directory in declaration order."""
        directory = self._directory(node_id)
        return [self._nodes[child] for child in directory.children.values()]

    # -------------------------------------------------------------------------
    # MUTATIONS
    # -------------------------------------------------------------------------

    def apply(self, event: Event) -> None:
        """Apply one parsed transcript event."""
        if isinstance(event, ListCommand):
            return
        if isinstance(event, ChangeDirectory):
            self.cd(event.target)
        elif isinstance(event, NewDirectory):
            self.new_dir(event.name)
        elif isinstance(event, NewFile):
            self.new_file(event.name, event.size)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def cd(self, target: str) -> None:
        """
        Move the cursor.

        Raises:
            AtRootError: '..' requested while at the root.
            PathNotFoundError: Absolute path or child name does not exist.
            NotDirectoryError: The named child is a file.
        """
        move = ChangeDirectory(target)
        if move.is_parent:
            parent_id = self.cwd_node.parent_id
            if parent_id is None:
                raise AtRootError("Cannot move above the root directory")
            self.cwd = parent_id
            return

        if move.is_absolute:
            node_id = self._paths.get(canonical_path(target))
            if node_id is None:
                raise PathNotFoundError(target)
            if not isinstance(self._nodes[node_id], DirectoryNode):
                raise NotDirectoryError(target)
            self.cwd = node_id
            return

        current = self.cwd_node
        child_id = current.children.get(target)
        if child_id is None:
            raise PathNotFoundError(child_path(current.path, target))
        child = self._nodes[child_id]
        if not isinstance(child, DirectoryNode):
            raise NotDirectoryError(child.path)
        self.cwd = child_id

    def new_dir(self, name: str) -> DirectoryNode:
        """Declare an empty directory under the cwd."""
        parent = self._check_new_entry(name)
        node = DirectoryNode(
            node_id=self._next_id,
            parent_id=parent.node_id,
            name=name,
            path=child_path(parent.path, name),
        )
        self._register(parent, node)
        return node

    def new_file(self, name: str, size: int) -> FileNode:
        """Declare a file under the cwd and add its size to every ancestor."""
        if size < 0:
            raise ValueError(f"File size must be non-negative, got {size}")

        parent = self._check_new_entry(name)
        node = FileNode(
            node_id=self._next_id,
            parent_id=parent.node_id,
            name=name,
            path=child_path(parent.path, name),
            size=size,
        )
        self._register(parent, node)

        # Walk the parent chain up to and including the root
        ancestor_id: Optional[NodeId] = parent.node_id
        while ancestor_id is not None:
            ancestor = self._directory(ancestor_id)
            ancestor.size += size
            ancestor_id = ancestor.parent_id

        return node

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _directory(self, node_id: NodeId) -> DirectoryNode:
        node = self._nodes[node_id]
        if not isinstance(node, DirectoryNode):
            raise NotDirectoryError(node.path)
        return node

    def _check_new_entry(self, name: str) -> DirectoryNode:
        if "/" in name:
            raise NameContainsSlashError(name)
        parent = self.cwd_node
        if name in parent.children:
            raise DuplicateEntryError(
                f"Entry {child_path(parent.path, name)!r} declared twice"
            )
        return parent

    def _register(self, parent: DirectoryNode, node: Node) -> None:
        self._nodes[node.node_id] = node
        self._paths[node.path] = node.node_id
        parent.children[node.name] = node.node_id
        self._next_id += 1
        logger.debug(f"Allocated node {node.node_id} at {node.path}")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(events: Iterable[Event]) -> FileSystemTree:
    """
    Consume a full event stream and return the finished tree.

    Args:
        events: Parsed transcript events, in order.

    Returns:
        FileSystemTree: The populated tree.

    Raises:
        ShellTreeError: On the first structural violation; no tree is returned.
    """
    tree = FileSystemTree()
    for event in events:
        tree.apply(event)
    logger.info(f"Tree built with {len(tree)} nodes, root size {tree.root.size}.")
    return tree


def build_tree_from_lines(numbered_events: Iterable[Tuple[int, Event]]) -> FileSystemTree:
    """
    Build a tree from `(line_number, event)` pairs.

    Builder errors are annotated with the line that triggered them.
    """
    tree = FileSystemTree()
    for number, event in numbered_events:
        try:
            tree.apply(event)
        except ShellTreeError as e:
            if not e.line_number:
                e.line_number = number
            raise
    logger.info(f"Tree built with {len(tree)} nodes, root size {tree.root.size}.")
    return tree
