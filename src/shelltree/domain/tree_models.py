from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node types stored in the filesystem arena. Nodes never hold
references to each other: parent and child links are plain integer ids
resolved through the owning tree.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

NodeId = int

# Reserved identifier of the root directory
ROOT_ID: NodeId = 0
ROOT_PATH = "/"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        node_id: Arena identifier of the file.
        parent_id: Identifier of the containing directory.
        name: Entry name as declared in the listing.
        path: Canonical absolute path of the file.
        size: Size in bytes.
    """
    node_id: NodeId
    parent_id: NodeId
    name: str
    path: str
    size: int

    @property
    def is_dir(self) -> bool:
        return False


@dataclass
class DirectoryNode:
    """
    Represents a directory in the tree.

    The size is the cumulative total of every file transitively contained
    and is maintained by the builder as files are declared.

    Attributes:
        node_id: Arena identifier of the directory.
        parent_id: Identifier of the parent directory, None for the root.
        name: Entry name ("" for the root).
        path: Canonical absolute path of the directory.
        size: Recursive size in bytes.
        children: Child name to child id, in declaration order.
    """
    node_id: NodeId
    parent_id: Optional[NodeId]
    name: str
    path: str
    size: int = 0
    children: Dict[str, NodeId] = field(default_factory=dict)

    @property
    def is_dir(self) -> bool:
        return True

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


Node = Union[FileNode, DirectoryNode]


# -----------------------------------------------------------------------------
# PATH HELPERS
# -----------------------------------------------------------------------------

def child_path(parent_path: str, name: str) -> str:
    """Join a directory path and an entry name into a canonical path."""
    if parent_path == ROOT_PATH:
        return ROOT_PATH + name
    return f"{parent_path}/{name}"


def canonical_path(raw: str) -> str:
    """
    Normalize an absolute path string to the canonical form used as index key.

    Repeated and trailing slashes are collapsed ("/a//b/" -> "/a/b").
    Dot segments are kept verbatim.
    """
    parts = [p for p in raw.split("/") if p]
    return ROOT_PATH + "/".join(parts)
