from __future__ import annotations

"""
Aggregate Queries.

Read-only walks over a finished tree: the bounded-size sum of small
directories, the smallest directory whose deletion frees enough space, and
a full recomputation used to check the incremental directory totals.
"""

import logging
from typing import Dict, List, Optional

from shelltree.core.builder import FileSystemTree
from shelltree.domain.analysis_models import DeletionCandidate
from shelltree.domain.config import (
    DEFAULT_REQUIRED_FREE,
    DEFAULT_THRESHOLD,
    DEFAULT_TOTAL_CAPACITY,
)
from shelltree.domain.errors import CapacityExceededError, NoCandidateError
from shelltree.domain.tree_models import DirectoryNode, NodeId

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def bounded_size_sum(tree: FileSystemTree, threshold: int = DEFAULT_THRESHOLD) -> int:
    """
    Sum the sizes of every directory (root included) not larger than `threshold`.

    Nested directories are counted independently, so a file may contribute
    more than once.
    """
    total = sum(d.size for d in tree.directories() if d.size <= threshold)
    logger.debug(f"Bounded-size sum (threshold={threshold}): {total}")
    return total


def smallest_sufficient_directory(
        tree: FileSystemTree,
        total_capacity: int = DEFAULT_TOTAL_CAPACITY,
        required_free: int = DEFAULT_REQUIRED_FREE,
) -> DeletionCandidate:
    """
    Find the smallest non-root directory whose deletion frees enough space.

    Args:
        tree: The finished tree.
        total_capacity: Size of the whole disk.
        required_free: Free space needed after deletion.

    Returns:
        DeletionCandidate: The chosen directory and the intermediate figures.

    Raises:
        CapacityExceededError: The root is larger than the disk.
        NoCandidateError: No non-root directory is large enough.
    """
    used = tree.root.size
    current_free = total_capacity - used
    if current_free < 0:
        raise CapacityExceededError(used, total_capacity)

    needed = max(0, required_free - current_free)

    best: Optional[DirectoryNode] = None
    for directory in tree.directories():
        if directory.is_root or directory.size < needed:
            continue
        # Strict comparison keeps the first declared directory on ties
        if best is None or directory.size < best.size:
            best = directory

    if best is None:
        raise NoCandidateError(needed)

    logger.debug(f"Deletion candidate {best.path} ({best.size}), needed {needed}")
    return DeletionCandidate(
        path=best.path,
        size=best.size,
        needed=needed,
        used_space=used,
        current_free=current_free,
    )


def recompute_sizes(tree: FileSystemTree) -> Dict[NodeId, int]:
    """
    Recompute every directory size from its files, ignoring stored totals.

    Returns:
        Dict[NodeId, int]: Directory id to recursive size.
    """
    sizes: Dict[NodeId, int] = {d.node_id: 0 for d in tree.directories()}
    for file_node in tree.files():
        parent_id: Optional[NodeId] = file_node.parent_id
        while parent_id is not None:
            sizes[parent_id] += file_node.size
            parent = tree.node(parent_id)
            parent_id = parent.parent_id
    return sizes


def verify_sizes(tree: FileSystemTree) -> List[str]:
    """List the paths whose stored size disagrees with a full recomputation."""
    expected = recompute_sizes(tree)
    mismatches = [
        d.path for d in tree.directories() if d.size != expected[d.node_id]
    ]
    if mismatches:
        logger.warning(f"Size invariant broken for: {mismatches}")
    return mismatches
