from __future__ import annotations

"""
Unit tests for the aggregate queries.

Checks both answers against the canonical session, the edge cases of the
deletion query, and that queries leave the tree untouched.
"""

import pytest

from shelltree.core.builder import FileSystemTree, build_tree
from shelltree.core.parser import parse_transcript
from shelltree.core.queries import (
    bounded_size_sum,
    recompute_sizes,
    smallest_sufficient_directory,
    verify_sizes,
)
from shelltree.domain.errors import CapacityExceededError, NoCandidateError
from shelltree.domain.events import ChangeDirectory, NewDirectory, NewFile


@pytest.fixture
def sample_tree(sample_transcript) -> FileSystemTree:
    return build_tree(parse_transcript(sample_transcript))


def _snapshot(tree: FileSystemTree):
    return [(n.node_id, n.path, n.size) for n in tree.nodes()], tree.cwd


def test_bounded_size_sum_matches_sample(sample_tree) -> None:
    assert bounded_size_sum(sample_tree, 100000) == 95437


def test_bounded_size_sum_includes_root_when_small() -> None:
    tree = build_tree([NewFile(10, "f"), NewDirectory("x")])
    # root (10) and the empty directory (0)
    assert bounded_size_sum(tree, 100) == 10


def test_bounded_size_sum_threshold_is_inclusive(sample_tree) -> None:
    assert bounded_size_sum(sample_tree, 584) == 584
    assert bounded_size_sum(sample_tree, 583) == 0


def test_smallest_sufficient_directory_matches_sample(sample_tree) -> None:
    candidate = smallest_sufficient_directory(sample_tree, 70000000, 30000000)
    assert candidate.used_space == 48381165
    assert candidate.current_free == 21618835
    assert candidate.needed == 8381165
    assert candidate.path == "/d"
    assert candidate.size == 24933642


def test_enough_free_space_picks_smallest_directory(sample_tree) -> None:
    candidate = smallest_sufficient_directory(sample_tree, 70000000, 1)
    assert candidate.needed == 0
    assert candidate.path == "/a/e"


def test_capacity_exceeded(sample_tree) -> None:
    with pytest.raises(CapacityExceededError) as exc:
        smallest_sufficient_directory(sample_tree, 1000, 0)
    assert exc.value.used == 48381165
    assert exc.value.code == "CapacityExceeded"


def test_no_candidate_on_root_only_tree() -> None:
    with pytest.raises(NoCandidateError) as exc:
        smallest_sufficient_directory(FileSystemTree(), 100, 0)
    assert exc.value.needed == 0


def test_no_candidate_when_every_directory_is_too_small(sample_tree) -> None:
    with pytest.raises(NoCandidateError) as exc:
        smallest_sufficient_directory(sample_tree, 48381165, 30000000)
    assert exc.value.needed == 30000000


def test_ties_resolve_to_first_declared_directory() -> None:
    tree = build_tree([
        NewDirectory("first"),
        NewDirectory("second"),
        ChangeDirectory("second"),
        NewFile(5, "s"),
        ChangeDirectory("/first"),
        NewFile(5, "f"),
    ])
    assert smallest_sufficient_directory(tree, 100, 95).path == "/first"


def test_incremental_sizes_match_recomputation(sample_tree) -> None:
    expected = recompute_sizes(sample_tree)
    for directory in sample_tree.directories():
        assert directory.size == expected[directory.node_id]
    assert verify_sizes(sample_tree) == []


def test_verify_sizes_detects_tampering(sample_tree) -> None:
    sample_tree.lookup("/a").size += 1
    assert verify_sizes(sample_tree) == ["/a"]


def test_queries_are_idempotent_and_read_only(sample_tree) -> None:
    before = _snapshot(sample_tree)
    first = (bounded_size_sum(sample_tree), smallest_sufficient_directory(sample_tree))
    second = (bounded_size_sum(sample_tree), smallest_sufficient_directory(sample_tree))
    assert first == second
    recompute_sizes(sample_tree)
    assert _snapshot(sample_tree) == before
