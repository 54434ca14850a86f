from __future__ import annotations

"""
Unit tests for the ASCII tree renderer.
"""

from shelltree.core.builder import FileSystemTree, build_tree
from shelltree.core.parser import parse_transcript
from shelltree.core.renderer import render_tree


def test_render_sample_tree(sample_transcript) -> None:
    lines = render_tree(build_tree(parse_transcript(sample_transcript)))

    assert lines[0] == "/ (dir, size=48381165)"
    assert lines[1] == "├── a (dir, size=94853)"
    assert lines[2] == "│   ├── e (dir, size=584)"
    assert lines[3] == "│   │   └── i (file, size=584)"
    assert "└── d (dir, size=24933642)" in lines
    assert lines[-1] == "    └── k (file, size=7214296)"
    assert len(lines) == 14


def test_render_directories_only(sample_transcript) -> None:
    lines = render_tree(build_tree(parse_transcript(sample_transcript)), show_files=False)
    assert lines == [
        "/ (dir, size=48381165)",
        "├── a (dir, size=94853)",
        "│   └── e (dir, size=584)",
        "└── d (dir, size=24933642)",
    ]


def test_render_empty_tree() -> None:
    assert render_tree(FileSystemTree()) == ["/ (dir, size=0)"]


def test_render_deeply_nested_tree() -> None:
    depth = 1500
    tree = FileSystemTree()
    for _ in range(depth):
        tree.new_dir("n")
        tree.cd("n")
    tree.new_file("leaf", 7)

    lines = render_tree(tree)

    assert len(lines) == depth + 2
    assert lines[0] == "/ (dir, size=7)"
    assert lines[1] == "└── n (dir, size=7)"
    assert lines[-1] == " " * (4 * depth) + "└── leaf (file, size=7)"
