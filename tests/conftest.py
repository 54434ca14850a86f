from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Sets up the testing environment:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript fixtures used across unit, integration and e2e tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_transcript() -> str:
    """
    Return the canonical session transcript.

    Directory sizes: /a/e=584, /a=94853, /d=24933642, /=48381165.
    """
    return SAMPLE_TRANSCRIPT
