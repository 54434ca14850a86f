from __future__ import annotations

"""
Transcript Event Models.

One event is produced per transcript line by the line parser and consumed
in order by the tree builder.
"""

from dataclasses import dataclass
from typing import Union

PARENT_TARGET = ".."


@dataclass(frozen=True)
class ListCommand:
    """`$ ls`: marker only, the following lines describe the cwd."""


@dataclass(frozen=True)
class ChangeDirectory:
    """`$ cd <target>` where target is '..', an absolute path or a child name."""
    target: str

    @property
    def is_parent(self) -> bool:
        return self.target == PARENT_TARGET

    @property
    def is_absolute(self) -> bool:
        return self.target.startswith("/")


@dataclass(frozen=True)
class NewDirectory:
    """`dir <name>` listing entry."""
    name: str


@dataclass(frozen=True)
class NewFile:
    """`<size> <name>` listing entry."""
    size: int
    name: str


Event = Union[ListCommand, ChangeDirectory, NewDirectory, NewFile]
