from __future__ import annotations

"""
Error Taxonomy.

Every structural violation of the transcript, and every query that cannot
be answered, is reported with a dedicated exception. Each class carries a
stable `code` used by the analysis engine to build typed error results.
"""

from typing import Optional


class ShellTreeError(Exception):
    """Base class of all transcript and query failures."""
    code: str = "ShellTreeError"

    def __init__(self, message: str, *, line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message}"
        return self.message


# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

class MalformedLineError(ShellTreeError):
    """A line that is neither a command nor a listing entry."""
    code = "MalformedLine"

    def __init__(self, message: str, line: str = "", *, line_number: Optional[int] = None) -> None:
        super().__init__(message, line_number=line_number)
        self.line = line


class DuplicateEntryError(MalformedLineError):
    """The same name was declared twice under one directory."""


# -----------------------------------------------------------------------------
# TREE BUILDING
# -----------------------------------------------------------------------------

class AtRootError(ShellTreeError):
    code = "AtRoot"


class PathNotFoundError(ShellTreeError):
    code = "PathNotFound"

    def __init__(self, path: str, *, line_number: Optional[int] = None) -> None:
        super().__init__(f"No such directory: {path}", line_number=line_number)
        self.path = path


class NotDirectoryError(ShellTreeError):
    code = "NotADirectory"

    def __init__(self, path: str, *, line_number: Optional[int] = None) -> None:
        super().__init__(f"Not a directory: {path}", line_number=line_number)
        self.path = path


class NameContainsSlashError(ShellTreeError):
    code = "NameContainsSlash"

    def __init__(self, name: str, *, line_number: Optional[int] = None) -> None:
        super().__init__(f"Entry name contains '/': {name!r}", line_number=line_number)
        self.name = name


# -----------------------------------------------------------------------------
# QUERIES
# -----------------------------------------------------------------------------

class CapacityExceededError(ShellTreeError):
    code = "CapacityExceeded"

    def __init__(self, used: int, capacity: int) -> None:
        super().__init__(f"Used space {used} exceeds total capacity {capacity}")
        self.used = used
        self.capacity = capacity


class NoCandidateError(ShellTreeError):
    code = "NoCandidate"

    def __init__(self, needed: int) -> None:
        super().__init__(f"No directory frees at least {needed} bytes")
        self.needed = needed
