from __future__ import annotations

"""
Transcript Line Parser.

Classifies each line of a terminal session into a command (`$ ls`,
`$ cd <target>`) or a listing entry (`dir <name>`, `<size> <name>`).
Parsing is per line, without lookahead or state.
"""

import logging
from typing import Iterator, List, Tuple

from shelltree.domain.errors import MalformedLineError
from shelltree.domain.events import (
    ChangeDirectory,
    Event,
    ListCommand,
    NewDirectory,
    NewFile,
)

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "$"
DIR_PREFIX = "dir"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(line: str, line_number: int = 0) -> Event:
    """
    Classify a single transcript line.

    Tokens beyond the ones each form needs are ignored.

    Args:
        line: Raw line, with or without its trailing newline.
        line_number: 1-based position used in error reports (0 if unknown).

    Returns:
        Event: The parsed command or listing entry.

    Raises:
        MalformedLineError: If the line matches none of the known forms.
    """
    words = line.split()
    if not words:
        raise MalformedLineError("Empty line", line, line_number=line_number)

    head = words[0]

    if head == COMMAND_PREFIX:
        return _parse_command(words[1:], line, line_number)

    if head == DIR_PREFIX:
        if len(words) < 2:
            raise MalformedLineError("Directory entry without a name", line, line_number=line_number)
        return NewDirectory(words[1])

    if not _is_size(head):
        raise MalformedLineError(
            f"Expected '$', 'dir' or a size, found {head!r}", line, line_number=line_number
        )
    if len(words) < 2:
        raise MalformedLineError("File entry without a name", line, line_number=line_number)
    return NewFile(int(head), words[1])


def iter_events(text: str) -> Iterator[Tuple[int, Event]]:
    """
    Lazily parse a whole transcript.

    Blank lines are skipped; numbering still counts them.

    Args:
        text: Complete transcript content.

    Yields:
        Tuple[int, Event]: 1-based line number and parsed event.
    """
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        event = parse_line(line, number)
        logger.debug(f"Line {number}: {event}")
        yield number, event


def parse_transcript(text: str) -> List[Event]:
    """Parse a whole transcript eagerly, failing on the first bad line."""
    return [event for _, event in iter_events(text)]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_command(args: List[str], line: str, line_number: int) -> Event:
    """Parse the tokens following a '$' prompt."""
    if not args:
        raise MalformedLineError("Command without a verb", line, line_number=line_number)

    verb = args[0]
    if verb == "ls":
        return ListCommand()
    if verb == "cd":
        if len(args) < 2:
            raise MalformedLineError("'cd' without a target", line, line_number=line_number)
        return ChangeDirectory(args[1])

    raise MalformedLineError(f"Unknown command {verb!r}", line, line_number=line_number)


def _is_size(token: str) -> bool:
    """Only plain ASCII digits are sizes (no sign, no separators)."""
    return token.isascii() and token.isdigit()
