from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Input acquisition for the interface layer. The analysis core only ever
receives transcript text; reading it from disk or stdin happens here.
"""

import os
import sys
from typing import Optional

STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str]) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and the user home shortcut. The stdin
    marker and empty values are returned unchanged.
    """
    p = (path or "").strip()
    if not p or p == STDIN_MARKER:
        return p
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def read_transcript(path: Optional[str]) -> str:
    """
    Read a transcript from a file, or from stdin for '-' or an empty path.

    Args:
        path: File location or stdin marker.

    Returns:
        str: The full transcript text.

    Raises:
        OSError: The file cannot be read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    p = normalize_path(path)
    if not p or p == STDIN_MARKER:
        return sys.stdin.read()

    with open(p, "r", encoding="utf-8") as f:
        return f.read()
