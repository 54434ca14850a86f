from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result structures exchanged between the analysis engine, the
query layer and the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DeletionCandidate:
    """
    Answer of the smallest-sufficient-directory query.

    Attributes:
        path: Canonical path of the chosen directory.
        size: Recursive size of the chosen directory.
        needed: Bytes that had to be freed.
        used_space: Size of the root directory.
        current_free: Free space before deletion.
    """
    path: str
    size: int
    needed: int
    used_space: int
    current_free: int


@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result of one parse/build/query run.

    On failure only `ok`, `error`, `error_code` and `line_number` are
    meaningful; no partial answer is exposed.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_code: Taxonomy code of the failure (e.g. "MalformedLine").
        line_number: Transcript line that triggered the failure, if any.
        threshold: Threshold used by the bounded-size sum.
        total_capacity: Disk capacity used by the deletion query.
        required_free: Free space required by the deletion query.
        bounded_size_sum: Sum of directory sizes under the threshold.
        used_space: Size of the root directory.
        candidate: Chosen deletion candidate.
        tree_lines: Rendered tree, when requested.
        summary: Execution statistics.
    """
    ok: bool
    error: str = ""
    error_code: str = ""
    line_number: Optional[int] = None

    threshold: int = 0
    total_capacity: int = 0
    required_free: int = 0

    bounded_size_sum: int = 0
    used_space: int = 0
    candidate: Optional[DeletionCandidate] = None

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def candidate_size(self) -> int:
        return self.candidate.size if self.candidate else 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_code: str,
        cfg: Dict[str, Any],
        line_number: Optional[int] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        error_code: Stable taxonomy code.
        cfg: Configuration used during the failed run.
        line_number: Offending transcript line, if known.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        error_code=error_code,
        line_number=line_number,
        threshold=cfg.get("threshold", 0),
        total_capacity=cfg.get("total_capacity", 0),
        required_free=cfg.get("required_free", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        bounded_size_sum: int,
        used_space: int,
        candidate: DeletionCandidate,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Configuration used during execution.
        bounded_size_sum: Answer of the bounded-size sum.
        used_space: Root directory size.
        candidate: Answer of the deletion query.
        tree_lines: Rendered tree lines.
        summary_extra: Execution statistics.

    Returns:
        AnalysisResult: An immutable success result.
    """
    return AnalysisResult(
        ok=True,
        threshold=cfg.get("threshold", 0),
        total_capacity=cfg.get("total_capacity", 0),
        required_free=cfg.get("required_free", 0),
        bounded_size_sum=bounded_size_sum,
        used_space=used_space,
        candidate=candidate,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
