from __future__ import annotations

"""
Analysis Engine.

Runs the whole workflow over one transcript:
1. Validates the configuration.
2. Parses the transcript and builds the tree in a single pass.
3. Answers both aggregate queries.
4. Optionally renders the tree.

Failures are reported as error results instead of exceptions, and no
partial answer is exposed when the transcript is rejected.
"""

import logging
from typing import Any, Dict, Optional

from shelltree.core.builder import FileSystemTree, build_tree_from_lines
from shelltree.core.parser import iter_events
from shelltree.core.queries import bounded_size_sum, smallest_sufficient_directory
from shelltree.core.renderer import render_tree
from shelltree.core.validator import validate_config
from shelltree.domain.analysis_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from shelltree.domain.errors import ShellTreeError

logger = logging.getLogger(__name__)


def load_tree(transcript: str) -> FileSystemTree:
    """
    Parse and build a tree, raising on the first invalid line.

    Raises:
        ShellTreeError: Any parsing or structural violation.
    """
    return build_tree_from_lines(iter_events(transcript))


def run_analysis(transcript: str, config: Optional[Dict[str, Any]] = None) -> AnalysisResult:
    """
    Execute parse, build and both queries over a transcript.

    Args:
        transcript: Complete session text.
        config: Raw or partial configuration dictionary.

    Returns:
        AnalysisResult: Answers on success, typed error otherwise.
    """
    logger.info("Analysis started.")

    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # -------------------------------------------------------------------------
    # 1) Build
    # -------------------------------------------------------------------------
    try:
        tree = load_tree(transcript)
    except ShellTreeError as e:
        logger.error(f"Transcript rejected: {e}")
        return create_error_result(str(e), e.code, cfg, line_number=e.line_number)

    # -------------------------------------------------------------------------
    # 2) Queries
    # -------------------------------------------------------------------------
    try:
        small_sum = bounded_size_sum(tree, cfg["threshold"])
        candidate = smallest_sufficient_directory(
            tree, cfg["total_capacity"], cfg["required_free"]
        )
    except ShellTreeError as e:
        logger.error(f"Query failed: {e}")
        return create_error_result(str(e), e.code, cfg)

    # -------------------------------------------------------------------------
    # 3) Rendering
    # -------------------------------------------------------------------------
    tree_lines = render_tree(tree, show_files=cfg["show_files"]) if cfg["print_tree"] else []

    directories = sum(1 for _ in tree.directories())
    summary = {
        "nodes": len(tree),
        "directories": directories,
        "files": len(tree) - directories,
    }

    logger.info("Analysis finished.")
    return create_success_result(
        cfg,
        bounded_size_sum=small_sum,
        used_space=tree.root.size,
        candidate=candidate,
        tree_lines=tree_lines,
        summary_extra=summary,
    )
