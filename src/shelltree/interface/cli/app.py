from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, JSON
file and command-line overrides), logging bootstrap, transcript loading,
analysis and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from shelltree.core.engine import run_analysis
from shelltree.core.validator import validate_config
from shelltree.domain.analysis_models import AnalysisResult
from shelltree.domain.config import get_default_config, load_config
from shelltree.infra.fs import read_transcript
from shelltree.infra.logging import LoggingConfig, configure_logging, get_logger
from shelltree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on a rejected transcript or failed query,
             2 when the input cannot be read, 130 on interrupt.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration hierarchy
    if args.use_defaults or not args.config_path:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(
        LoggingConfig(
            level=clean_conf["log_level"],
            console=True,
            log_file=clean_conf["log_file"] or None,
        )
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 3. Input acquisition and analysis
    try:
        try:
            transcript = read_transcript(args.input_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read transcript '{args.input_path}': {e}")
            print(f"ERROR: cannot read '{args.input_path}': {e}", file=sys.stderr)
            return 2

        result = run_analysis(transcript, clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130

    # 4. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult) -> None:
    """Print the analysis result for a terminal reader."""
    if not result.ok:
        print(f"ERROR [{result.error_code}]: {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Used space: {result.used_space:,}")
    print(
        f"Sum of directories <= {result.threshold:,}: {result.bounded_size_sum}"
    )

    candidate = result.candidate
    if candidate is not None:
        print(f"Space to free: {candidate.needed:,}")
        print(f"Directory to delete: {candidate.path} ({candidate.size})")

    for key in ("directories", "files"):
        if key in result.summary:
            print(f"{key.capitalize()}: {result.summary[key]}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
