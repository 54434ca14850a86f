from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the shelltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="shelltree",
        description=(
            "Rebuild a directory tree from a recorded terminal session and "
            "report directory-size statistics."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default="-",
        help="Transcript file to read ('-' for stdin, the default).",
    )

    # --- Query Parameters ---
    p.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Maximum size of directories counted by the bounded-size sum.",
    )
    p.add_argument(
        "--capacity",
        dest="total_capacity",
        type=int,
        default=None,
        help="Total disk capacity in bytes.",
    )
    p.add_argument(
        "--required",
        dest="required_free",
        type=int,
        default=None,
        help="Free space required after deletion, in bytes.",
    )

    # --- Rendering ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the rebuilt tree with sizes.",
    )
    p.add_argument(
        "--no-files",
        action="store_true",
        help="Only list directories when printing the tree.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore --config and start from the built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the analysis result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options actually given on the command line are returned.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("threshold", "total_capacity", "required_free", "log_file"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    if args.print_tree:
        overrides["print_tree"] = True
    if args.no_files:
        overrides["show_files"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
