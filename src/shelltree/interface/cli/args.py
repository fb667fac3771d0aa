from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the argparse namespace into
configuration overrides understood by the domain layer.
"""

import argparse
from typing import Any, Dict, Optional

from shelltree.infra.logging import get_default_log_path

# Marks '--log-file' given without a value; resolved lazily by resolve_log_file
USE_DEFAULT_LOG_FILE = object()

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
            "Rebuild a directory tree from a shell transcript of 'cd'/'ls' "
            "commands and report directory size statistics."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        help="Transcript file to analyse.",
        default=None,
    )

    # --- Query Parameters ---
    p.add_argument(
        "--threshold",
        type=_non_negative_int,
        default=None,
        help="Sum directories strictly smaller than this size (default: 100000).",
    )
    p.add_argument(
        "--disk-capacity",
        dest="disk_capacity",
        type=_non_negative_int,
        default=None,
        help="Total disk size (default: 70000000).",
    )
    p.add_argument(
        "--required-free",
        dest="required_free",
        type=_non_negative_int,
        default=None,
        help="Free space needed after deletion (default: 30000000).",
    )

    # --- Tree Rendering ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the reconstructed tree with sizes.",
    )
    p.add_argument(
        "--no-files",
        action="store_true",
        help="Only render directories in the tree.",
    )
    p.add_argument(
        "--tree-file",
        dest="tree_output_path",
        default=None,
        help="Save the rendered tree to this path.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for later runs.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=USE_DEFAULT_LOG_FILE,
        default=None,
        help="Also write logs to a rotating file (default location if no path given).",
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
    Translate the argparse Namespace into a configuration dictionary.

    Keys whose flag was not given are present with a None value; the merge
    step skips them.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["tree_output_path"] = args.tree_output_path

    overrides["threshold"] = args.threshold
    overrides["disk_capacity"] = args.disk_capacity
    overrides["required_free"] = args.required_free

    if args.print_tree:
        overrides["print_tree"] = True
    if args.no_files:
        overrides["show_files"] = False

    return overrides


def resolve_log_file(args: argparse.Namespace) -> Optional[str]:
    """
    Turn the '--log-file' value into a concrete path.

    The default location lives in the user data directory, which is only
    created when the bare flag was actually given.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Optional[str]: Log file path, or None when file logging is off.
    """
    if args.log_file is USE_DEFAULT_LOG_FILE:
        return get_default_log_path()
    return args.log_file


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides for keys already known to base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    """argparse type accepting plain or underscore-grouped digits ('100_000')."""
    cleaned = value.strip().replace("_", "")
    if not cleaned.isdigit():
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got '{value}'")
    return int(cleaned)

