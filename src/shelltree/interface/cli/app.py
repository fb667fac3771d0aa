from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted file, command-line overrides), analysis execution and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import List, Optional

from shelltree.core.pipeline.engine import run_analysis
from shelltree.core.pipeline.validator import validate_config
from shelltree.domain.config import get_default_config, load_config, save_config
from shelltree.domain.pipeline_models import AnalysisResult
from shelltree.infra.fs import normalize_path
from shelltree.infra.logging import LoggingConfig, configure_logging, get_logger
from shelltree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_MISSING_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=cli_args.resolve_log_file(args)))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = cli_args.merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        try:
            save_config(clean_conf)
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")
            print(f"ERROR: Failed to save configuration: {e}", file=sys.stderr)
            return EXIT_FAILURE

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    input_path = clean_conf["input_path"]
    if not os.path.isfile(normalize_path(input_path, os.getcwd())):
        msg = f"Input path does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_MISSING_INPUT

    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user.")
        print("Interrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: AnalysisResult) -> None:
    """
    Print the two query results, the optional tree, and any failure.

    Args:
        result: The analysis result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.tree_lines:
        print("\n".join(result.tree_lines))
        print()

    print(f"Total size of directories under {result.threshold}: {result.total_under_threshold}")
    print(f"Smallest directory to delete: {result.smallest_to_delete}")

    if result.tree_path:
        print(f"Tree saved to: {result.tree_path}")


if __name__ == "__main__":
    sys.exit(main())
