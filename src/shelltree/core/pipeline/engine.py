from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete analysis run:
1. Validates configuration and resolves the transcript path.
2. Reads and parses the transcript.
3. Replays the events into a DirectoryTree.
4. Runs the two size queries.
5. Optionally renders the tree and persists it.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from shelltree.core.analysis.tree_renderer import render_tree
from shelltree.core.parsing.transcript_parser import parse_transcript
from shelltree.core.pipeline.replay import replay_transcript
from shelltree.core.pipeline.validator import validate_config
from shelltree.core.tree.directory_tree import DirectoryTree
from shelltree.domain.errors import ShellTreeError
from shelltree.domain.pipeline_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from shelltree.infra.fs import normalize_path, read_text_lines, write_text_lines

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Execute the full transcript analysis.

    Domain failures (malformed transcript, impossible navigation, no
    candidate directory) and I/O failures are reported through an error
    result rather than raised.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Status, query results and summary.
    """
    logger.info("Analysis started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = normalize_path(cfg["input_path"], os.getcwd())
    if not os.path.isfile(input_path):
        msg = f"Transcript file does not exist: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path)

    # -------------------------------------------------------------------------
    # 2) Read, Parse & Replay
    # -------------------------------------------------------------------------
    try:
        lines = read_text_lines(input_path)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read transcript {input_path}: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, input_path)

    try:
        tree = replay_transcript(parse_transcript(lines))
        total_under = tree.total_size_under(cfg["threshold"])
        smallest = tree.smallest_directory_at_least(cfg["disk_capacity"], cfg["required_free"])
    except ShellTreeError as e:
        msg = f"{type(e).__name__}: {e}"
        logger.error(f"Analysis failed. {msg}")
        return create_error_result(msg, cfg, input_path, summary_extra={"lines": len(lines)})

    # -------------------------------------------------------------------------
    # 3) Rendering & Persistence
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    tree_path = ""
    if cfg["print_tree"] or cfg["tree_output_path"]:
        tree_lines = render_tree(tree, show_files=cfg["show_files"])

    if cfg["tree_output_path"]:
        tree_path = normalize_path(cfg["tree_output_path"], os.getcwd())
        try:
            write_text_lines(tree_path, tree_lines)
            logger.info(f"Tree saved to file: {tree_path}")
        except OSError as e:
            msg = f"Failed to save tree to '{tree_path}': {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, input_path)

    directory_count, file_count = _count_nodes(tree)
    logger.info(
        f"Analysis finished: {directory_count} directories, {file_count} files, "
        f"{tree.root.size} bytes used."
    )

    return create_success_result(
        cfg=cfg,
        input_path=input_path,
        total_under_threshold=total_under,
        smallest_to_delete=smallest,
        used_space=tree.root.size,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines if cfg["print_tree"] else [],
        tree_path=tree_path,
        summary_extra={
            "lines": len(lines),
            "free_space": cfg["disk_capacity"] - tree.root.size,
            "warnings": warnings,
        },
    )


def _count_nodes(tree: DirectoryTree) -> Tuple[int, int]:
    directories = sum(1 for _ in tree.iter_directories())
    return directories, len(tree) - directories
