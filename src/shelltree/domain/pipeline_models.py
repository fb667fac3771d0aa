from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object and factory functions used to hand analysis
outcomes from the engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Absolute path of the transcript that was read.
        threshold: Upper bound (exclusive) of the directory-size sum query.
        disk_capacity: Total disk size used by the deletion query.
        required_free: Free space the deletion query must reach.
        total_under_threshold: Result of the directory-size sum query.
        smallest_to_delete: Result of the deletion query.
        used_space: Aggregate size of the root directory.
        directory_count: Number of directory nodes, root included.
        file_count: Number of file nodes.
        tree_lines: Rendered tree, empty unless requested.
        tree_path: Path where the rendered tree was saved, if any.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    threshold: int
    disk_capacity: int
    required_free: int

    total_under_threshold: Optional[int] = None
    smallest_to_delete: Optional[int] = None
    used_space: int = 0
    directory_count: int = 0
    file_count: int = 0

    tree_lines: List[str] = field(default_factory=list)
    tree_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a failed analysis result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: The transcript path.
        summary_extra: Additional metadata for the summary payload.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        threshold=cfg.get("threshold", 0),
        disk_capacity=cfg.get("disk_capacity", 0),
        required_free=cfg.get("required_free", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        total_under_threshold: int,
        smallest_to_delete: int,
        used_space: int,
        directory_count: int,
        file_count: int,
        tree_lines: Optional[List[str]] = None,
        tree_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Create a successful analysis result.

    Args:
        cfg: Final configuration used during execution.
        input_path: Normalized transcript path.
        total_under_threshold: Directory-size sum query result.
        smallest_to_delete: Deletion query result.
        used_space: Root directory size.
        directory_count: Directory nodes in the tree.
        file_count: File nodes in the tree.
        tree_lines: Rendered tree lines.
        tree_path: Path of the saved tree file.
        summary_extra: Final execution metrics.
    """
    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        threshold=cfg["threshold"],
        disk_capacity=cfg["disk_capacity"],
        required_free=cfg["required_free"],
        total_under_threshold=total_under_threshold,
        smallest_to_delete=smallest_to_delete,
        used_space=used_space,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines or [],
        tree_path=tree_path,
        summary=summary_extra or {},
    )
