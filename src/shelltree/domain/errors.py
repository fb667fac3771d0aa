from __future__ import annotations

"""
Domain Exception Hierarchy.

All failures raised by the tree model and the transcript parser derive from
ShellTreeError so interface layers can trap them in a single clause. None of
them is retryable: they signal either a malformed transcript or a broken
tree invariant.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE
# -----------------------------------------------------------------------------

class ShellTreeError(Exception):
    """Root of every error raised by the shelltree domain."""


# -----------------------------------------------------------------------------
# TREE ERRORS
# -----------------------------------------------------------------------------

class DirectoryTreeError(ShellTreeError):
    """Navigation, mutation or query failure on a DirectoryTree."""


class NoParentError(DirectoryTreeError):
    """Raised when moving to '..' while the cursor is at the root."""

    def __init__(self, name: str = "/") -> None:
        super().__init__(f"Directory '{name}' has no parent")
        self.name = name


class DirectoryNotFoundError(DirectoryTreeError):
    """Raised when the requested child directory does not exist."""

    def __init__(self, target: str, cwd: str) -> None:
        super().__init__(f"Directory '{target}' not found in '{cwd}'")
        self.target = target
        self.cwd = cwd


class NotADirectoryNodeError(DirectoryTreeError):
    """Raised when an operation expects a directory node but finds a file."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Node '{name}' is a file, not a directory")
        self.name = name


class NoCandidateError(DirectoryTreeError):
    """Raised when no directory satisfies the minimum size bound."""

    def __init__(self, lower_bound: int) -> None:
        super().__init__(f"No directory with size >= {lower_bound}")
        self.lower_bound = lower_bound


class UnknownNodeError(DirectoryTreeError, IndexError):
    """Raised when a node id does not address an entry of the arena."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Unknown node id: {node_id}")
        self.node_id = node_id


# -----------------------------------------------------------------------------
# PARSER ERRORS
# -----------------------------------------------------------------------------

class MalformedInputError(ShellTreeError):
    """
    Raised when a transcript line matches none of the recognised shapes.

    Attributes:
        line_number: 1-based position of the offending line, if known.
        line: Raw content of the offending line.
    """

    def __init__(self, reason: str, line: str = "", line_number: Optional[int] = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{reason} ({line!r})")
        self.reason = reason
        self.line = line
        self.line_number = line_number
