from __future__ import annotations

"""
Transcript Event Models.

One event is produced per non-blank transcript line by the parser and
consumed by the replay stage.
"""

from dataclasses import dataclass
from typing import Union

PARENT_MARKER = ".."
ROOT_MARKER = "/"


@dataclass(frozen=True)
class ChangeDir:
    """`$ cd <target>`; target may be a name, '..' or '/'."""
    target: str


@dataclass(frozen=True)
class ListMarker:
    """`$ ls`; carries no data."""


@dataclass(frozen=True)
class DirEntry:
    """`dir <name>` line of a listing."""
    name: str


@dataclass(frozen=True)
class FileEntry:
    """`<size> <name>` line of a listing."""
    name: str
    size: int


TranscriptEvent = Union[ChangeDir, ListMarker, DirEntry, FileEntry]
