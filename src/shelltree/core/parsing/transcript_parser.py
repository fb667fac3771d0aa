from __future__ import annotations

"""
Transcript Parser.

Turns the lines of a terminal session into TranscriptEvent objects. The
parser is stateless: it does not check that listing entries follow a
`$ ls` line, it only recognises the four line shapes.
"""

import logging
import re
from typing import Iterable, Iterator, Optional

from shelltree.domain.errors import MalformedInputError
from shelltree.domain.transcript_models import (
    ChangeDir,
    DirEntry,
    FileEntry,
    ListMarker,
    TranscriptEvent,
)

logger = logging.getLogger(__name__)

_CD_RX = re.compile(r"^\$\s+cd\s+(?P<target>\S.*?)\s*$")
_LS_RX = re.compile(r"^\$\s+ls\s*$")
_DIR_RX = re.compile(r"^dir\s+(?P<name>\S.*?)\s*$")
_FILE_RX = re.compile(r"^(?P<size>\S+)\s+(?P<name>\S.*?)\s*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(line: str, line_number: Optional[int] = None) -> TranscriptEvent:
    """
    Map a single transcript line to its event.

    Args:
        line: Raw line, with or without trailing newline.
        line_number: 1-based position used in error messages.

    Returns:
        TranscriptEvent: ChangeDir, ListMarker, DirEntry or FileEntry.

    Raises:
        MalformedInputError: the line matches no known shape, or the size
            of a file entry is not a non-negative integer literal.
    """
    text = line.rstrip("\r\n")

    if text.startswith("$"):
        match = _CD_RX.match(text)
        if match:
            return ChangeDir(target=match.group("target"))
        if _LS_RX.match(text):
            return ListMarker()
        raise MalformedInputError("Unknown command", text, line_number)

    match = _DIR_RX.match(text)
    if match:
        return DirEntry(name=match.group("name"))

    match = _FILE_RX.match(text)
    if match:
        return FileEntry(name=match.group("name"), size=_parse_size(match.group("size"), text, line_number))

    raise MalformedInputError("Unrecognised line", text, line_number)


def parse_transcript(lines: Iterable[str]) -> Iterator[TranscriptEvent]:
    """
    Lazily parse a whole transcript, skipping blank lines.

    Args:
        lines: Iterable of raw lines (a file object works).

    Yields:
        TranscriptEvent: One event per non-blank line.
    """
    count = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        count += 1
        yield parse_line(line, line_number)
    logger.debug(f"Parsed {count} transcript events")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_size(raw: str, line: str, line_number: Optional[int]) -> int:
    """Accept only plain decimal digits; signs, separators and floats are rejected."""
    if not raw.isdigit() or not raw.isascii():
        raise MalformedInputError(f"Invalid file size '{raw}'", line, line_number)
    return int(raw)
