from __future__ import annotations

"""
Transcript Replay Stage.

Applies parsed transcript events to a DirectoryTree in order. Listing
entries that already exist under the cursor are skipped, so listing the
same directory twice neither duplicates siblings nor double counts sizes.
"""

import logging
from typing import Iterable, Optional

from shelltree.core.tree.directory_tree import DirectoryTree
from shelltree.domain.transcript_models import (
    ROOT_MARKER,
    ChangeDir,
    DirEntry,
    FileEntry,
    ListMarker,
    TranscriptEvent,
)

logger = logging.getLogger(__name__)


def replay_transcript(
        events: Iterable[TranscriptEvent],
        tree: Optional[DirectoryTree] = None,
) -> DirectoryTree:
    """
    Build (or extend) a DirectoryTree from a stream of transcript events.

    Args:
        events: Parsed events, typically from parse_transcript.
        tree: Existing tree to extend. A fresh one is created when omitted.

    Returns:
        DirectoryTree: The populated tree, cursor left where the replay ended.

    Raises:
        DirectoryTreeError: propagated unchanged from the tree.
    """
    if tree is None:
        tree = DirectoryTree()

    for event in events:
        _apply_event(tree, event)

    logger.debug(f"Replay finished: {len(tree)} nodes, root size {tree.root.size}")
    return tree


def _apply_event(tree: DirectoryTree, event: TranscriptEvent) -> None:
    if isinstance(event, ChangeDir):
        if event.target == ROOT_MARKER:
            tree.change_to_root()
        else:
            tree.change_directory(event.target)

    elif isinstance(event, ListMarker):
        return

    elif isinstance(event, DirEntry):
        if tree.find_child(event.name, directories_only=True) is not None:
            logger.debug(f"Directory '{event.name}' already listed, skipping")
            return
        tree.add_directory(event.name)

    elif isinstance(event, FileEntry):
        if tree.find_child(event.name, files_only=True) is not None:
            logger.debug(f"File '{event.name}' already listed, skipping")
            return
        tree.add_file(event.name, event.size)

    else:
        raise TypeError(f"Unsupported transcript event: {type(event).__name__}")
