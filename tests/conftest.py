from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. The canonical example transcript and the tree it produces.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from shelltree.core.tree.directory_tree import DirectoryTree  # noqa: E402

# -----------------------------------------------------------------------------
# Shared Data
# -----------------------------------------------------------------------------
SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""

SAMPLE_FILE_SIZES = [
    14848514, 8504156, 29116, 2557, 62596, 584, 4060174, 8033020, 5626152, 7214296,
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_lines() -> List[str]:
    return SAMPLE_TRANSCRIPT.splitlines()


@pytest.fixture
def sample_file_sizes() -> List[int]:
    return list(SAMPLE_FILE_SIZES)


@pytest.fixture
def sample_transcript_file(tmp_path: Path) -> Path:
    """Write the canonical transcript to a temporary file."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf-8")
    return path


@pytest.fixture
def sample_tree() -> DirectoryTree:
    """
    Build the canonical tree through the public tree API only.

    Leaves the cursor at the root.
    """
    tree = DirectoryTree()

    tree.add_directory("a")
    tree.add_file("b.txt", 14848514)
    tree.add_file("c.dat", 8504156)
    tree.add_directory("d")

    tree.change_directory("a")
    tree.add_directory("e")
    tree.add_file("f", 29116)
    tree.add_file("g", 2557)
    tree.add_file("h.lst", 62596)

    tree.change_directory("e")
    tree.add_file("i", 584)

    tree.change_directory("..")
    tree.change_directory("..")
    tree.change_directory("d")
    tree.add_file("j", 4060174)
    tree.add_file("d.log", 8033020)
    tree.add_file("d.ext", 5626152)
    tree.add_file("k", 7214296)

    tree.change_directory("..")
    return tree
