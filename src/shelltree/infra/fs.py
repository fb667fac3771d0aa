from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, the per-user data directory,
and the small amount of text I/O the tool performs: reading transcripts
and persisting rendered trees.
"""

import os
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ShellTree"
UNIX_APP_DIR_NAME = ".shelltree"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ShellTree
    - Linux/Mac: ~/.shelltree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_text_lines(path: str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines without line terminators.

    Raises:
        OSError: The file cannot be opened or read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def write_text_lines(path: str, lines: List[str]) -> None:
    """
    Persist lines to a UTF-8 text file, creating parent directories.

    Raises:
        OSError: The directory or file cannot be written.
    """
    out_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
