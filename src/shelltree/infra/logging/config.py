from __future__ import annotations

"""
Logging settings for a shelltree process.

A LoggingConfig is built once per run (the CLI uses LoggingConfig.for_cli)
and handed to configure_logging, which asks it for the numeric level and
the two formatters.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

CONSOLE_FORMAT = "shelltree: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_LEVEL_ALIASES: Dict[str, str] = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def level_from_name(name: Optional[str]) -> int:
    """Case-insensitive level lookup; unknown or empty names fall back to INFO."""
    key = str(name or "").strip().upper()
    key = _LEVEL_ALIASES.get(key, key)
    value = logging.getLevelName(key)
    return value if isinstance(value, int) else logging.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """
    Process-wide logging settings.

    Attributes:
        level: Level name applied to the root logger and every handler.
        console: Emit records on stderr.
        log_file: Rotating log file, or None for console-only logging.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside the active one.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def for_cli(cls, *, debug: bool, log_file: Optional[str] = None) -> LoggingConfig:
        """DEBUG when --debug was given, WARNING otherwise."""
        return cls(level="DEBUG" if debug else "WARNING", log_file=log_file)

    @property
    def level_number(self) -> int:
        return level_from_name(self.level)

    def console_formatter(self) -> logging.Formatter:
        return logging.Formatter(CONSOLE_FORMAT)

    def file_formatter(self) -> logging.Formatter:
        return logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT)
