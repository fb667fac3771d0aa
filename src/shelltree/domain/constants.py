from __future__ import annotations

"""
Domain Constants.

Default query parameters and configuration schema versioning.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_INPUT_FILE = "input.txt"

# Directories strictly below this size are summed by the first query
DEFAULT_SIZE_THRESHOLD = 100_000

DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE = 30_000_000
