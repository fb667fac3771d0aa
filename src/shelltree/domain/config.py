from __future__ import annotations

"""
Configuration Domain Management.

Handles the default runtime configuration and its persistence as JSON in
the user data directory. Missing or corrupt files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from shelltree.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_DISK_CAPACITY,
    DEFAULT_INPUT_FILE,
    DEFAULT_REQUIRED_FREE,
    DEFAULT_SIZE_THRESHOLD,
)
from shelltree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_path": DEFAULT_INPUT_FILE,
        "tree_output_path": "",

        # Queries
        "threshold": DEFAULT_SIZE_THRESHOLD,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "required_free": DEFAULT_REQUIRED_FREE,

        # Rendering
        "print_tree": False,
        "show_files": True,
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Explicit config file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config_file = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    settings = data.get("settings", {})
    if isinstance(settings, dict):
        config.update({k: v for k, v in settings.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: Configuration to save; unknown keys are dropped.
        path: Explicit config file. Defaults to the user data directory.

    Raises:
        OSError: The file cannot be written.
    """
    config_file = path or get_config_path()
    defaults = get_default_config()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: config.get(k, v) for k, v in defaults.items()},
    }

    parent = os.path.dirname(os.path.abspath(config_file))
    os.makedirs(parent, exist_ok=True)
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(state, f, ensure_ascii=False, indent=4)
    logger.debug(f"Configuration saved to {config_file}")
