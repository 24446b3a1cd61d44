from __future__ import annotations

"""
Configuration Domain Management.

Dict-based build configuration with JSON persistence. Values missing from
a stored file fall back to the defaults defined here.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "wixtree.json"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default build configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input lists (one path per line)
        "dirs_file": "",
        "files_file": "",

        # Tree layout
        "root": "",
        "version": "",

        # Synthetic root records
        "executable_name": "",
        "stub_executable_path": "",
        "auto_update": False,
        "updater_path": "",

        # Merge behaviour
        "strict": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def default_config_path() -> str:
    return os.path.join(os.getcwd(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration stored at *path* merged over the defaults.

    A missing or unreadable file yields the defaults.

    Args:
        path: JSON file to read. Defaults to 'wixtree.json' in the cwd.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_path = path or default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file {config_path} not found. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config {config_path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file {config_path}. Using defaults.")
        return config

    config.update({k: v for k, v in data.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist *config* as JSON.

    Args:
        config: Configuration to write.
        path: Target file. Defaults to 'wixtree.json' in the cwd.
    """
    config_path = path or default_config_path()
    try:
        parent = os.path.dirname(os.path.abspath(config_path))
        os.makedirs(parent, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
