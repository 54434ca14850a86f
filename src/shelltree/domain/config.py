from __future__ import annotations

"""
Configuration Domain Management.

Holds the default analysis parameters and the JSON persistence of
user overrides. The configuration is a plain dictionary consumed by the
validator and the analysis engine.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_THRESHOLD = 100_000
DEFAULT_TOTAL_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE = 30_000_000


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Queries
        "threshold": DEFAULT_THRESHOLD,
        "total_capacity": DEFAULT_TOTAL_CAPACITY,
        "required_free": DEFAULT_REQUIRED_FREE,

        # Rendering
        "print_tree": False,
        "show_files": True,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load a configuration file and merge it over the defaults.

    Missing or corrupted files fall back to the defaults.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not path or not os.path.exists(path):
        logger.debug(f"Config file not found at '{path}'. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: str) -> None:
    """
    Persist a configuration dictionary as JSON.

    Args:
        config: The configuration to save.
        path: Target file path.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
