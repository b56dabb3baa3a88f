from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences (include search path,
rendering separator, diagnostics level) as JSON in the user data
directory, with default fallback on missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict

from workingdir.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_INCLUDE_DIRS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEPARATOR_MODE,
)
from workingdir.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


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
        # Include resolution
        "include_dirs": list(DEFAULT_INCLUDE_DIRS),
        "check_exists": True,

        # Rendering
        "separator": DEFAULT_SEPARATOR_MODE,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    defaults = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the configuration to disk with the current version stamp.

    Args:
        config: The configuration dictionary to save.
    """
    state = dict(config)
    state["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
