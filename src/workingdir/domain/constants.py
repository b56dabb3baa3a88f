from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide identifiers, configuration versioning and
the default include search path.
"""

from typing import List, Tuple

APP_NAME = "workingdir"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_INCLUDE_DIRS: List[str] = [
    "/usr/local/include",
    "/usr/include",
]

# Rendering modes accepted by the 'separator' configuration key
SEPARATOR_MODES: Tuple[str, ...] = ("native", "posix")
DEFAULT_SEPARATOR_MODE = "native"

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"
