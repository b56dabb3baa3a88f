from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (JSON file, CLI) and
the rest of the application. Coerces types, fills missing keys with
defaults and collects human-readable warnings; in strict mode the first
problem raises instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from workingdir.domain.config import get_default_config
from workingdir.domain.constants import LOG_LEVELS, SEPARATOR_MODES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: Raise TypeError/ValueError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
        the list of warnings produced while coercing it.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults and k != "version")
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")

    merged["include_dirs"] = _as_list_str(
        merged.get("include_dirs"), defaults["include_dirs"], "include_dirs", warnings, strict
    )
    merged["check_exists"] = _as_bool(
        merged.get("check_exists"), defaults["check_exists"], "check_exists", warnings, strict
    )
    merged["separator"] = _as_choice(
        merged.get("separator"), SEPARATOR_MODES, defaults["separator"], "separator", warnings, strict
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), LOG_LEVELS, defaults["log_level"], "log_level", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false", "1", "0", "yes", "no"):
        return value.strip().lower() in ("true", "1", "yes")

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Accept a list of strings or a single path string; drop empty entries."""
    if isinstance(value, str):
        value = [value]

    if not isinstance(value, (list, tuple)):
        msg = f"Invalid field '{field}': expected list, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    out: List[str] = []
    for item in value:
        if not isinstance(item, str):
            msg = f"Invalid entry in '{field}': {item!r} is not a string."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Dropped.")
            continue
        item = item.strip()
        if item:
            out.append(item)
    return out


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    if isinstance(value, str):
        v = value.strip()
        for choice in choices:
            if v.lower() == choice.lower():
                return choice

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
