from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against missing and corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json

from workingdir.domain.config import get_default_config, load_config, save_config
from workingdir.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_INCLUDE_DIRS


def test_default_config_shape() -> None:
    conf = get_default_config()
    assert conf["include_dirs"] == DEFAULT_INCLUDE_DIRS
    assert conf["check_exists"] is True
    assert conf["separator"] == "native"
    assert conf["log_level"] == "INFO"

    # Defaults are fresh copies
    conf["include_dirs"].append("/tmp")
    assert get_default_config()["include_dirs"] == DEFAULT_INCLUDE_DIRS


def test_load_missing_file_returns_defaults(config_file) -> None:
    """TC-01: If no config file exists, defaults are returned."""
    assert load_config() == get_default_config()


def test_load_corrupted_file_returns_defaults(config_file) -> None:
    """TC-02: Malformed JSON falls back to defaults safely."""
    with open(config_file, "w", encoding="utf-8") as f:
        f.write("{ this is not json")
    assert load_config() == get_default_config()


def test_load_non_dict_returns_defaults(config_file) -> None:
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(["/usr/include"], f)
    assert load_config() == get_default_config()


def test_save_and_load_round_trip(config_file) -> None:
    """TC-03: Saved values are merged over defaults on load."""
    save_config({"include_dirs": ["/opt/include"], "separator": "posix"})

    with open(config_file, "r", encoding="utf-8") as f:
        stored = json.load(f)
    assert stored["version"] == CURRENT_CONFIG_VERSION

    conf = load_config()
    assert conf["include_dirs"] == ["/opt/include"]
    assert conf["separator"] == "posix"
    assert conf["log_level"] == "INFO"
    assert "version" not in conf
