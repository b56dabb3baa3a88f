from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for directory values, isolated config files and
   logging state.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from typing import Iterator, List
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from workingdir.domain.directory import Dir  # noqa: E402
from workingdir.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def include_paths() -> List[str]:
    """The include search path used by the include-set scenarios, in order."""
    return [
        "/usr/local/include",
        "/usr/target/include",
        "/usr/include",
    ]


@pytest.fixture
def usr_include() -> Dir:
    return Dir("/usr/include")


@pytest.fixture
def config_file(tmp_path) -> Iterator[str]:
    """
    Redirect the persisted configuration file into a temporary directory.

    Prevents tests from reading/writing the real user data folder.
    """
    path = str(tmp_path / "config.json")
    with patch("workingdir.domain.config.CONFIG_FILE", path):
        yield path


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Detach handlers and stop listeners on the root logger around a test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            listener.stop()
            setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
