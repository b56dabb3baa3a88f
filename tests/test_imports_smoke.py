# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for the public package surface.
#
# Goals:
# - Ensure the package and its entry point are importable.
# - Validate that the package root exposes the documented public API.
# -----------------------------------------------------------------------------

from __future__ import annotations

import importlib

import workingdir


def test_package_public_api_contract():
    required = [
        "Dir",
        "IncludeSet",
        "WorkingDir",
        "find_include",
        "normalize_path",
        "split_components",
    ]
    for name in required:
        assert hasattr(workingdir, name), f"workingdir missing: {name}"


def test_entry_point_importable():
    module = importlib.import_module("workingdir.main")
    assert callable(module.main)


def test_logging_package_exports_only_public_names():
    logging_pkg = importlib.import_module("workingdir.infra.logging")
    exported = {name for name in vars(logging_pkg) if not name.startswith("__")}
    assert {"LoggingConfig", "configure_logging", "get_logger", "get_default_log_path"} <= exported
    assert not any(name.startswith("_") for name in exported)
