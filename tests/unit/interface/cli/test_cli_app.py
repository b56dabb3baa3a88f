from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs `main()` in-process for every subcommand and checks stdout and the
exit code mapping. All runs use --use-defaults so the real user
configuration is never read.
"""

import json
import os
from pathlib import Path

import pytest

from workingdir.domain.directory import Dir
from workingdir.interface.cli.app import EXIT_FALSE, EXIT_OK, EXIT_USAGE, main

pytestmark = pytest.mark.usefixtures("reset_logging")


def run(capsys, *argv: str):
    code = main(["--use-defaults", *argv])
    out, err = capsys.readouterr()
    return code, out.strip(), err


def test_no_command_prints_help(capsys) -> None:
    code = main([])
    assert code == EXIT_USAGE
    assert "usage:" in capsys.readouterr().err


def test_join_absolute_override(capsys) -> None:
    """TC-01: Scenario D through the CLI."""
    code, out, _ = run(capsys, "--posix", "join", "/etc", "/override")
    assert code == EXIT_OK
    assert out == "/override"


def test_join_relative_native(capsys) -> None:
    code, out, _ = run(capsys, "join", "/usr/include", "stdio.h")
    assert code == EXIT_OK
    assert out == str(Dir("/usr/include/stdio.h"))


def test_contains_exit_codes(capsys) -> None:
    """TC-02: 'contains' prints the predicate and maps it to the exit code."""
    code, out, _ = run(capsys, "contains", "/usr/include", "/usr/include/sys/types.h")
    assert (code, out) == (EXIT_OK, "true")

    code, out, _ = run(capsys, "contains", "/usr/in", "/usr/inc")
    assert (code, out) == (EXIT_FALSE, "false")


def test_normalize_modes(capsys) -> None:
    code, out, _ = run(capsys, "--posix", "normalize", "a//b/./c/", "/x/../y")
    assert code == EXIT_OK
    assert out.splitlines() == ["a/b/c", "/x/../y"]

    code, out, _ = run(capsys, "normalize", "--as-given", "a//b/")
    assert out == "a//b/"


def test_find_include_on_disk(capsys, tmp_path: Path) -> None:
    """TC-03: The first include directory holding the file wins."""
    local = tmp_path / "local"
    system = tmp_path / "system"
    local.mkdir()
    system.mkdir()
    (system / "stdio.h").write_text("/* stdio */")

    code, out, _ = run(capsys, "find-include", "stdio.h", "-I", str(local), "-I", str(system))

    assert code == EXIT_OK
    assert Dir(out) == Dir(system / "stdio.h")


def test_find_include_dir_name_with_comma(capsys, tmp_path: Path) -> None:
    vendor = tmp_path / "a,b" / "include"
    vendor.mkdir(parents=True)
    (vendor / "vendor.h").write_text("/* vendor */")

    code, out, _ = run(capsys, "find-include", "vendor.h", "-I", str(vendor))

    assert code == EXIT_OK
    assert Dir(out) == Dir(vendor / "vendor.h")


def test_find_include_not_found(capsys, tmp_path: Path) -> None:
    code, out, err = run(capsys, "find-include", "missing.h", "-I", str(tmp_path))
    assert code == EXIT_FALSE
    assert out == ""
    assert "Unable to find missing.h" in err


def test_find_include_lexical(capsys) -> None:
    code, out, _ = run(
        capsys, "--posix", "find-include", "stdio.h",
        "-I", "/usr/local/include", "-I", "/usr/include", "--lexical",
    )
    assert code == EXIT_OK
    assert out == "/usr/local/include/stdio.h"


def test_dump_config(capsys) -> None:
    code, out, _ = run(capsys, "--posix", "dump-config")
    assert code == EXIT_OK
    conf = json.loads(out)
    assert conf["separator"] == "posix"
    assert conf["check_exists"] is True


def test_entry_point_supervisor(capsys) -> None:
    """TC-04: workingdir.main.main returns the controller's exit code."""
    from workingdir.main import main as entry_main

    assert entry_main(["--use-defaults", "contains", "a", "a/b"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "true"


def test_entry_point_reports_crash(capsys, monkeypatch) -> None:
    from workingdir import main as entry

    def boom(argv=None):
        raise RuntimeError("kaput")

    monkeypatch.setattr("workingdir.interface.cli.app.main", boom)
    assert entry.main([]) == 1
    assert "kaput" in capsys.readouterr().err


def test_separator_follows_platform_by_default(capsys) -> None:
    code, out, _ = run(capsys, "normalize", "/a/b")
    assert out == os.sep + os.sep.join(["a", "b"])
