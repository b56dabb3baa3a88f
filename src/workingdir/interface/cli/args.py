from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (one subcommand per directory-value
operation) and translates the parsed namespace into configuration
overrides for the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the workingdir CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="workingdir",
        description="Lexical directory values: normalize, join, test containment and resolve includes.",
    )

    # --- Global options ---
    p.add_argument(
        "--posix",
        action="store_true",
        help="Render paths with '/' regardless of the platform.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    s = sub.add_parser("normalize", help="Print the normalized form of each path.")
    s.add_argument("paths", nargs="+", metavar="PATH")
    s.add_argument(
        "--as-given",
        action="store_true",
        help="Echo each path as given instead of normalizing it.",
    )

    s = sub.add_parser("join", help="Join PATH onto BASE (an absolute PATH replaces BASE).")
    s.add_argument("base", metavar="BASE")
    s.add_argument("path", metavar="PATH")

    s = sub.add_parser("contains", help="Check whether PATH lies lexically inside DIR.")
    s.add_argument("directory", metavar="DIR")
    s.add_argument("path", metavar="PATH")

    s = sub.add_parser("find-include", help="Resolve FILE against the include search path.")
    s.add_argument("file", metavar="FILE")
    s.add_argument(
        "-I", "--include",
        dest="include_dirs",
        action="append",
        default=None,
        metavar="DIR",
        help="Include directory, searched in the given order (repeatable).",
    )
    s.add_argument(
        "--lexical",
        action="store_true",
        help="Do not check that the resolved file exists.",
    )

    sub.add_parser("dump-config", help="Print the effective configuration as JSON.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.posix:
        overrides["separator"] = "posix"
    if args.debug:
        overrides["log_level"] = "DEBUG"

    include_dirs = _clean_paths(getattr(args, "include_dirs", None))
    if include_dirs:
        overrides["include_dirs"] = include_dirs
    if getattr(args, "lexical", False):
        overrides["check_exists"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _clean_paths(values: Optional[List[str]]) -> Optional[List[str]]:
    """
    Sanitize repeated path values, one path per value. Commas are kept,
    since they are legal in directory names.
    """
    if values is None:
        return None
    parts = [v.strip() for v in values]
    return [x for x in parts if x]
