from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging (defaults, persisted file, CLI overrides), dispatch to the
requested directory-value operation and exit-code mapping.
"""

import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from workingdir.core.validator import validate_config
from workingdir.domain.config import get_default_config, load_config
from workingdir.domain.directory import POSIX_SEP, Dir
from workingdir.domain.include_set import IncludeSet
from workingdir.infra.logging import LoggingConfig, configure_logging, get_logger
from workingdir.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    # 1. Configuration hierarchy (defaults or persisted state, then CLI)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=args.log_file))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Dispatching command '{args.command}'")

    # 3. Dispatch
    handler = _COMMANDS[args.command]
    try:
        return handler(args, conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _cmd_normalize(args: Any, conf: Dict[str, Any]) -> int:
    sep = _separator(conf)
    for path in args.paths:
        print(Dir(path).display(as_given=args.as_given, sep=sep))
    return EXIT_OK


def _cmd_join(args: Any, conf: Dict[str, Any]) -> int:
    print(Dir(args.base).join_dir(args.path).display(sep=_separator(conf)))
    return EXIT_OK


def _cmd_contains(args: Any, conf: Dict[str, Any]) -> int:
    inside = Dir(args.directory).contains(args.path)
    print("true" if inside else "false")
    return EXIT_OK if inside else EXIT_FALSE


def _cmd_find_include(args: Any, conf: Dict[str, Any]) -> int:
    include_set = IncludeSet(conf["include_dirs"])
    if not len(include_set):
        logger.error("No include directories configured.")
        return EXIT_USAGE

    exists = os.path.isfile if conf["check_exists"] else None
    found = include_set.find(args.file, exists=exists)
    if found is None:
        dirs = ", ".join(d.display(sep=_separator(conf)) for d in include_set)
        print(f"Unable to find {args.file} in [{dirs}]", file=sys.stderr)
        return EXIT_FALSE

    print(Dir(found).display(sep=_separator(conf)))
    return EXIT_OK


def _cmd_dump_config(args: Any, conf: Dict[str, Any]) -> int:
    print(json.dumps(conf, ensure_ascii=False, indent=2))
    return EXIT_OK


_COMMANDS: Dict[str, Callable[[Any, Dict[str, Any]], int]] = {
    "normalize": _cmd_normalize,
    "join": _cmd_join,
    "contains": _cmd_contains,
    "find-include": _cmd_find_include,
    "dump-config": _cmd_dump_config,
}

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override keys into the base configuration.
    """
    out = dict(base)
    for k in ("include_dirs", "check_exists", "separator", "log_level"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _separator(conf: Dict[str, Any]) -> str:
    return POSIX_SEP if conf.get("separator") == "posix" else os.sep
