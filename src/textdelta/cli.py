#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textdelta/cli.py
"""Command line interface for textdelta.

Compare two text files (or one file and stdin) and print a colored,
word-highlighted diff::

    textdelta old.json new.json
    textdelta --side-by-side --width 120 old.txt new.txt
    cat new.txt | textdelta old.txt -

Exit codes follow the ``diff`` convention when ``--exit-code`` is given:
0 for no differences, 1 when differences were found. Errors use 2
(generic), 3 (invalid option), 4 (unreadable input) and 5 (bad
configuration file).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from textdelta import __version__
from textdelta.api import diff_with
from textdelta.config import env_overrides, load_config_with_priority, options_from_mapping, parse_color_mode
from textdelta.constants import COLOR_MODES, DEFAULT_CONTEXT_LINES, LAYOUT_MODES, LOG_LEVELS
from textdelta.exceptions import ConfigError, InputError, TextDeltaError, ValidationError
from textdelta.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_INPUT_ERROR = 4
EXIT_CONFIG_ERROR = 5


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, InputError):
        return EXIT_INPUT_ERROR
    if isinstance(exception, ConfigError):
        return EXIT_CONFIG_ERROR
    return EXIT_ERROR


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Parameters
    ----------
    value : str
        Context lines value as string

    Returns
    -------
    int
        Validated context lines value

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _validate_width(value: str) -> int:
    """Validate a terminal width (non-negative integer, 0 = auto)."""
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"width must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"width must be non-negative, got {ivalue}")

    return ivalue


def _create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Option defaults are ``None`` so that values coming from the environment
    or a configuration file are only overridden by flags actually given.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="textdelta",
        description="Show a human-readable diff of two texts with word-level highlighting",
    )

    parser.add_argument("old", help="Original file (use '-' for stdin)")
    parser.add_argument("new", help="Modified file (use '-' for stdin)")

    parser.add_argument(
        "--context",
        "-C",
        type=_validate_context_lines,
        default=None,
        help=f"Number of unchanged lines shown around each change (default: {DEFAULT_CONTEXT_LINES})",
    )

    layout_group = parser.add_mutually_exclusive_group()
    layout_group.add_argument(
        "--layout",
        choices=LAYOUT_MODES,
        default=None,
        help="Output layout (default: inline)",
    )
    layout_group.add_argument(
        "--side-by-side",
        "-s",
        dest="layout",
        action="store_const",
        const="side-by-side",
        help="Shortcut for --layout side-by-side",
    )

    parser.add_argument(
        "--width",
        "-W",
        type=_validate_width,
        default=None,
        help="Terminal width for side-by-side output (default: 0, detect from the terminal)",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Colorize output: auto (default, if terminal), always, never",
    )

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", help="Path to a configuration file (.toml, .yaml, .json)")
    config_group.add_argument(
        "--no-config",
        action="store_true",
        help="Do not load any configuration file",
    )

    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when differences are found (like diff)",
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help="Logging level (default: $TEXTDELTA_LOG_LEVEL, else WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging with timestamps and logger names",
    )
    parser.add_argument("--version", "-V", action="version", version=f"textdelta {__version__}")

    return parser


def _read_input(path: str) -> str:
    """Read one input as UTF-8 text; ``-`` reads stdin.

    Raises
    ------
    InputError
        If the file is missing, unreadable or not valid UTF-8

    """
    if path == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Could not read stdin: {e}", input_path=path, original_error=e) from e

    file_path = Path(path)
    if not file_path.exists():
        raise InputError(f"File not found: {path}", input_path=path)
    if not file_path.is_file():
        raise InputError(f"Not a file: {path}", input_path=path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read {path}: {e}", input_path=path, original_error=e) from e


def _cli_overrides(parsed: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if parsed.context is not None:
        overrides["context_lines"] = parsed.context
    if parsed.layout is not None:
        overrides["layout"] = parsed.layout
    if parsed.width is not None:
        overrides["width"] = parsed.width
    if parsed.color is not None:
        overrides["color"] = parse_color_mode(parsed.color)
    return overrides


def main(args: list[str] | None = None) -> int:
    """Run the textdelta command line interface.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = _create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    if parsed.old == "-" and parsed.new == "-":
        print("Error: Cannot read both old and new from stdin", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        config = load_config_with_priority(parsed.config, discover=not parsed.no_config)
        options = options_from_mapping(config)
        options = options.create_updated(**env_overrides())
        options = options.create_updated(**_cli_overrides(parsed))
        logger.debug("Resolved options: %s", options)

        old_text = _read_input(parsed.old)
        new_text = _read_input(parsed.new)

        output = diff_with(old_text, new_text, options, stream=sys.stdout)
    except TextDeltaError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not output:
        print("No differences found.", file=sys.stderr)
        return EXIT_SUCCESS

    sys.stdout.write(output)
    sys.stdout.flush()
    return EXIT_DIFFERENCES if parsed.exit_code else EXIT_SUCCESS
