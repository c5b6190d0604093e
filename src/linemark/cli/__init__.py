"""Command-line interface for linemark.

Converts a markup file (or stdin) to an HTML fragment and writes it to stdout
or a file. The watch mode keeps an HTML file up to date while the markup is
being edited.

Environment Variable Support
----------------------------
All CLI options support environment variable defaults using the pattern
LINEMARK_<OPTION_NAME> where option names are converted to uppercase with
hyphens replaced by underscores. CLI arguments always override environment
variables, and environment variables override config files.

Examples
--------
Basic conversion::

    $ linemark notes.txt

Specify output file::

    $ linemark notes.txt --out notes.html

Read from stdin::

    $ printf '# Title\\nBody' | linemark

Highlighted terminal output::

    $ linemark notes.txt --rich

Live preview while editing::

    $ linemark notes.txt --out preview.html --watch

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path

from linemark.api import convert_file
from linemark.cli.builder import (
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    apply_config_to_parser,
    apply_env_vars_to_parser,
    create_parser,
    get_exit_code_for_exception,
)
from linemark.cli.config import load_config_with_priority
from linemark.cli.output import print_html
from linemark.constants import STDIN_MARKER
from linemark.exceptions import LinemarkError
from linemark.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_parser(args: list[str] | None) -> argparse.ArgumentParser:
    """Create the parser with config file and environment defaults applied.

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file cannot be loaded
    ValidationError
        If a config file holds an invalid value

    """
    parser = create_parser()

    # Only --config/--no-config are needed to decide which file to load
    pre_args, _ = parser.parse_known_args(args)
    if not pre_args.no_config:
        config, config_path = load_config_with_priority(
            explicit_path=pre_args.config, env_var_path=os.environ.get("LINEMARK_CONFIG")
        )
        if config_path is not None:
            apply_config_to_parser(parser, config, str(config_path))

    apply_env_vars_to_parser(parser)
    return parser


def _handle_watch_mode(parsed_args: argparse.Namespace) -> int:
    """Validate watch mode arguments and run the watcher."""
    if parsed_args.input == STDIN_MARKER:
        print("Error: --watch requires an input file, not stdin", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    if not parsed_args.out:
        print("Error: --watch requires --out to be specified", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    if not Path(parsed_args.input).is_file():
        print(f"Error: Input file not found: {parsed_args.input}", file=sys.stderr)
        return EXIT_FILE_ERROR

    from linemark.cli.watch import run_watch_mode

    return run_watch_mode(
        Path(parsed_args.input),
        Path(parsed_args.out),
        encoding=parsed_args.encoding,
        debounce=parsed_args.watch_debounce,
    )


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code."""
    try:
        parser = _build_parser(args)
    except (argparse.ArgumentTypeError, LinemarkError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    if parsed_args.watch_debounce < 0:
        print("Error: --watch-debounce must not be negative", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.watch:
        return _handle_watch_mode(parsed_args)

    try:
        html = convert_file(parsed_args.input, output=parsed_args.out, encoding=parsed_args.encoding)
    except LinemarkError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if not parsed_args.out:
        print_html(html, parsed_args)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
