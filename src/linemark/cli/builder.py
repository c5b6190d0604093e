#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/cli/builder.py
"""Argument parser construction and exit codes for the linemark CLI.

Option defaults are layered: built-in defaults, then values from a config
file, then ``LINEMARK_*`` environment variables. Explicit command-line
arguments always win.
"""

from __future__ import annotations

import argparse
import difflib
import logging
import os
from typing import Any, Mapping, Optional, get_args

from pygments.styles import get_all_styles

from linemark import __version__
from linemark.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RICH_CODE_THEME,
    DEFAULT_WATCH_DEBOUNCE,
    ENV_VAR_PREFIX,
    STDIN_MARKER,
    LogLevel,
)
from linemark.exceptions import FileError, RenderingError, ValidationError

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

_TRUE_VALUES = ("true", "1", "yes", "on")

# Options that only make sense on the command line
_NON_CONFIGURABLE = frozenset({"help", "version", "input", "config", "no_config"})


def validate_pygments_theme(theme_name: str) -> str:
    """Validate that a Pygments theme name is valid.

    Parameters
    ----------
    theme_name : str
        Theme name to validate

    Returns
    -------
    str
        The validated theme name

    Raises
    ------
    argparse.ArgumentTypeError
        If theme name is not valid

    """
    available_themes = list(get_all_styles())
    if theme_name not in available_themes:
        suggestions = sorted(difflib.get_close_matches(theme_name, available_themes))
        hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
        raise argparse.ArgumentTypeError(
            f"Invalid Pygments theme '{theme_name}'.{hint} See https://pygments.org/styles/ for full list."
        )
    return theme_name


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``linemark`` command.

    Returns
    -------
    argparse.ArgumentParser
        Parser with all options registered and built-in defaults

    """
    parser = argparse.ArgumentParser(
        prog="linemark",
        description="Convert line-oriented markup (# / ## / ### headings, --- rules, paragraphs) to HTML.",
        epilog="Every option can be defaulted with a LINEMARK_<OPTION> environment variable.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_MARKER,
        help="Markup file to convert, or '-' to read from stdin (default: stdin)",
    )
    parser.add_argument("-o", "--out", dest="out", default=None, help="Write HTML to this file instead of stdout")
    parser.add_argument(
        "--encoding", default=DEFAULT_ENCODING, help=f"Encoding for input and output files (default: {DEFAULT_ENCODING})"
    )

    rich_group = parser.add_argument_group("Rich output")
    rich_group.add_argument("--rich", action="store_true", help="Syntax-highlight HTML written to a terminal")
    rich_group.add_argument(
        "--force-rich", action="store_true", help="Use rich output even when stdout is not a terminal"
    )
    rich_group.add_argument(
        "--rich-code-theme",
        default=DEFAULT_RICH_CODE_THEME,
        type=validate_pygments_theme,
        help=f"Pygments theme for rich output (default: {DEFAULT_RICH_CODE_THEME})",
    )

    watch_group = parser.add_argument_group("Watch mode")
    watch_group.add_argument(
        "--watch", action="store_true", help="Re-convert the input whenever it changes (requires --out)"
    )
    watch_group.add_argument(
        "--watch-debounce",
        type=float,
        default=DEFAULT_WATCH_DEBOUNCE,
        help=f"Seconds to ignore repeated change events (default: {DEFAULT_WATCH_DEBOUNCE})",
    )

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        choices=list(get_args(LogLevel)),
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    log_group.add_argument("--log-file", default=None, help="Also write log output to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", default=None, help="Load option defaults from a TOML, YAML or JSON file")
    config_group.add_argument(
        "--no-config", action="store_true", help="Do not discover or load any configuration file"
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _is_flag(action: argparse.Action) -> bool:
    return action.__class__.__name__ in ("_StoreTrueAction", "_StoreFalseAction")


def _coerce_value(action: argparse.Action, value: Any, source: str) -> Any:
    """Convert a config or environment value to the type ``action`` expects.

    Raises
    ------
    ValidationError
        If the value cannot be converted or is not an allowed choice

    """
    if _is_flag(action):
        flag = value if isinstance(value, bool) else str(value).strip().lower() in _TRUE_VALUES
        return flag if action.__class__.__name__ == "_StoreTrueAction" else not flag

    if action.type is not None and callable(action.type):
        try:
            value = action.type(value)
        except argparse.ArgumentTypeError as e:
            raise ValidationError(
                f"Invalid value for '{action.dest}' from {source}: {e}",
                parameter_name=action.dest,
                parameter_value=value,
                original_error=e,
            ) from e
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid value for '{action.dest}' from {source}: {value!r}",
                parameter_name=action.dest,
                parameter_value=value,
                original_error=e,
            ) from e

    if action.choices and value not in action.choices:
        raise ValidationError(
            f"Invalid choice for '{action.dest}' from {source}: {value!r}. Choices: {list(action.choices)}",
            parameter_name=action.dest,
            parameter_value=value,
        )
    return value


def _configurable_actions(parser: argparse.ArgumentParser) -> dict[str, argparse.Action]:
    return {
        action.dest: action
        for action in parser._actions
        if action.dest and action.dest not in _NON_CONFIGURABLE and action.dest != argparse.SUPPRESS
    }


def apply_config_to_parser(parser: argparse.ArgumentParser, config: Mapping[str, Any], source: str) -> None:
    """Use values from a loaded config file as parser defaults.

    Keys may use dashes or underscores. Unknown keys are logged and skipped.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    config : Mapping[str, Any]
        Configuration loaded by :func:`linemark.cli.config.load_config_file`
    source : str
        Description of where the config came from, for messages

    Raises
    ------
    ValidationError
        If a value has the wrong type or is not an allowed choice

    """
    actions = _configurable_actions(parser)
    for key, value in config.items():
        dest = str(key).replace("-", "_")
        action = actions.get(dest)
        if action is None:
            logger.warning("Ignoring unknown option '%s' in %s", key, source)
            continue
        action.default = _coerce_value(action, value, source)
        logger.debug("Default for '%s' set from %s", dest, source)


def get_env_var_value(key: str) -> Optional[str]:
    """Get an environment variable with the ``LINEMARK_`` prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'rich', 'log_level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables. Invalid
    values are logged and ignored.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for dest, action in _configurable_actions(parser).items():
        env_value = get_env_var_value(dest)
        if env_value is None:
            continue
        try:
            action.default = _coerce_value(action, env_value, f"{ENV_VAR_PREFIX}{dest.upper()}")
        except ValidationError as e:
            logger.warning("%s", e.message)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ImportError):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
