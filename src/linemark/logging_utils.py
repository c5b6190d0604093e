#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/logging_utils.py
"""Centralized logging utilities for linemark entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from linemark.constants import DEFAULT_LOG_LEVEL

# Third-party loggers that are noisy below INFO during watch mode
_QUIET_LOGGERS = ("watchdog",)


def resolve_log_level(log_level: int | str | None) -> int:
    """Turn a level name or number into a numeric level.

    Unknown names and ``None`` resolve to the package default
    (``DEFAULT_LOG_LEVEL``).
    """
    if isinstance(log_level, int):
        return log_level
    default = getattr(logging, DEFAULT_LOG_LEVEL)
    if log_level is None:
        return default
    level = getattr(logging, str(log_level).upper(), None)
    return level if isinstance(level, int) else default


def configure_logging(
    log_level: int | str | None = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the linemark command-line interface.

    Parameters
    ----------
    log_level : int | str | None, default "WARNING"
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    Notes
    -----
    The watchdog observer's own loggers are held at INFO or above unless
    trace mode is on, so ``--log-level DEBUG`` shows linemark's per-line
    classification without file system event chatter.

    """
    resolved_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(resolved_level if trace_mode else max(resolved_level, logging.INFO))

    return root_logger
