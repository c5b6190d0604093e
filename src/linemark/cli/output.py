"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/linemark/cli/output.py
import argparse
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.syntax import Syntax


def should_use_rich_output(args: argparse.Namespace, stream: Optional[TextIO] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set AND either --force-rich
    is set or the stream is a TTY. Output written to a file is never
    highlighted.

    """
    if not getattr(args, "rich", False) or getattr(args, "out", None):
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_html(html: str, args: argparse.Namespace, stream: Optional[TextIO] = None) -> None:
    """Write rendered HTML to ``stream``, highlighted when requested.

    Parameters
    ----------
    html : str
        The converted HTML fragment
    args : argparse.Namespace
        Parsed command line arguments
    stream : TextIO, optional
        Destination, defaults to sys.stdout

    """
    target = stream or sys.stdout
    if should_use_rich_output(args, target):
        console = Console(file=target, force_terminal=getattr(args, "force_rich", False) or None)
        console.print(Syntax(html, "html", theme=args.rich_code_theme, word_wrap=True))
        return

    target.write(html)
    target.write("\n")
