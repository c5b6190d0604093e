#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/api.py
"""File-level conversion helpers.

These wrap :func:`linemark.convert` with reading from a path or stdin and
optionally writing the HTML to a file. I/O failures are reported with the
library's file exceptions.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Optional, Union

from linemark.constants import DEFAULT_ENCODING, STDIN_MARKER
from linemark.converter import DocumentConverter
from linemark.exceptions import FileAccessError, InputFileNotFoundError, OutputWriteError
from linemark.progress import ProgressCallback

logger = logging.getLogger(__name__)


def read_source(source: Union[str, Path, IO[str]], encoding: str = DEFAULT_ENCODING) -> str:
    """Read markup text from a path, ``"-"`` (stdin) or a text stream.

    Parameters
    ----------
    source : str, Path or IO[str]
        Where to read from
    encoding : str, default "utf-8"
        Encoding used for paths

    Returns
    -------
    str
        The text, with platform line endings translated to ``\\n``

    Raises
    ------
    InputFileNotFoundError
        If ``source`` names a file that does not exist
    FileAccessError
        If ``source`` is a directory, unreadable, not valid in ``encoding``,
        or ``encoding`` is not a known codec

    """
    if isinstance(source, str) and source == STDIN_MARKER:
        return sys.stdin.read()
    if not isinstance(source, (str, Path)):
        return source.read()

    path = Path(source)
    if not path.exists():
        raise InputFileNotFoundError(str(path))
    if not path.is_file():
        raise FileAccessError(str(path), message=f"Not a regular file: {path}")

    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileAccessError(
            str(path), message=f"Cannot decode {path} as {encoding}: {e.reason}", original_error=e
        ) from e
    except LookupError as e:
        raise FileAccessError(str(path), message=f"Unknown encoding: {encoding}", original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(path), original_error=e) from e


def write_output(html: str, output: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Path:
    """Write ``html`` to ``output``, creating parent directories as needed.

    Raises
    ------
    OutputWriteError
        If the file cannot be written, the encoding is unknown, or the
        HTML cannot be represented in it

    """
    path = Path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding=encoding)
    except UnicodeEncodeError as e:
        raise OutputWriteError(
            str(path), message=f"Cannot encode output for {path} as {encoding}: {e.reason}", original_error=e
        ) from e
    except LookupError as e:
        raise OutputWriteError(str(path), message=f"Unknown encoding: {encoding}", original_error=e) from e
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    logger.info("Wrote %d characters to %s", len(html), path)
    return path


def convert_file(
    source: Union[str, Path, IO[str]],
    output: Optional[Union[str, Path]] = None,
    encoding: str = DEFAULT_ENCODING,
    progress_callback: Optional[ProgressCallback] = None,
) -> str:
    """Convert a markup file to HTML.

    Parameters
    ----------
    source : str, Path or IO[str]
        Input path, ``"-"`` for stdin, or an open text stream
    output : str or Path, optional
        When given, the HTML is also written to this path
    encoding : str, default "utf-8"
        Encoding for reading and writing files
    progress_callback : ProgressCallback, optional
        Observer passed through to :class:`~linemark.converter.DocumentConverter`

    Returns
    -------
    str
        The rendered HTML fragment

    """
    text = read_source(source, encoding=encoding)
    logger.debug("Read %d characters from %s", len(text), source)
    html = DocumentConverter(progress_callback=progress_callback).convert(text)
    if output is not None:
        write_output(html, output, encoding=encoding)
    return html
