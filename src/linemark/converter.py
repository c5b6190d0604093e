#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/converter.py
"""Whole-document conversion from line markup to an HTML fragment.

The converter splits its input on ``\\n``, feeds each line through a freshly
built :class:`~linemark.chain.ClassificationChain` in input order and
returns the concatenated output. Conversion is total: every ``str`` input
produces a result.

Examples
--------
    >>> from linemark import convert
    >>> convert("# A\\nPlain\\n## B")
    '<h1>A</h1><p>Plain</p><h2>B</h2>'

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from linemark.chain import ClassificationChain
from linemark.constants import LINE_SEPARATOR
from linemark.progress import EventType, ProgressCallback, ProgressEvent
from linemark.renderer import OutputAccumulator

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, keeping empty lines as empty strings.

    ``"\\r"`` is not treated as a separator and stays part of the line.
    """
    return text.split(LINE_SEPARATOR)


class DocumentConverter:
    """Convert line markup to HTML.

    Parameters
    ----------
    progress_callback : ProgressCallback, optional
        Observer notified when a conversion starts, after each line and when
        it finishes

    """

    def __init__(self, progress_callback: Optional[ProgressCallback] = None) -> None:
        """Initialize the converter with an optional progress observer."""
        self.progress_callback = progress_callback

    def _emit_progress(
        self, event_type: EventType, message: str, current: int = 0, total: int = 0, **metadata: Any
    ) -> None:
        if self.progress_callback is None:
            return
        try:
            self.progress_callback(
                ProgressEvent(event_type=event_type, message=message, current=current, total=total, metadata=metadata)
            )
        except Exception as e:
            logger.warning("Progress callback failed on %s event: %s", event_type, e)

    def convert(self, text: str) -> str:
        """Convert ``text`` to an HTML fragment.

        Parameters
        ----------
        text : str
            Document in line markup

        Returns
        -------
        str
            One element per input line, concatenated in input order

        """
        chain = ClassificationChain.default()
        accumulator = OutputAccumulator()
        lines = split_lines(text)
        total = len(lines)

        self._emit_progress("started", "Converting document", current=0, total=total)
        for index, line in enumerate(lines, start=1):
            category = chain.process(line, accumulator)
            self._emit_progress(
                "item_done",
                f"Line {index} of {total}",
                current=index,
                total=total,
                item_type="line",
                category=category.value,
            )
        self._emit_progress("finished", "Conversion complete", current=total, total=total)

        logger.debug("Converted %d line(s)", total)
        return accumulator.getvalue()


def convert(text: str) -> str:
    """Convert line markup ``text`` to an HTML fragment.

    Shorthand for ``DocumentConverter().convert(text)``.
    """
    return DocumentConverter().convert(text)
