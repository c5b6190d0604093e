#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/progress.py
"""Progress callback system for document conversion.

Embedders such as live previews can observe a conversion line by line.
Callbacks are purely observational and never change the output.

Examples
--------
    >>> from linemark.converter import DocumentConverter
    >>> from linemark.progress import ProgressEvent
    >>>
    >>> def on_progress(event: ProgressEvent) -> None:
    ...     print(event)
    >>>
    >>> html = DocumentConverter(progress_callback=on_progress).convert("# Title")

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

EventType = Literal["started", "item_done", "finished", "error"]


@dataclass
class ProgressEvent:
    """Progress event emitted during a conversion.

    Parameters
    ----------
    event_type : EventType
        Type of progress event:

        - "started": Conversion has begun; ``total`` is the line count.
        - "item_done": One line has been rendered. ``metadata["item_type"]``
          is ``"line"`` and ``metadata["category"]`` the category value.
        - "finished": All lines have been rendered.
        - "error": Something outside the conversion failed, e.g. a watched
          file could not be read. Details in ``metadata["error"]``.

    message : str
        Human-readable description of the event
    current : int, default 0
        Lines processed so far
    total : int, default 0
        Total lines to process
    metadata : dict, default empty
        Additional event-specific information

    """

    event_type: EventType
    message: str
    current: int = 0
    total: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation."""
        progress = f"({self.current}/{self.total})" if self.total > 0 else ""
        return f"[{self.event_type.upper()}] {self.message} {progress}".strip()


ProgressCallback = Callable[[ProgressEvent], None]
"""Type alias for progress callback functions.

Callbacks should not raise; an exception from a callback is logged and
otherwise ignored.
"""
