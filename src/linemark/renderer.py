#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/renderer.py
"""Rendering of classified lines into an HTML output accumulator.

A single rendering function, parameterized by the line category and a
:class:`~linemark.tags.TagCatalog`, replaces one renderer per element type.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from linemark.constants import LineCategory
from linemark.tags import TagCatalog

logger = logging.getLogger(__name__)


class OutputAccumulator:
    """Append-only sink for rendered HTML fragments.

    One accumulator belongs to exactly one conversion run. Fragments are kept
    in the order they were appended and joined once at the end.
    """

    def __init__(self) -> None:
        """Initialize an empty accumulator."""
        self._fragments: list[str] = []

    def append(self, fragment: str) -> None:
        """Append a fragment to the end of the output."""
        self._fragments.append(fragment)

    def getvalue(self) -> str:
        """Return the concatenation of all appended fragments."""
        return "".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)


def render_line(
    category: LineCategory, text: str, accumulator: OutputAccumulator, catalog: Optional[TagCatalog] = None
) -> None:
    """Append the open-tag, content, close-tag triple for one line.

    The text is written verbatim: it is neither escaped nor trimmed. Calling
    this twice for the same line appends the triple twice.

    Parameters
    ----------
    category : LineCategory
        Category the line was classified as
    text : str
        Line content with any matched prefix already removed
    accumulator : OutputAccumulator
        Output sink to append to
    catalog : TagCatalog, optional
        Element lookup; a default catalog is used when omitted

    """
    catalog = catalog or TagCatalog()
    accumulator.append(catalog.opening_tag(category))
    accumulator.append(text)
    accumulator.append(catalog.closing_tag(category))


class CategoryRenderer:
    """Rendering strategy bound to one :class:`TagCatalog`.

    Parameters
    ----------
    catalog : TagCatalog, optional
        Element lookup shared by every rule of a chain

    """

    def __init__(self, catalog: Optional[TagCatalog] = None) -> None:
        """Initialize the renderer with a tag catalog."""
        self.catalog = catalog or TagCatalog()

    def render(self, category: LineCategory, text: str, accumulator: OutputAccumulator) -> None:
        """Render ``text`` as ``category`` into ``accumulator``."""
        logger.debug("Rendering %s line (%d chars)", category.value, len(text))
        render_line(category, text, accumulator, self.catalog)
