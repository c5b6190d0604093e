#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/tags.py
"""Element names and tag strings for each line category."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from linemark.constants import DEFAULT_ELEMENT_NAMES, FALLBACK_ELEMENT, LineCategory


class TagCatalog:
    """Read-only lookup from a line category to its HTML element.

    A category without a registered element falls back to the paragraph
    element, so the catalog never produces an empty or malformed tag.

    Parameters
    ----------
    element_names : Mapping[LineCategory, str], optional
        Category to element name table. Defaults to the five built-in
        categories.

    Examples
    --------
        >>> catalog = TagCatalog()
        >>> catalog.opening_tag(LineCategory.HEADING_2)
        '<h2>'
        >>> catalog.closing_tag(LineCategory.HORIZONTAL_RULE)
        '</hr>'

    """

    def __init__(self, element_names: Optional[Mapping[LineCategory, str]] = None) -> None:
        """Initialize the catalog with a copy of the element table."""
        table = DEFAULT_ELEMENT_NAMES if element_names is None else element_names
        self._elements: Mapping[LineCategory, str] = MappingProxyType(dict(table))

    def element_name(self, category: LineCategory) -> str:
        """Return the element name for ``category`` or ``p`` when unregistered."""
        return self._elements.get(category) or FALLBACK_ELEMENT

    def opening_tag(self, category: LineCategory) -> str:
        """Return the opening tag, e.g. ``<h1>``."""
        return f"<{self.element_name(category)}>"

    def closing_tag(self, category: LineCategory) -> str:
        """Return the closing tag, e.g. ``</h1>``."""
        return f"</{self.element_name(category)}>"

    def __contains__(self, category: object) -> bool:
        return category in self._elements

    def __repr__(self) -> str:
        names = ", ".join(f"{cat.name}={elem!r}" for cat, elem in self._elements.items())
        return f"{self.__class__.__name__}({names})"
