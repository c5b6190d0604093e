#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/matching.py
"""Literal prefix matching for single input lines.

Matching is exact and case-sensitive. No whitespace is trimmed, and only
the leading occurrence of the prefix is removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def match_prefix(line: str, prefix: str) -> tuple[bool, str]:
    """Test ``line`` against a literal ``prefix``.

    Parameters
    ----------
    line : str
        A single line of input, without its line terminator
    prefix : str
        The literal marker to look for at the start of ``line``

    Returns
    -------
    tuple[bool, str]
        ``(matched, remainder)``. On a match the remainder is ``line`` with
        the prefix removed from the front. Otherwise it is ``line``
        unchanged, so the remainder is always usable text.

    Examples
    --------
        >>> match_prefix("## Title", "## ")
        (True, 'Title')
        >>> match_prefix("##Title", "## ")
        (False, '##Title')
        >>> match_prefix("", "# ")
        (False, '')

    """
    # An empty line never matches, even against an empty prefix
    if not line:
        return False, line

    if line.startswith(prefix):
        return True, line[len(prefix) :]

    return False, line


@dataclass
class MutableLine:
    """One input line and its current unconsumed remainder.

    A fresh instance is created for every input line and discarded once the
    line has been rendered.

    Parameters
    ----------
    original : str
        The line as it appeared in the input

    Attributes
    ----------
    remainder : str
        The text not yet consumed by a prefix. Starts out equal to ``original``.

    """

    original: str
    remainder: str = field(init=False)

    def __post_init__(self) -> None:
        """Start with the whole line unconsumed."""
        self.remainder = self.original

    def consume(self, prefix: str) -> bool:
        """Strip ``prefix`` from the remainder if it matches.

        Returns
        -------
        bool
            True when the prefix matched and was removed

        """
        matched, self.remainder = match_prefix(self.remainder, prefix)
        return matched
