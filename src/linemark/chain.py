#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linemark/chain.py
"""Ordered classification of input lines.

The chain is an immutable, ordered tuple of ``(prefix, category)`` rules
walked by straight iteration. The first rule whose prefix matches wins; a
line matching no rule is a paragraph.

Rule order is part of the contract. The built-in order is::

    "# "   -> heading 1
    "## "  -> heading 2
    "### " -> heading 3
    "---"  -> horizontal rule
    (any)  -> paragraph

Each heading prefix ends in a space, so no prefix in this list is a literal
prefix of a later one and the order is safe. Chains built from custom rules
are checked for the same property.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from linemark.constants import DEFAULT_RULES, LineCategory
from linemark.exceptions import ValidationError
from linemark.matching import MutableLine
from linemark.renderer import CategoryRenderer, OutputAccumulator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationRule:
    """A literal prefix paired with the category it selects.

    Parameters
    ----------
    prefix : str
        Literal marker matched at the start of a line
    category : LineCategory
        Category assigned to lines starting with ``prefix``

    """

    prefix: str
    category: LineCategory

    def __post_init__(self) -> None:
        """Reject rules that could never be told apart from the fallback.

        Raises
        ------
        ValidationError
            If the prefix is empty or the category is the paragraph fallback

        """
        if not self.prefix:
            raise ValidationError(
                "Classification rules require a non-empty prefix",
                parameter_name="prefix",
                parameter_value=self.prefix,
            )
        if self.category is LineCategory.PARAGRAPH:
            raise ValidationError(
                "Paragraph is the fallback category and cannot be selected by a prefix rule",
                parameter_name="category",
                parameter_value=self.category,
            )


def _check_rule_order(rules: tuple[ClassificationRule, ...]) -> None:
    """Ensure no rule is shadowed by an earlier one.

    A rule is unreachable when an earlier rule's prefix is also a prefix of
    its own, because every line it would match is claimed first.
    """
    for index, rule in enumerate(rules):
        for earlier in rules[:index]:
            if rule.prefix.startswith(earlier.prefix):
                raise ValidationError(
                    f"Rule {rule.prefix!r} -> {rule.category.name} is shadowed by earlier rule "
                    f"{earlier.prefix!r} -> {earlier.category.name}; order longer prefixes first",
                    parameter_name="rules",
                    parameter_value=[r.prefix for r in rules],
                )


class ClassificationChain:
    """Classify and render lines through an ordered list of prefix rules.

    Parameters
    ----------
    rules : Iterable[ClassificationRule]
        Prefixed rules in evaluation order. The paragraph fallback is always
        appended implicitly.
    renderer : CategoryRenderer, optional
        Rendering strategy shared by every rule

    Raises
    ------
    ValidationError
        If a rule would be shadowed by an earlier rule

    Examples
    --------
        >>> chain = ClassificationChain.default()
        >>> chain.classify("## Sub")
        (<LineCategory.HEADING_2: 'heading_2'>, 'Sub')
        >>> chain.classify("##Sub")
        (<LineCategory.PARAGRAPH: 'paragraph'>, '##Sub')

    """

    def __init__(self, rules: Iterable[ClassificationRule], renderer: Optional[CategoryRenderer] = None) -> None:
        """Freeze the rule list and validate its order."""
        self._rules: tuple[ClassificationRule, ...] = tuple(rules)
        _check_rule_order(self._rules)
        self.renderer = renderer or CategoryRenderer()
        logger.debug("Built classification chain: %s", " -> ".join(repr(r.prefix) for r in self._rules))

    @classmethod
    def default(cls, renderer: Optional[CategoryRenderer] = None) -> "ClassificationChain":
        """Build the chain with the built-in heading, rule and paragraph order."""
        return cls((ClassificationRule(prefix, category) for prefix, category in DEFAULT_RULES), renderer)

    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        """The prefixed rules in evaluation order."""
        return self._rules

    def __iter__(self) -> Iterator[ClassificationRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def _resolve(self, line: MutableLine) -> LineCategory:
        for rule in self._rules:
            if line.consume(rule.prefix):
                return rule.category
        return LineCategory.PARAGRAPH

    def classify(self, line: str) -> tuple[LineCategory, str]:
        """Classify a single line without rendering it.

        Parameters
        ----------
        line : str
            One input line without its terminator

        Returns
        -------
        tuple[LineCategory, str]
            The winning category and the remainder after its prefix was
            removed. Paragraph lines return the whole line.

        """
        working = MutableLine(line)
        category = self._resolve(working)
        return category, working.remainder

    def process(self, line: str, accumulator: OutputAccumulator) -> LineCategory:
        """Classify ``line`` and render it into ``accumulator``.

        Exactly one element is rendered per call.

        Returns
        -------
        LineCategory
            The category the line was rendered as

        """
        category, remainder = self.classify(line)
        logger.debug("Classified line %r as %s", line, category.name)
        self.renderer.render(category, remainder, accumulator)
        return category
