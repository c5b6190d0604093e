#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for linemark.

This module centralizes the literal prefix markers, element names and CLI
defaults used across the package.

Constants are organized by category:
1. Type Definitions - Enums and Literal types
2. Line Markup - Prefix markers and element names
3. CLI Defaults - Command-line and watch mode settings
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================


class LineCategory(Enum):
    """Structural role of a single input line.

    Every line resolves to exactly one member. ``PARAGRAPH`` is the universal
    fallback and is never the target of a prefix rule.
    """

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    HORIZONTAL_RULE = "horizontal_rule"
    PARAGRAPH = "paragraph"


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Line Markup
# =============================================================================

LINE_SEPARATOR = "\n"

HEADING_1_PREFIX = "# "
HEADING_2_PREFIX = "## "
HEADING_3_PREFIX = "### "
HORIZONTAL_RULE_PREFIX = "---"

# Evaluation order of the prefixed rules; paragraph is implied last
DEFAULT_RULES: tuple[tuple[str, LineCategory], ...] = (
    (HEADING_1_PREFIX, LineCategory.HEADING_1),
    (HEADING_2_PREFIX, LineCategory.HEADING_2),
    (HEADING_3_PREFIX, LineCategory.HEADING_3),
    (HORIZONTAL_RULE_PREFIX, LineCategory.HORIZONTAL_RULE),
)

FALLBACK_ELEMENT = "p"

DEFAULT_ELEMENT_NAMES: dict[LineCategory, str] = {
    LineCategory.HEADING_1: "h1",
    LineCategory.HEADING_2: "h2",
    LineCategory.HEADING_3: "h3",
    LineCategory.HORIZONTAL_RULE: "hr",
    LineCategory.PARAGRAPH: FALLBACK_ELEMENT,
}

# =============================================================================
# CLI Defaults
# =============================================================================

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"
DEFAULT_RICH_CODE_THEME = "monokai"
DEFAULT_WATCH_DEBOUNCE = 0.5
STDIN_MARKER = "-"
ENV_VAR_PREFIX = "LINEMARK_"
