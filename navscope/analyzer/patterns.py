"""Candidate selector patterns and text clean-up rules used by the analyzer.

The pattern tuples are ordered from the most specific markup convention to
the most generic one. Order only breaks ties: the extractor evaluates every
pattern and keeps the one that finds the most items.
"""

from __future__ import annotations

import re

from navscope._constants import ELLIPSIS, TITLE_MAX_LENGTH

TOC_PATTERNS: tuple[str, ...] = (
    ".nav-menu .nav-item",
    ".sidebar-menu .menu-item",
    ".toc-menu li",
    ".sidebar ul li",
    "nav ul li",
    ".sidebar-section ul li",
    '[class*="nav"] [class*="item"]',
    "aside ul li",
    ".side-menu li, .sidemenu li",
)

SECTION_PATTERNS: tuple[str, ...] = (
    ".slide",
    ".content-section",
    '#slide-1, #slide1, [id^="slide"]',
    ".page, .section",
    "article, section",
    '[class*="slide"], [class*="content"]',
    "main > div",
)

TITLE_PATTERNS: tuple[str, ...] = (
    ".slide-title",
    ".section-title",
    ".concept-title",
    ".content-title",
    "h1",
    "h2",
    "h3",
    '[class*="title"]',
    "strong",
    "b",
    "header",
)

HEADING_PATTERN = "h1, h2, h3, h4"
ICON_PATTERN = "i, .icon"
LINK_PATTERN = "a"
STRUCTURAL_ID_KEYWORDS: tuple[str, ...] = ("slide", "item")

# General punctuation, supplemental punctuation, CJK symbols, full-width forms.
LEADING_SYMBOL = re.compile(
    r"^\s*[\u2000-\u206F\u2E00-\u2E7F\u3000-\u303F\uFF00-\uFFEF]\s*"
)
SENTENCE_BOUNDARY = re.compile(r"[.。!！?？]")


def strip_leading_symbol(text: str) -> str:
    """Drop one leading icon-font or punctuation glyph from ``text``."""
    return LEADING_SYMBOL.sub("", text, count=1)


def truncate_title(text: str, max_length: int = TITLE_MAX_LENGTH) -> str:
    """Shorten ``text`` to ``max_length`` characters including the ellipsis.

    Examples
    --------
    >>> truncate_title("x" * 60)[-5:]
    'xx...'
    >>> len(truncate_title("x" * 60))
    50
    >>> truncate_title("short")
    'short'
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


__all__ = [
    "HEADING_PATTERN",
    "ICON_PATTERN",
    "LEADING_SYMBOL",
    "LINK_PATTERN",
    "SECTION_PATTERNS",
    "SENTENCE_BOUNDARY",
    "STRUCTURAL_ID_KEYWORDS",
    "TITLE_PATTERNS",
    "TOC_PATTERNS",
    "strip_leading_symbol",
    "truncate_title",
]
