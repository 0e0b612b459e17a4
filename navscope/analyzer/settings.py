"""Tunable knobs for the structural analyzer."""

from __future__ import annotations

import dataclasses as dc

from navscope._constants import FALLBACK_TITLE_CHARS, TITLE_MAX_LENGTH

from .patterns import SECTION_PATTERNS, TITLE_PATTERNS, TOC_PATTERNS


@dc.dataclass(frozen=True, slots=True)
class AnalyzerSettings:
    """Candidate pattern lists and title limits applied during analysis.

    Attributes
    ----------
    toc_patterns : tuple[str, ...]
        CSS selectors tried when looking for TOC items, most specific first.
    section_patterns : tuple[str, ...]
        CSS selectors tried when partitioning the document into sections.
    title_patterns : tuple[str, ...]
        CSS selectors searched, in order, for a section's title element.
    title_max_length : int
        Maximum title length, ellipsis included.
    fallback_title_chars : int
        Number of leading characters considered when a section has no title
        element and its own text has to stand in for one.
    """

    toc_patterns: tuple[str, ...] = TOC_PATTERNS
    section_patterns: tuple[str, ...] = SECTION_PATTERNS
    title_patterns: tuple[str, ...] = TITLE_PATTERNS
    title_max_length: int = TITLE_MAX_LENGTH
    fallback_title_chars: int = FALLBACK_TITLE_CHARS


__all__ = ["AnalyzerSettings"]
