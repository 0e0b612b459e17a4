"""Resolve navigation requests against an analysed document.

These helpers answer the questions a presentation layer asks once a document
has been analysed: which section opens first, which section a TOC entry leads
to, and whether an in-document ``#anchor`` points at another section or at
something inside the current one.

Examples
--------
>>> from navscope.analyzer import StructuralAnalyzer
>>> result = StructuralAnalyzer().analyze(
...     '<div class="slide" id="slide-1">A</div>'
...     '<div class="slide" id="slide-2">B</div>'
... )
>>> find_section(result, "2").id
'slide-2'
>>> initial_section(result).id
'slide-1'
"""

from __future__ import annotations

import typing as typ

from loguru import logger

from navscope.analyzer.reconcile import candidate_section_ids

if typ.TYPE_CHECKING:
    from navscope.models import AnalysisResult, Section


def initial_section(analysis: AnalysisResult) -> Section | None:
    """Return the first active section, else the first section, else None."""
    for section in analysis.sections:
        if section.is_active:
            return section
    return analysis.sections[0] if analysis.sections else None


def find_section(analysis: AnalysisResult, target: str) -> Section | None:
    """Return the section a TOC entry or section id ``target`` navigates to.

    A section matches when its id equals ``target`` under the ``slide-`` and
    ``slide`` spellings, or when reconciliation linked it to ``target``.
    """
    candidates = candidate_section_ids(target)
    for section in analysis.sections:
        if section.id in candidates or section.nav_ref == target:
            return section
    logger.warning(f"Section {target!r} not found in {analysis.title!r}")
    return None


def resolve_anchor(analysis: AnalysisResult, href: str) -> Section | None:
    """Return the section an in-document link such as ``#intro`` points at.

    ``None`` means the fragment does not name a section; the target, if it
    exists, lies inside the section already on display.
    """
    target = href[1:] if href.startswith("#") else href
    if not target:
        return None
    candidates = candidate_section_ids(target)
    for section in analysis.sections:
        if section.id in candidates:
            return section
    return None


def entry_targets(analysis: AnalysisResult) -> dict[str, Section | None]:
    """Map every TOC entry id to the section it opens, or None when unresolved."""
    return {
        entry.id: find_section(analysis, entry.id) for entry in analysis.toc_entries
    }


__all__ = ["entry_targets", "find_section", "initial_section", "resolve_anchor"]
