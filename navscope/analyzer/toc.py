"""Infer a table of contents from arbitrary navigation markup.

Each TOC pattern is scored by the number of valid entries it yields and the
best one wins. The search is a fold over the pattern list: the accumulator
carries the best count and entries seen so far, and every pattern is
evaluated. When no pattern produces anything, entries are synthesised from the
document's ``h1``..``h4`` headings.

Example
-------
>>> from navscope.tree import parse_document
>>> doc = parse_document(
...     '<nav><ul><li><a href="#a">A</a></li><li><a href="#b">B</a></li></ul></nav>'
... )
>>> [entry.id for entry in extract_toc_entries(doc)]
['a', 'b']
"""

from __future__ import annotations

import dataclasses as dc
import functools
import typing as typ

from loguru import logger

from navscope._constants import (
    ENTRY_TEXT_TEMPLATE,
    HEADING_ID_TEMPLATE,
    POSITIONAL_ID_TEMPLATE,
)
from navscope.models import TocEntry
from navscope.tree import collapse_whitespace

from .patterns import (
    HEADING_PATTERN,
    ICON_PATTERN,
    LINK_PATTERN,
    STRUCTURAL_ID_KEYWORDS,
    TOC_PATTERNS,
    strip_leading_symbol,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from navscope.tree import DocumentTree, ElementNode


@dc.dataclass(frozen=True, slots=True)
class _TocCandidate:
    """Accumulator threaded through the pattern fold."""

    count: int = 0
    entries: tuple[TocEntry, ...] = ()
    pattern: str | None = None


def extract_toc_entries(
    doc: DocumentTree, patterns: cabc.Sequence[str] = TOC_PATTERNS
) -> tuple[TocEntry, ...]:
    """Return the best TOC found in ``doc``, or a heading-derived one.

    Parameters
    ----------
    doc : DocumentTree
        Parsed document to query. The heading fallback writes ``id``
        attributes back onto the heading elements of this tree.
    patterns : Sequence[str], optional
        Candidate selectors, most specific first. Defaults to
        :data:`~navscope.analyzer.patterns.TOC_PATTERNS`.

    Returns
    -------
    tuple[TocEntry, ...]
        Entries of the winning pattern in document order; the heading
        fallback when no pattern yields a valid entry; empty when the
        document has neither navigation markup nor headings.
    """
    best = functools.reduce(
        functools.partial(_consider_pattern, doc), patterns, _TocCandidate()
    )
    if best.entries:
        logger.debug(f"TOC pattern {best.pattern!r} won with {best.count} entries")
        return best.entries
    return synthesize_heading_entries(doc)


def _consider_pattern(
    doc: DocumentTree, best: _TocCandidate, pattern: str
) -> _TocCandidate:
    """Return ``best`` or the candidate built from ``pattern``, whichever is larger."""
    try:
        items = doc.query_all(pattern)
        if len(items) <= best.count:
            return best
        entries = tuple(
            entry
            for entry in (
                _entry_from_item(item, index) for index, item in enumerate(items)
            )
            if entry.is_valid
        )
    except Exception as exc:  # noqa: BLE001 - patterns may come from user config
        logger.warning(f"TOC pattern {pattern!r} failed: {exc}")
        return best
    if len(entries) <= best.count:
        return best
    return _TocCandidate(count=len(entries), entries=entries, pattern=pattern)


def _entry_from_item(item: ElementNode, index: int) -> TocEntry:
    """Build a TOC entry from a matched navigation item."""
    link = item.query_one(LINK_PATTERN)
    entry_id = _derive_entry_id(item, link, index)

    icon = item.query_one(ICON_PATTERN)
    icon_ref = (icon.attr("class") or "") if icon is not None else ""

    label_source = link if link is not None else item
    text = strip_leading_symbol(collapse_whitespace(label_source.text()))
    if not text:
        text = ENTRY_TEXT_TEMPLATE.format(id=entry_id)

    return TocEntry(
        id=entry_id,
        text=text,
        icon_ref=icon_ref,
        is_active=item.has_class("active"),
    )


def _derive_entry_id(item: ElementNode, link: ElementNode | None, index: int) -> str:
    """Return the navigation target of ``item`` by attribute priority."""
    slide_attr = item.attr("data-slide")
    if slide_attr:
        return slide_attr
    href = link.attr("href") if link is not None else None
    if href:
        return href.replace("#", "", 1)
    own_id = item.attr("id")
    if own_id and any(keyword in own_id for keyword in STRUCTURAL_ID_KEYWORDS):
        return own_id
    return POSITIONAL_ID_TEMPLATE.format(index=index + 1)


def synthesize_heading_entries(doc: DocumentTree) -> tuple[TocEntry, ...]:
    """Derive TOC entries from ``h1``..``h4`` headings in document order.

    Each heading receives ``id="heading-<n>"`` so anchors rendered later can
    target it. The first heading is marked active. Headings without text are
    numbered but dropped from the result.
    """
    entries: list[TocEntry] = []
    for index, heading in enumerate(doc.query_all(HEADING_PATTERN)):
        entry_id = HEADING_ID_TEMPLATE.format(index=index + 1)
        heading.set_attr("id", entry_id)
        entries.append(
            TocEntry(
                id=entry_id,
                text=heading.text().strip(),
                is_active=index == 0,
                level=int(heading.tag[1:]),
            )
        )
    if entries:
        logger.debug(f"Synthesised {len(entries)} TOC entries from headings")
    return tuple(entry for entry in entries if entry.is_valid)


__all__ = ["extract_toc_entries", "synthesize_heading_entries"]
