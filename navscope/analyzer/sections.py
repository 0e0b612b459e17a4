"""Partition a document into content sections ("slides").

Section patterns are folded the same way as TOC patterns, except that a
pattern is adopted on its raw match count: the first pattern that matches
more elements than the running best wins. Identifiers and titles are derived
only for the adopted elements. A document where nothing matches becomes a
single active section built from its main content container.
"""

from __future__ import annotations

import dataclasses as dc
import functools
import typing as typ

from loguru import logger

from navscope._constants import (
    ELLIPSIS,
    FALLBACK_SECTION_ID,
    POSITIONAL_ID_TEMPLATE,
    UNTITLED_DOCUMENT,
    UNTITLED_SECTION,
)
from navscope.models import Section
from navscope.tree import collapse_whitespace

from .patterns import SENTENCE_BOUNDARY, strip_leading_symbol, truncate_title
from .settings import AnalyzerSettings

if typ.TYPE_CHECKING:
    from navscope.tree import DocumentTree, ElementNode

FALLBACK_CONTAINER_TAGS: tuple[str, ...] = ("main", "div")
ID_ATTRIBUTES: tuple[str, ...] = ("id", "data-slide", "data-id")


@dc.dataclass(frozen=True, slots=True)
class _SectionCandidate:
    """Accumulator threaded through the pattern fold."""

    count: int = 0
    nodes: tuple[ElementNode, ...] = ()
    pattern: str | None = None


def extract_sections(
    doc: DocumentTree, settings: AnalyzerSettings | None = None
) -> tuple[Section, ...]:
    """Return the sections of ``doc``; never empty.

    Parameters
    ----------
    doc : DocumentTree
        Parsed document to partition.
    settings : AnalyzerSettings, optional
        Pattern lists and title limits; defaults apply when ``None``.

    Returns
    -------
    tuple[Section, ...]
        Sections of the winning pattern in document order, or a single
        fallback section spanning the main content.
    """
    rules = settings or AnalyzerSettings()
    best = functools.reduce(
        functools.partial(_consider_pattern, doc),
        rules.section_patterns,
        _SectionCandidate(),
    )
    if not best.nodes:
        logger.debug("No section pattern matched; using the whole body")
        return (fallback_section(doc),)
    logger.debug(f"Section pattern {best.pattern!r} won with {best.count} matches")
    return tuple(
        _section_from_node(node, index, rules) for index, node in enumerate(best.nodes)
    )


def _consider_pattern(
    doc: DocumentTree, best: _SectionCandidate, pattern: str
) -> _SectionCandidate:
    try:
        nodes = doc.query_all(pattern)
    except Exception as exc:  # noqa: BLE001 - patterns may come from user config
        logger.warning(f"Section pattern {pattern!r} failed: {exc}")
        return best
    if len(nodes) <= best.count:
        return best
    return _SectionCandidate(count=len(nodes), nodes=tuple(nodes), pattern=pattern)


def _section_from_node(
    node: ElementNode, index: int, rules: AnalyzerSettings
) -> Section:
    section_id = next(
        (value for name in ID_ATTRIBUTES if (value := node.attr(name))),
        POSITIONAL_ID_TEMPLATE.format(index=index + 1),
    )
    return Section(
        id=section_id,
        title=extract_section_title(node, rules),
        content=node.outer_html(),
        is_active=node.has_class("active"),
    )


def extract_section_title(
    node: ElementNode, settings: AnalyzerSettings | None = None
) -> str:
    """Return the best-effort title of a section element.

    Title patterns are searched among the element's descendants in priority
    order; the first one with non-empty text wins. Failing that, the leading
    text of the element is cut at its first sentence boundary. Sections
    without any text get a fixed placeholder.

    Examples
    --------
    >>> from navscope.tree import parse_document
    >>> doc = parse_document("<div><p>Plain words. More.</p></div>")
    >>> extract_section_title(doc.query_one("div"))
    'Plain words'
    """
    rules = settings or AnalyzerSettings()
    for pattern in rules.title_patterns:
        try:
            candidate = node.query_one(pattern)
        except Exception as exc:  # noqa: BLE001 - patterns may come from user config
            logger.warning(f"Title pattern {pattern!r} failed: {exc}")
            continue
        if candidate is None:
            continue
        title = strip_leading_symbol(collapse_whitespace(candidate.text()))
        title = truncate_title(title, rules.title_max_length)
        if title:
            return title

    leading = _leading_text_title(node.text(), rules.fallback_title_chars)
    if leading:
        return truncate_title(leading, rules.title_max_length)
    return UNTITLED_SECTION


def _leading_text_title(text: str, limit: int) -> str:
    """Return the first sentence fragment within ``limit`` characters of ``text``."""
    full_text = text.strip()
    if not full_text:
        return ""
    fragment = SENTENCE_BOUNDARY.split(full_text[:limit], maxsplit=1)[0]
    if not fragment:
        return ""
    return fragment + (ELLIPSIS if len(fragment) >= limit else "")


def fallback_section(doc: DocumentTree) -> Section:
    """Return a single active section wrapping the document's main content.

    The first top-level ``main`` is preferred, then the first top-level
    ``div``, then ``body``. Top-level means directly inside ``<body>``, or at
    the document root for markup without one. Failing all of them the whole
    document is used.
    """
    top_level = doc.top_level()
    container = next(
        (
            node
            for tag in FALLBACK_CONTAINER_TAGS
            for node in top_level
            if node.tag == tag
        ),
        None,
    ) or doc.query_one("body")
    content = container.inner_html() if container is not None else doc.inner_html()
    return Section(
        id=FALLBACK_SECTION_ID,
        title=doc.title or UNTITLED_DOCUMENT,
        content=content,
        is_active=True,
    )


__all__ = ["extract_section_title", "extract_sections", "fallback_section"]
