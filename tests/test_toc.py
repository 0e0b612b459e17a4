"""Unit tests for TOC inference.

These tests cover how navigation markup is turned into TOC entries: which
candidate pattern is adopted, how entry identifiers and labels are derived,
and how headings stand in for a missing navigation list.

Usage
-----
Run ``pytest tests/test_toc.py -v`` or ``make test`` to execute the suite.
"""

from __future__ import annotations

from navscope.analyzer import extract_toc_entries, synthesize_heading_entries
from navscope.tree import parse_document


def _nav(*items: str) -> str:
    """Wrap ``items`` in a ``<nav><ul>`` list."""
    return "<nav><ul>" + "".join(items) + "</ul></nav>"


def test_link_targets_become_entry_ids() -> None:
    """Entries take their id from the nested link's fragment."""
    doc = parse_document(
        _nav(
            '<li><a href="#intro">Intro</a></li>',
            '<li><a href="#detail">Detail</a></li>',
        )
    )

    entries = extract_toc_entries(doc)

    assert [(entry.id, entry.text) for entry in entries] == [
        ("intro", "Intro"),
        ("detail", "Detail"),
    ], "expected link fragments and labels in document order"


def test_data_slide_attribute_takes_priority_over_href() -> None:
    """A ``data-slide`` attribute on the item wins over the link target."""
    doc = parse_document(
        '<ul class="toc-menu"><li data-slide="3"><a href="#x">Three</a></li></ul>'
    )

    (entry,) = extract_toc_entries(doc)

    assert entry.id == "3", "data-slide should be preferred over href"


def test_structural_item_ids_and_positional_fallback() -> None:
    """Own ids naming a slide or item are kept; others fall back to position."""
    doc = parse_document(
        '<div class="sidebar"><ul>'
        '<li id="item-a">Alpha</li><li id="other">Beta</li>'
        "</ul></div>"
    )

    entries = extract_toc_entries(doc)

    assert [entry.id for entry in entries] == ["item-a", "slide-2"]
    assert [entry.text for entry in entries] == ["Alpha", "Beta"], (
        "item text should be used when there is no link"
    )


def test_icon_and_active_markers_are_captured() -> None:
    """The icon class and ``active`` marker are recorded on the entry."""
    doc = parse_document(
        _nav(
            '<li class="active"><i class="fa fa-home"></i>'
            '<a href="#home">Home</a></li>'
        )
    )

    (entry,) = extract_toc_entries(doc)

    assert entry.icon_ref == "fa fa-home"
    assert entry.is_active is True
    assert entry.text == "Home", "label should come from the link text"


def test_leading_symbol_glyph_is_stripped() -> None:
    """A leading bullet glyph does not end up in the label."""
    doc = parse_document(_nav('<li><a href="#next">\u2022 Next   step</a></li>'))

    (entry,) = extract_toc_entries(doc)

    assert entry.text == "Next step"


def test_empty_label_falls_back_to_item_id() -> None:
    """Items without text are labelled from their identifier."""
    doc = parse_document(_nav('<li><a href="#empty"></a></li>'))

    (entry,) = extract_toc_entries(doc)

    assert entry.text == "item empty"


def test_pattern_with_most_entries_is_adopted() -> None:
    """A later, more generic pattern wins when it yields more entries."""
    doc = parse_document(
        _nav('<li><a href="#a">A</a></li>', '<li><a href="#b">B</a></li>')
        + "<aside><ul>"
        '<li><a href="#c">C</a></li>'
        '<li><a href="#d">D</a></li>'
        '<li><a href="#e">E</a></li>'
        "</ul></aside>"
    )

    entries = extract_toc_entries(doc)

    assert [entry.id for entry in entries] == ["c", "d", "e"]


def test_earlier_pattern_wins_ties() -> None:
    """Equal counts keep the entries of the earlier, more specific pattern."""
    doc = parse_document(
        '<ul class="toc-menu"><li><a href="#t1">Menu</a></li></ul>'
        + _nav('<li><a href="#n1">Nav</a></li>')
    )

    entries = extract_toc_entries(doc)

    assert [entry.id for entry in entries] == ["t1"]


def test_invalid_pattern_is_skipped() -> None:
    """A malformed selector does not prevent later patterns from matching."""
    doc = parse_document(_nav('<li><a href="#a">A</a></li>'))

    entries = extract_toc_entries(doc, ("[[broken", "nav ul li"))

    assert [entry.id for entry in entries] == ["a"]


def test_headings_stand_in_for_missing_navigation() -> None:
    """Without navigation markup each heading becomes an entry with its level."""
    doc = parse_document(
        "<h1>Title</h1><p>text</p><h2>Part</h2><h3></h3><h4>Deep</h4>"
    )

    entries = extract_toc_entries(doc)

    assert [(entry.id, entry.text, entry.level) for entry in entries] == [
        ("heading-1", "Title", 1),
        ("heading-2", "Part", 2),
        ("heading-4", "Deep", 4),
    ], "empty headings are numbered but dropped"
    assert [entry.is_active for entry in entries] == [True, False, False]


def test_heading_ids_are_written_back_to_the_tree() -> None:
    """Synthesised ids are set on the heading elements themselves."""
    doc = parse_document("<h2>One</h2><h3>Two</h3>")

    synthesize_heading_entries(doc)

    heading = doc.query_one("h3")
    assert heading is not None
    assert heading.attr("id") == "heading-2"


def test_document_without_navigation_or_headings_has_empty_toc() -> None:
    """Plain content yields no TOC entries at all."""
    doc = parse_document("<p>Just a paragraph.</p>")

    assert extract_toc_entries(doc) == ()
