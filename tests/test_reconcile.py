"""Unit tests for linking TOC entries to sections."""

from __future__ import annotations

from navscope.analyzer import candidate_section_ids, find_section_index, reconcile
from navscope.models import Section, TocEntry


def _sections(*ids: str) -> list[Section]:
    return [Section(id=section_id, title=section_id, content="") for section_id in ids]


def _entries(*ids: str) -> list[TocEntry]:
    return [TocEntry(id=entry_id, text=entry_id.title()) for entry_id in ids]


def test_equal_counts_pair_by_position() -> None:
    """Equal lengths link entries and sections in order, whatever their ids."""
    linked = reconcile(_entries("a", "b"), _sections("x", "y"))

    assert [section.nav_ref for section in linked] == ["a", "b"]


def test_slide_prefix_transform_links_mismatched_counts() -> None:
    """Entry ``intro`` reaches section ``slide-intro`` when counts differ."""
    linked = reconcile(_entries("intro"), _sections("slide-intro", "slide-2"))

    assert [section.nav_ref for section in linked] == ["intro", None], (
        "the second section has no entry and stays unlinked"
    )


def test_concatenated_slide_transform() -> None:
    """Entry ``3`` also reaches a section named ``slide3``."""
    linked = reconcile(_entries("3"), _sections("slide1", "slide2", "slide3"))

    assert [section.nav_ref for section in linked] == [None, None, "3"]


def test_unmatched_entries_are_left_unlinked() -> None:
    """No positional guess is made when ids do not match."""
    linked = reconcile(_entries("alpha", "beta"), _sections("one", "two", "three"))

    assert all(section.nav_ref is None for section in linked)


def test_last_entry_wins_for_shared_section() -> None:
    """Several entries resolving to one section leave the last link in place."""
    linked = reconcile(
        _entries("2", "slide-2", "other"), _sections("slide-1", "slide-2")
    )

    assert [section.nav_ref for section in linked] == [None, "slide-2"]


def test_inputs_are_not_modified() -> None:
    """Reconciliation returns new section values."""
    sections = _sections("x", "y")

    reconcile(_entries("a", "b"), sections)

    assert [section.nav_ref for section in sections] == [None, None]


def test_empty_toc_returns_sections_unchanged() -> None:
    """Documents without a TOC keep unlinked sections."""
    sections = _sections("x")

    assert reconcile([], sections) == tuple(sections)


def test_candidate_ids_and_index_lookup() -> None:
    """The lookup helpers share the same id spellings."""
    assert candidate_section_ids("4") == ("4", "slide-4", "slide4")
    assert find_section_index(_sections("a", "slide-4"), "4") == 1
    assert find_section_index(_sections("a"), "missing") is None
