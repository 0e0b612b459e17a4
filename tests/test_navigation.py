"""Unit tests for navigation lookups on analysed documents."""

from __future__ import annotations

import pytest

from navscope import navigation
from navscope.analyzer import StructuralAnalyzer
from navscope.models import AnalysisResult, Section


@pytest.fixture
def deck() -> AnalysisResult:
    """Return an analysed three-slide deck whose nav covers two slides."""
    return StructuralAnalyzer().analyze(
        '<nav><ul><li><a href="#intro">Intro</a></li>'
        '<li><a href="#3">Third</a></li></ul></nav>'
        '<div class="slide" id="slide-intro">A</div>'
        '<div class="slide active" id="slide-2">B</div>'
        '<div class="slide" id="slide3"><a href="#note">note</a>'
        '<p id="note">C</p></div>'
    )


def test_initial_section_prefers_active(deck: AnalysisResult) -> None:
    """The section marked active opens first."""
    section = navigation.initial_section(deck)

    assert section is not None
    assert section.id == "slide-2"


def test_initial_section_defaults_to_first() -> None:
    """Without an active marker the first section opens."""
    result = AnalysisResult(
        title="t",
        toc_entries=(),
        sections=(Section("a", "A", ""), Section("b", "B", "")),
    )

    section = navigation.initial_section(result)

    assert section is not None
    assert section.id == "a"


def test_find_section_uses_id_spellings(deck: AnalysisResult) -> None:
    """Entry ids reach sections through the ``slide-`` and ``slide`` forms."""
    intro = navigation.find_section(deck, "intro")
    third = navigation.find_section(deck, "3")

    assert intro is not None
    assert intro.id == "slide-intro"
    assert third is not None
    assert third.id == "slide3"
    assert navigation.find_section(deck, "missing") is None


def test_resolve_anchor_distinguishes_sections_from_inner_targets(
    deck: AnalysisResult,
) -> None:
    """Fragments naming a section resolve; others stay in the current one."""
    target = navigation.resolve_anchor(deck, "#2")

    assert target is not None
    assert target.id == "slide-2"
    assert navigation.resolve_anchor(deck, "#note") is None
    assert navigation.resolve_anchor(deck, "#") is None


def test_entry_targets_cover_every_entry(deck: AnalysisResult) -> None:
    """Each TOC entry maps to the section it opens."""
    targets = navigation.entry_targets(deck)

    assert {key: value.id for key, value in targets.items() if value} == {
        "intro": "slide-intro",
        "3": "slide3",
    }
