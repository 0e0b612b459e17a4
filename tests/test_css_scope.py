"""Unit tests for stylesheet scoping."""

from __future__ import annotations

import re

from navscope.css_scope import generate_scope_id, scope_class, scope_stylesheet

PREFIX = ".toc-content-abc"


def test_every_selector_in_a_group_is_prefixed() -> None:
    """Comma-separated selectors are scoped individually."""
    css = ".slide, h1 > span { color: red }\np { margin: 0 }"

    assert scope_stylesheet(css, PREFIX) == (
        f"{PREFIX} .slide, {PREFIX} h1 > span {{ color: red }}\n"
        f"{PREFIX} p {{ margin: 0 }}"
    )


def test_html_and_body_selectors_are_left_alone() -> None:
    """Root selectors cannot be nested inside the wrapper."""
    assert scope_stylesheet("html, body { margin: 0 }", PREFIX) == (
        "html, body { margin: 0 }"
    )


def test_rules_inside_media_queries_are_scoped() -> None:
    """The at-rule prelude is kept and the nested rules are prefixed."""
    css = "@media (max-width: 600px) { .slide { padding: 0 } }"

    assert scope_stylesheet(css, PREFIX) == (
        f"@media (max-width: 600px) {{ {PREFIX} .slide {{ padding: 0 }} }}"
    )


def test_keyframe_steps_are_not_prefixed() -> None:
    """``from``/``to`` and percentages inside keyframes stay as written."""
    css = (
        "@keyframes fade { from { opacity: 0 } "
        "50% { opacity: .5 } to { opacity: 1 } }"
    )

    assert scope_stylesheet(css, PREFIX) == css


def test_scope_ids_are_distinct_class_names() -> None:
    """Generated scope classes are valid and unlikely to collide."""
    first = scope_class(generate_scope_id())
    second = scope_class(generate_scope_id())

    assert re.fullmatch(r"toc-content-[0-9a-z]+", first)
    assert first != second
