"""Unit tests for the advisory inline-script filter."""

from __future__ import annotations

import re

import pytest

from navscope.scripts import (
    ScriptFilter,
    is_safe_script,
    runnable_inline_scripts,
    strip_scripts,
)


@pytest.mark.parametrize(
    "source",
    [
        "eval('1 + 1')",
        "new Function('return 1')",
        "document.write('<p>')",
        "localStorage.setItem('k', 'v')",
        "window.open('https://example.invalid')",
        "location = '/elsewhere'",
        "fetch ('/api')",
        "const ws = new WebSocket(url)",
        "parent.postMessage('hi', '*')",
        "DOCUMENT.COOKIE",
    ],
)
def test_denied_constructs_are_blocked(source: str) -> None:
    """Scripts touching denied capabilities are rejected."""
    assert not is_safe_script(source), f"{source!r} should be blocked"


def test_dom_manipulation_is_allowed() -> None:
    """Plain DOM access inside the section passes the filter."""
    assert is_safe_script(
        "document.querySelectorAll('.step').forEach((el) => el.hidden = false)"
    )


def test_runnable_keeps_document_order_and_skips_blank() -> None:
    """Only non-blank, clean scripts are returned, in order."""
    content = (
        "<div><script>a()</script><SCRIPT type='module'>  </SCRIPT>"
        "<script>eval(x)</script><script>\nb()\n</script></div>"
    )

    assert runnable_inline_scripts(content) == ["a()", "\nb()\n"]


def test_extra_patterns_extend_the_deny_list() -> None:
    """Configured patterns are matched case-insensitively."""
    script_filter = ScriptFilter([r"alert\s*\("])

    assert script_filter.blocked_by("ALERT('x')") == r"alert\s*\("
    assert script_filter.is_safe("console.log('x')")


def test_invalid_extra_pattern_raises() -> None:
    """A malformed extra pattern is reported immediately."""
    with pytest.raises(re.error):
        ScriptFilter(["(unclosed"])


def test_strip_scripts_removes_every_script_element() -> None:
    """Markup stays intact while scripts disappear."""
    content = '<p>a</p><script src="x.js"></script><script>go()</script><p>b</p>'

    assert strip_scripts(content) == "<p>a</p><p>b</p>"


def test_strip_scripts_leaves_commented_markup_alone() -> None:
    """Script tags inside comments are not elements and survive stripping."""
    content = "<p>a</p><!-- <script>x()</script> --><script>y()</script>"

    assert strip_scripts(content) == "<p>a</p><!-- <script>x()</script> -->"


def test_runnable_ignores_external_and_commented_scripts() -> None:
    """Only inline script elements are candidates to run."""
    content = (
        '<script src="deck.js"></script>'
        "<!-- <script>hidden()</script> -->"
        "<script>shown()</script>"
    )

    assert runnable_inline_scripts(content) == ["shown()"]
