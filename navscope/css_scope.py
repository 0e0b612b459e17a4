"""Scope imported stylesheets to the container that displays a section.

Inline ``<style>`` blocks of an imported document would otherwise restyle the
host page. :func:`scope_stylesheet` prefixes every rule's selectors with a
per-view class so the rules only reach the preview wrapper. The parsing is a
light regular-expression pass, good enough for typical slide decks and not a
CSS parser.

Examples
--------
>>> scope_stylesheet(".slide, h1 { color: red }", ".toc-content-x")
'.toc-content-x .slide, .toc-content-x h1 { color: red }'
>>> scope_stylesheet("body { margin: 0 }", ".toc-content-x")
'body { margin: 0 }'
"""

from __future__ import annotations

import re
import secrets
import string
import time

SCOPE_CLASS_TEMPLATE = "toc-content-{scope_id}"
BASE36_DIGITS = string.digits + string.ascii_lowercase
RULE_SELECTOR_PATTERN = re.compile(r"(^|[{}])(\s*)([^{}]+?)(\s*)(?=\{)")
KEYFRAME_SELECTOR_PATTERN = re.compile(r"^(from|to|\d+(\.\d+)?%)$", re.IGNORECASE)
UNSCOPED_SELECTORS = frozenset({"html", "body"})


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_scope_id() -> str:
    """Return a short time-plus-random token used only for presentation scoping."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(BASE36_DIGITS) for _ in range(5))
    return f"{_to_base36(millis)}{suffix}"


def scope_class(scope_id: str) -> str:
    """Return the wrapper class name for ``scope_id``."""
    return SCOPE_CLASS_TEMPLATE.format(scope_id=scope_id)


def _scope_selector(selector: str, prefix: str) -> str:
    stripped = selector.strip()
    if not stripped or stripped.lower() in UNSCOPED_SELECTORS:
        return stripped
    if KEYFRAME_SELECTOR_PATTERN.match(stripped):
        return stripped
    return f"{prefix} {stripped}"


def scope_stylesheet(css: str, prefix: str) -> str:
    """Prefix each rule's selectors in ``css`` with ``prefix``.

    Parameters
    ----------
    css : str
        Stylesheet text taken verbatim from the imported document.
    prefix : str
        Selector placed in front of every rule selector, typically
        ``"." + scope_class(...)``.

    Returns
    -------
    str
        Stylesheet with scoped selectors. At-rule preludes, keyframe steps,
        and bare ``html``/``body`` selectors are left untouched.
    """

    def _repl(match: re.Match[str]) -> str:
        head, lead, selectors, trail = match.groups()
        if selectors.lstrip().startswith("@"):
            return match.group(0)
        scoped = ", ".join(
            _scope_selector(part, prefix) for part in selectors.split(",")
        )
        return f"{head}{lead}{scoped}{trail}"

    return RULE_SELECTOR_PATTERN.sub(_repl, css)


__all__ = [
    "SCOPE_CLASS_TEMPLATE",
    "generate_scope_id",
    "scope_class",
    "scope_stylesheet",
]
