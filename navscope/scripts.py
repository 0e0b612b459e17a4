"""Advisory filtering of inline scripts embedded in imported sections.

A host that chooses to run a section's inline scripts can pass them through
:class:`ScriptFilter` first. Any script whose source matches one of the deny
patterns (network access, storage, cross-frame access, dynamic evaluation,
navigation) is skipped as a whole. The check is a textual match over the
source and is not a sandbox: obfuscated code walks straight past it, so
document-supplied logic that matters should run in an isolated process or
restricted interpreter instead.

Examples
--------
>>> is_safe_script("document.querySelector('.slide').classList.add('on')")
True
>>> is_safe_script("fetch('/api')")
False
>>> runnable_inline_scripts("<script>x = 1</script><script>eval('y')</script>")
['x = 1']
"""

from __future__ import annotations

import re
import typing as typ

from bs4 import BeautifulSoup
from loguru import logger

from navscope.tree import parse_document

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DENY_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"eval\s*\(",
        r"Function\s*\(",
        r"document\.write",
        r"localStorage",
        r"sessionStorage",
        r"window\.open",
        r"location\s*=",
        r"document\.cookie",
        r"XMLHttpRequest",
        r"fetch\s*\(",
        r"navigator\.",
        r"parent\.",
        r"top\.",
        r"\bself\b",
        r"postMessage",
        r"Worker\s*\(",
        r"WebSocket",
        r"ServiceWorker",
        r"IndexedDB",
        r"document\.domain",
    )
)


class ScriptFilter:
    """Decide which inline scripts a host may hand to its script runner."""

    def __init__(self, extra_patterns: cabc.Iterable[str] = ()) -> None:
        """Initialize the filter.

        Parameters
        ----------
        extra_patterns : Iterable[str], optional
            Additional case-insensitive regular expressions appended to
            :data:`DENY_PATTERNS`.

        Raises
        ------
        re.error
            If one of ``extra_patterns`` is not a valid regular expression.
        """
        extra = tuple(re.compile(pattern, re.IGNORECASE) for pattern in extra_patterns)
        self.patterns: tuple[re.Pattern[str], ...] = DENY_PATTERNS + extra

    def blocked_by(self, source: str) -> str | None:
        """Return the first deny pattern matching ``source``, or None when clean."""
        for pattern in self.patterns:
            if pattern.search(source):
                return pattern.pattern
        return None

    def is_safe(self, source: str) -> bool:
        """Return True when no deny pattern matches ``source``."""
        return self.blocked_by(source) is None

    def runnable(self, content: str) -> list[str]:
        """Return the non-blank inline script bodies in ``content`` that pass.

        Parameters
        ----------
        content : str
            Serialized section markup, as stored in
            :attr:`navscope.models.Section.content`.

        Returns
        -------
        list[str]
            Script bodies in document order. Skipped scripts are logged.
        """
        scripts: list[str] = []
        for node in parse_document(content).query_all("script"):
            if node.attr("src"):
                continue
            body = node.raw_text()
            if not body.strip():
                continue
            reason = self.blocked_by(body)
            if reason is not None:
                logger.warning(f"Skipping inline script matching {reason!r}")
                continue
            scripts.append(body)
        return scripts


def strip_scripts(content: str) -> str:
    """Return ``content`` with every ``<script>`` element removed.

    The markup is re-parsed and re-serialized, so script-like text inside
    attributes or comments is left alone.
    """
    soup = BeautifulSoup(content, "html.parser")
    for script in soup.find_all("script"):
        script.decompose()
    return soup.decode()


_DEFAULT_FILTER = ScriptFilter()


def is_safe_script(source: str) -> bool:
    """Return True when ``source`` matches none of the default deny patterns."""
    return _DEFAULT_FILTER.is_safe(source)


def runnable_inline_scripts(content: str) -> list[str]:
    """Return inline scripts of ``content`` that pass the default deny list."""
    return _DEFAULT_FILTER.runnable(content)


__all__ = [
    "DENY_PATTERNS",
    "ScriptFilter",
    "is_safe_script",
    "runnable_inline_scripts",
    "strip_scripts",
]
