"""Document tree capability used by the structural analyzer.

The analyzer never touches a parser directly. It talks to two small
protocols, :class:`DocumentTree` and :class:`ElementNode`, which expose
selector queries, attributes, text and serialisation. :class:`SoupDocument`
implements them on top of BeautifulSoup, with soupsieve evaluating the CSS
selector patterns.

Examples
--------
>>> doc = parse_document("<title>Deck</title><ul><li class='active'>A</li></ul>")
>>> doc.title
'Deck'
>>> [node.text() for node in doc.query_all("ul li")]
['A']
>>> doc.query_one("li").has_class("active")
True
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from loguru import logger

WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Trim ``text`` and collapse internal whitespace runs to single spaces."""
    return WHITESPACE_RUN.sub(" ", text.strip())


class ElementNode(typ.Protocol):
    """Element capability consumed by the analyzer."""

    @property
    def tag(self) -> str: ...

    def attr(self, name: str) -> str | None: ...

    def has_class(self, name: str) -> bool: ...

    def text(self) -> str: ...

    def raw_text(self) -> str: ...

    def query_all(self, pattern: str) -> list[ElementNode]: ...

    def query_one(self, pattern: str) -> ElementNode | None: ...

    def outer_html(self) -> str: ...

    def inner_html(self) -> str: ...

    def set_attr(self, name: str, value: str) -> None: ...


class DocumentTree(typ.Protocol):
    """Detached document capability consumed by the analyzer."""

    @property
    def title(self) -> str: ...

    def query_all(self, pattern: str) -> list[ElementNode]: ...

    def query_one(self, pattern: str) -> ElementNode | None: ...

    def outer_html(self) -> str: ...

    def inner_html(self) -> str: ...

    def top_level(self) -> list[ElementNode]: ...


@dc.dataclass(frozen=True, slots=True)
class SoupElement:
    """:class:`ElementNode` backed by a BeautifulSoup ``Tag``."""

    node: Tag

    @property
    def tag(self) -> str:
        return self.node.name

    def attr(self, name: str) -> str | None:
        value = self.node.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    @property
    def classes(self) -> list[str]:
        value = self.node.get("class")
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return list(value)

    def text(self) -> str:
        return self.node.get_text()

    def raw_text(self) -> str:
        """Return the concatenated direct string children, markup left as is.

        ``<style>`` and ``<script>`` bodies are kept verbatim this way, which
        :meth:`text` does not guarantee for every parser builder.
        """
        return "".join(
            str(child)
            for child in self.node.children
            if isinstance(child, NavigableString) and not isinstance(child, Comment)
        )

    def query_all(self, pattern: str) -> list[ElementNode]:
        return [SoupElement(match) for match in self.node.select(pattern)]

    def query_one(self, pattern: str) -> ElementNode | None:
        match = self.node.select_one(pattern)
        return SoupElement(match) if match is not None else None

    def outer_html(self) -> str:
        return str(self.node)

    def inner_html(self) -> str:
        return self.node.decode_contents()

    def set_attr(self, name: str, value: str) -> None:
        self.node[name] = value


class SoupDocument:
    """:class:`DocumentTree` backed by a detached BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @property
    def title(self) -> str:
        """Return the collapsed ``<title>`` text, or ``""`` when missing."""
        title_tag = self.soup.find("title")
        if title_tag is None:
            return ""
        return collapse_whitespace(title_tag.get_text())

    def query_all(self, pattern: str) -> list[ElementNode]:
        return [SoupElement(match) for match in self.soup.select(pattern)]

    def query_one(self, pattern: str) -> ElementNode | None:
        match = self.soup.select_one(pattern)
        return SoupElement(match) if match is not None else None

    def outer_html(self) -> str:
        return str(self.soup)

    def inner_html(self) -> str:
        return self.soup.decode_contents()

    def top_level(self) -> list[ElementNode]:
        """Return the elements directly inside ``<body>``, ``<html>`` or the root.

        ``html.parser`` adds no implied ``<body>``, so fragments expose their
        top-level elements straight from the document root.
        """
        container: Tag = self.soup
        for name in ("body", "html"):
            found = self.soup.find(name)
            if isinstance(found, Tag):
                container = found
                break
        return [
            SoupElement(child) for child in container.children if isinstance(child, Tag)
        ]


def parse_document(html: str) -> SoupDocument:
    """Parse ``html`` into a detached tree with BeautifulSoup's ``html.parser``.

    Markup the parser refuses outright yields an empty document, which the
    analyzer then treats like any other document without structure.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning(f"Parser rejected markup; analysing an empty document: {exc}")
        soup = BeautifulSoup("", "html.parser")
    return SoupDocument(soup)


__all__ = [
    "DocumentTree",
    "ElementNode",
    "SoupDocument",
    "SoupElement",
    "collapse_whitespace",
    "parse_document",
]
