"""Typed dataclasses describing the outcome of a structural analysis.

Every value here is frozen: an :class:`AnalysisResult` is built once per
imported document and never mutated afterwards. The reconciler produces new
:class:`Section` instances through :func:`dataclasses.replace` rather than
editing the ones the section extractor returned.

Examples
--------
>>> entry = TocEntry(id="intro", text="Intro")
>>> entry.level is None
True
>>> Section(id="intro", title="Intro", content="<section></section>").nav_ref
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

AssetKind = typ.Literal["inline", "external"]


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """One navigable item of an inferred table of contents.

    Attributes
    ----------
    id : str
        Identifier unique within the document's TOC.
    text : str
        Display label; never empty once the TOC is finalised.
    icon_ref : str
        Class attribute of a decorative icon element, ``""`` when absent.
    is_active : bool
        Whether the source document marked this entry as the current one.
    level : int or None
        Heading depth, only set when the TOC was synthesised from headings.
    """

    id: str
    text: str
    icon_ref: str = ""
    is_active: bool = False
    level: int | None = None

    @property
    def is_valid(self) -> bool:
        """Return True when both the identifier and the label are non-empty."""
        return bool(self.id and self.text)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One content partition ("slide") of an analysed document.

    Attributes
    ----------
    id : str
        Identifier taken from the element or synthesised from its position.
    title : str
        Best-effort heading, at most 50 characters.
    content : str
        Serialized markup of the section, opaque to the analyzer.
    is_active : bool
        Whether the source marked this section as the visible one.
    nav_ref : str or None
        Identifier of the TOC entry linked by reconciliation.
    """

    id: str
    title: str
    content: str
    is_active: bool = False
    nav_ref: str | None = None


@dc.dataclass(frozen=True, slots=True)
class AssetRef:
    """A stylesheet or script collected from the document."""

    kind: AssetKind
    payload: str


@dc.dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Aggregate produced by :class:`~navscope.analyzer.StructuralAnalyzer`."""

    title: str
    toc_entries: tuple[TocEntry, ...]
    sections: tuple[Section, ...]
    styles: tuple[AssetRef, ...] = ()
    scripts: tuple[AssetRef, ...] = ()

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the result as plain builtins suitable for JSON encoding."""
        return {
            "title": self.title,
            "toc_entries": [dc.asdict(entry) for entry in self.toc_entries],
            "sections": [dc.asdict(section) for section in self.sections],
            "styles": [dc.asdict(style) for style in self.styles],
            "scripts": [dc.asdict(script) for script in self.scripts],
        }


__all__ = ["AnalysisResult", "AssetKind", "AssetRef", "Section", "TocEntry"]
