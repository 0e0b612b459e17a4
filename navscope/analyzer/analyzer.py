"""Structural analysis facade: HTML text in, :class:`AnalysisResult` out.

:class:`StructuralAnalyzer` parses the document into a detached tree, infers
the TOC before the sections (so heading ids synthesised by the TOC fallback
show up in section markup), reconciles the two and collects the document's
styles and scripts. It holds no state between calls.

Example
-------
>>> analyzer = StructuralAnalyzer()
>>> result = analyzer.analyze(
...     '<nav><ul><li><a href="#intro">Intro</a></li>'
...     '<li><a href="#detail">Detail</a></li></ul></nav>'
...     '<section id="intro">One</section><section id="detail">Two</section>'
... )
>>> [(entry.id, entry.text) for entry in result.toc_entries]
[('intro', 'Intro'), ('detail', 'Detail')]
>>> [section.nav_ref for section in result.sections]
['intro', 'detail']
"""

from __future__ import annotations

from loguru import logger

from navscope._constants import DEFAULT_DOCUMENT_TITLE
from navscope.models import AnalysisResult
from navscope.tree import parse_document

from .assets import extract_scripts, extract_styles
from .reconcile import reconcile
from .sections import extract_sections
from .settings import AnalyzerSettings
from .toc import extract_toc_entries


class StructuralAnalyzer:
    """Infer navigation and content structure from arbitrary HTML."""

    def __init__(self, settings: AnalyzerSettings | None = None) -> None:
        """Initialize the analyzer.

        Parameters
        ----------
        settings : AnalyzerSettings, optional
            Candidate patterns and title limits. The built-in heuristics are
            used when ``None``.
        """
        self.settings = settings or AnalyzerSettings()

    def analyze(self, html: str) -> AnalysisResult:
        """Return the normalized structure of ``html``.

        Parameters
        ----------
        html : str
            Complete HTML document text; malformed markup is tolerated.

        Returns
        -------
        AnalysisResult
            Title, TOC entries, reconciled sections, and the collected style
            and script references. Always well formed: missing structure is
            replaced by the documented fallbacks rather than reported.
        """
        doc = parse_document(html)
        title = doc.title or DEFAULT_DOCUMENT_TITLE
        toc_entries = extract_toc_entries(doc, self.settings.toc_patterns)
        sections = reconcile(toc_entries, extract_sections(doc, self.settings))
        linked = sum(1 for section in sections if section.nav_ref is not None)
        logger.debug(
            f"Analysed {title!r}: {len(toc_entries)} TOC entries, "
            f"{len(sections)} sections, {linked} linked"
        )
        return AnalysisResult(
            title=title,
            toc_entries=toc_entries,
            sections=sections,
            styles=extract_styles(doc),
            scripts=extract_scripts(doc),
        )


__all__ = ["StructuralAnalyzer"]
