"""Infer navigable structure from arbitrary HTML documents.

This package turns an HTML file into a table of contents and an ordered list
of content sections, links the two, and can render per-section previews.

Exports
-------
- ``app``: Cyclopts application entry for the ``navscope`` subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``StructuralAnalyzer``: HTML text in, :class:`AnalysisResult` out.

Examples
--------
>>> from navscope import StructuralAnalyzer
>>> StructuralAnalyzer().analyze("<p>Hello</p>").sections[0].id
'main-content'
"""

from __future__ import annotations

from .analyzer import StructuralAnalyzer
from .cli import app, main
from .models import AnalysisResult, AssetRef, Section, TocEntry

__all__ = [
    "AnalysisResult",
    "AssetRef",
    "Section",
    "StructuralAnalyzer",
    "TocEntry",
    "app",
    "main",
]
