"""Import HTML files into a session document store, one at a time.

:class:`DocumentImporter` is the integration layer between a host (CLI,
dashboard, tests) and the structural analyzer. It reads each file, analyses
it, stores the result under a fresh identifier and notifies subscribed
presentation adapters. Batches run as an ``asyncio`` pipeline that finishes
one file (listeners included) before reading the next, so a presentation slot
never sees two documents half-integrated.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> importer = DocumentImporter()
>>> results = asyncio.run(importer.integrate_all([Path("deck.html")]))  # doctest: +SKIP
>>> results[0].success  # doctest: +SKIP
True
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import datetime as dt
import typing as typ
import uuid

from loguru import logger

from navscope._constants import HTML_SUFFIXES
from navscope.analyzer import StructuralAnalyzer

from . import navigation

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from navscope.models import AnalysisResult, Section


@dc.dataclass(frozen=True, slots=True)
class ImportedDocument:
    """A document held in the session store.

    Attributes
    ----------
    id : str
        Session-unique identifier assigned at import time.
    name : str
        File name the document was imported from.
    content : str
        Original HTML text.
    analysis : AnalysisResult
        Structure inferred by the analyzer.
    added_at : datetime
        UTC timestamp of the import.
    """

    id: str
    name: str
    content: str
    analysis: AnalysisResult
    added_at: dt.datetime


@dc.dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome reported to the caller for one imported file."""

    success: bool
    message: str
    file_id: str | None = None
    toc_count: int = 0
    section_count: int = 0


DocumentListener = typ.Callable[[ImportedDocument], None]


def select_html_files(paths: cabc.Iterable[Path]) -> list[Path]:
    """Return the paths whose names end in ``.html`` or ``.htm``."""
    return [path for path in paths if path.name.lower().endswith(HTML_SUFFIXES)]


class DocumentImporter:
    """Analyse HTML files and keep the results for the current session."""

    def __init__(self, analyzer: StructuralAnalyzer | None = None) -> None:
        """Initialize the importer with an empty document store.

        Parameters
        ----------
        analyzer : StructuralAnalyzer, optional
            Analyzer used for every file; a default-configured one when
            ``None``.
        """
        self.analyzer = analyzer or StructuralAnalyzer()
        self.documents: dict[str, ImportedDocument] = {}
        self._listeners: list[DocumentListener] = []

    def subscribe(self, listener: DocumentListener) -> None:
        """Call ``listener`` with every document once it has been stored."""
        self._listeners.append(listener)

    async def integrate_file(self, path: Path) -> ImportResult:
        """Read, analyse, store and announce a single HTML file.

        Parameters
        ----------
        path : Path
            File to import; decoded as UTF-8.

        Returns
        -------
        ImportResult
            ``success=False`` with a readable message when the file cannot be
            read or decoded, or when a listener fails (the document is then
            dropped from the store); otherwise the new document id and the TOC and
            section counts.
        """
        logger.info(f"Analysing '{path.name}'...")
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            message = f"Failed to import '{path.name}': {exc}"
            logger.error(message)
            return ImportResult(success=False, message=message)

        analysis = self.analyzer.analyze(content)
        document = ImportedDocument(
            id=uuid.uuid4().hex[:12],
            name=path.name,
            content=content,
            analysis=analysis,
            added_at=dt.datetime.now(dt.UTC),
        )
        self.documents[document.id] = document
        try:
            for listener in self._listeners:
                listener(document)
        except Exception as exc:  # noqa: BLE001 - listeners are host-supplied
            self.documents.pop(document.id, None)
            message = f"Failed to import '{path.name}': {exc}"
            logger.error(message)
            return ImportResult(success=False, message=message)

        message = f"Imported '{path.name}'"
        logger.info(message)
        return ImportResult(
            success=True,
            message=message,
            file_id=document.id,
            toc_count=len(analysis.toc_entries),
            section_count=len(analysis.sections),
        )

    async def integrate_all(self, paths: cabc.Iterable[Path]) -> list[ImportResult]:
        """Import ``paths`` strictly in order; a failed file does not stop the batch."""
        results: list[ImportResult] = []
        for path in paths:
            results.append(await self.integrate_file(path))
        failed = sum(1 for result in results if not result.success)
        logger.info(f"Processed {len(results)} file(s), {failed} failed")
        return results

    def get(self, file_id: str) -> ImportedDocument | None:
        """Return the stored document for ``file_id``, or None."""
        return self.documents.get(file_id)

    def initial_section(self, file_id: str) -> Section | None:
        """Return the section to show first for ``file_id``."""
        document = self.get(file_id)
        if document is None:
            return None
        return navigation.initial_section(document.analysis)

    def find_section(self, file_id: str, slide_id: str) -> Section | None:
        """Return the section of ``file_id`` that ``slide_id`` navigates to."""
        document = self.get(file_id)
        if document is None:
            return None
        return navigation.find_section(document.analysis, slide_id)

    def resolve_anchor(self, file_id: str, href: str) -> Section | None:
        """Return the section an in-document link of ``file_id`` points at."""
        document = self.get(file_id)
        if document is None:
            return None
        return navigation.resolve_anchor(document.analysis, href)


__all__ = [
    "DocumentImporter",
    "DocumentListener",
    "ImportResult",
    "ImportedDocument",
    "select_html_files",
]
