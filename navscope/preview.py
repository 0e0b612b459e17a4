"""Render browsable HTML previews of imported documents.

:class:`PreviewRenderer` is a presentation adapter: it subscribes to a
:class:`~navscope.importer.DocumentImporter` and writes one page per section
once a document has been fully analysed. Each page carries the document's
TOC (linking to the page of the section each entry resolves to), the section
markup inside a wrapper with a generated scope class, the document's inline
styles scoped to that class, and the inline scripts that pass the advisory
filter wrapped in a container-scoped shim.

Typical usage pairs it with the importer:

>>> import asyncio
>>> from pathlib import Path
>>> from navscope.importer import DocumentImporter
>>> importer = DocumentImporter()
>>> renderer = PreviewRenderer()
>>> importer.subscribe(renderer.on_imported)
>>> asyncio.run(importer.integrate_all([Path("deck.html")]))  # doctest: +SKIP
>>> renderer.written  # doctest: +SKIP
[PosixPath('public/preview/deck-slide-1.html'), ...]

Templates are read from ``navscope/templates`` by default and rendered with
Jinja2 autoescaping; section markup and scoped styles are inserted verbatim.
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from navscope import navigation
from navscope.config import PreviewConfig
from navscope.css_scope import generate_scope_id, scope_class, scope_stylesheet
from navscope.scripts import ScriptFilter, strip_scripts

if typ.TYPE_CHECKING:
    from navscope.importer import ImportedDocument
    from navscope.models import AnalysisResult, Section

UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def _slugify(value: str) -> str:
    slug = UNSAFE_FILENAME_CHARS.sub("-", value).strip("-").lower()
    return slug or "section"


def _unique_slug(base: str, used: set[str]) -> str:
    """Generate a unique slug, appending numeric suffixes when needed."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


class PreviewRenderer:
    """Write one themed preview page per section of an imported document."""

    def __init__(
        self,
        config: PreviewConfig | None = None,
        *,
        script_filter: ScriptFilter | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        config : PreviewConfig, optional
            Output directory and filename prefix; defaults apply when ``None``.
        script_filter : ScriptFilter, optional
            Advisory filter deciding which inline scripts are kept; the
            default deny list when ``None``.
        templates_dir : Path, optional
            Directory containing ``preview.jinja``. Defaults to
            ``navscope/templates``.
        """
        self.config = config or PreviewConfig()
        self.script_filter = script_filter or ScriptFilter()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("preview.jinja")
        self.written: list[Path] = []

    def on_imported(self, document: ImportedDocument) -> None:
        """Importer listener: render ``document`` and remember the written paths."""
        self.written.extend(self.run(document))

    def run(self, document: ImportedDocument) -> list[Path]:
        """Render every section of ``document`` to disk.

        Returns
        -------
        list[Path]
            Written pages, in section order.
        """
        analysis = document.analysis
        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        stem = _slugify(Path(document.name).stem)
        used: set[str] = set()
        page_names = [
            f"{self.config.filename_prefix}{stem}-"
            f"{_unique_slug(_slugify(section.id), used)}.html"
            for section in analysis.sections
        ]
        page_by_section = {
            id(section): name
            for section, name in zip(analysis.sections, page_names, strict=True)
        }
        targets = navigation.entry_targets(analysis)
        external_styles = [
            style.payload for style in analysis.styles if style.kind == "external"
        ]
        generated_at = dt.datetime.now(dt.UTC)

        written: list[Path] = []
        for section, page_name in zip(analysis.sections, page_names, strict=True):
            scope = scope_class(generate_scope_id())
            toc_items = self._toc_items(analysis, section, targets, page_by_section)
            context = {
                "document": document,
                "title": analysis.title,
                "section": section,
                "heading": self.page_title(section),
                "toc_items": toc_items,
                "scope_class": scope,
                "scoped_styles": self._scoped_styles(document, scope),
                "external_styles": external_styles,
                "content": strip_scripts(section.content),
                "scripts": self.script_filter.runnable(section.content),
                "generated_at": generated_at,
            }
            html = self.template.render(**context)
            if not html.endswith("\n"):
                html += "\n"
            output_path = out_dir / page_name
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        logger.info(f"Rendered {len(written)} preview page(s) for '{document.name}'")
        return written

    @staticmethod
    def _toc_items(
        analysis: AnalysisResult,
        current: Section,
        targets: dict[str, Section | None],
        page_by_section: dict[int, str],
    ) -> list[dict[str, typ.Any]]:
        """Return template rows for the TOC shown beside ``current``."""
        items: list[dict[str, typ.Any]] = []
        for entry in analysis.toc_entries:
            target = targets[entry.id]
            href = page_by_section.get(id(target)) if target is not None else None
            items.append(
                {
                    "text": entry.text,
                    "icon": entry.icon_ref,
                    "level": entry.level,
                    "href": href,
                    "active": target is current,
                }
            )
        return items

    @staticmethod
    def _scoped_styles(document: ImportedDocument, scope: str) -> list[str]:
        """Return the document's inline stylesheets scoped to ``scope``."""
        return [
            scope_stylesheet(style.payload, f".{scope}")
            for style in document.analysis.styles
            if style.kind == "inline" and style.payload.strip()
        ]

    @staticmethod
    def page_title(section: Section) -> str:
        """Return the heading shown above a previewed section."""
        return f'Preview of "{section.title}"'


__all__ = ["PreviewRenderer"]
