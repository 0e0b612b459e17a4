"""Cyclopts CLI entrypoint for analysing HTML documents and rendering previews.

The ``navscope`` console script defined here prints the inferred structure of
an HTML document as JSON (``navscope analyze``) or imports a batch of HTML
files and writes one preview page per section (``navscope preview``). Every
option can also be supplied through a ``NAVSCOPE_``-prefixed environment
variable.

Examples
--------
Print the structure of a slide deck:

>>> from navscope.cli import app
>>> app(["analyze", "deck.html", "--indent", "2"])  # doctest: +SKIP

Render previews for two documents into a custom directory:

>>> app(
...     ["preview", "deck.html", "notes.htm", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .analyzer import StructuralAnalyzer
from .config import NavscopeConfig, load_config
from .importer import DocumentImporter, select_html_files
from .preview import PreviewRenderer
from .scripts import ScriptFilter

DEFAULT_CONFIG = Path("config/navscope.yaml")

app = App(name="navscope", config=cyclopts.config.Env("NAVSCOPE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None) -> NavscopeConfig:
    """Load ``config``, or the default file when present, or built-in defaults."""
    if config is not None:
        return load_config(config)
    if DEFAULT_CONFIG.exists():
        return load_config(DEFAULT_CONFIG)
    return NavscopeConfig()


@app.command(help="Print the inferred TOC and sections of an HTML file as JSON.")
def analyze(
    path: typ.Annotated[Path, Parameter(help="HTML file to analyse")],
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to navscope config", env_var="NAVSCOPE_CONFIG"),
    ] = None,
    indent: typ.Annotated[
        int | None,
        Parameter(help="Indent JSON output by this many spaces"),
    ] = None,
) -> None:
    """Analyse ``path`` and print the resulting structure.

    Parameters
    ----------
    path : Path
        HTML document to analyse, decoded as UTF-8.
    config : Path or None, optional
        Configuration file; ``config/navscope.yaml`` is used when it exists.
    indent : int or None, optional
        JSON indentation; compact output when ``None``.

    Raises
    ------
    ValueError
        If ``indent`` is negative.
    """
    if indent is not None and indent < 0:
        msg = f"--indent must be zero or positive, got {indent}."
        raise ValueError(msg)
    settings = _resolve_config(config).analyzer
    html = path.read_text(encoding="utf-8")
    result = StructuralAnalyzer(settings).analyze(html)
    print(json.dumps(result.to_dict(), indent=indent, ensure_ascii=False))


@app.command(help="Import HTML files and write one preview page per section.")
def preview(
    paths: typ.Annotated[list[Path], Parameter(help="HTML files to import")],
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to navscope config", env_var="NAVSCOPE_CONFIG"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Override the preview output directory",
            env_var="NAVSCOPE_OUTPUT_DIR",
        ),
    ] = None,
) -> None:
    """Import ``paths`` in order and render previews for each document.

    Files without an ``.html`` or ``.htm`` suffix are ignored. A file that
    cannot be read is reported and the remaining files are still imported.
    """
    html_files = select_html_files(paths)
    if not html_files:
        print("no HTML files to import")
        return

    resolved = _resolve_config(config)
    preview_config = resolved.preview
    if output_dir is not None:
        preview_config = dc.replace(preview_config, output_dir=output_dir)

    importer = DocumentImporter(StructuralAnalyzer(resolved.analyzer))
    renderer = PreviewRenderer(
        preview_config,
        script_filter=ScriptFilter(resolved.scripts.extra_deny_patterns),
    )
    importer.subscribe(renderer.on_imported)
    results = asyncio.run(importer.integrate_all(html_files))

    for written in renderer.written:
        print(f"wrote {_format_path(written)}")
    for result in results:
        if not result.success:
            print(result.message)


def main() -> None:
    """Run the navscope CLI application."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
