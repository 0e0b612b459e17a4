"""Tests for the ``navscope`` command-line interface.

The commands are invoked through the Cyclopts ``app`` object with explicit
argument lists; output is captured with ``capsys`` and JSON payloads are
decoded with msgspec.
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
import pytest

from navscope import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

DECK = (
    '<nav><ul><li><a href="#intro">Intro</a></li>'
    '<li><a href="#detail">Detail</a></li></ul></nav>'
    '<section id="intro">One</section><section id="detail">Two</section>'
)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory without a default config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NAVSCOPE_CONFIG", raising=False)
    monkeypatch.delenv("NAVSCOPE_OUTPUT_DIR", raising=False)
    return tmp_path


def _deck(tmp_path: Path, name: str = "deck.html") -> Path:
    path = tmp_path / name
    path.write_text(DECK, encoding="utf-8")
    return path


def test_analyze_prints_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``analyze`` emits the analysis result as JSON."""
    cli.analyze(_deck(tmp_path), indent=2)

    payload = msgspec_json.decode(capsys.readouterr().out)
    assert [entry["id"] for entry in payload["toc_entries"]] == ["intro", "detail"]
    assert [section["nav_ref"] for section in payload["sections"]] == [
        "intro",
        "detail",
    ]


def test_analyze_applies_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Analyzer settings from ``--config`` change the result."""
    config = tmp_path / "navscope.yaml"
    config.write_text("analyzer:\n  title_max_length: 5\n", encoding="utf-8")
    deck = tmp_path / "deck.html"
    deck.write_text('<div class="slide"><h2>Lengthy</h2></div>', encoding="utf-8")

    cli.analyze(deck, config=config)

    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["sections"][0]["title"] == "Le..."


def test_analyze_rejects_negative_indent(tmp_path: Path) -> None:
    """A negative indent is an invalid option value."""
    with pytest.raises(ValueError, match="--indent"):
        cli.analyze(_deck(tmp_path), indent=-1)


def test_preview_writes_pages_and_reports_failures(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``preview`` lists written pages and failed imports; other files are ignored."""
    out_dir = tmp_path / "site"
    notes = tmp_path / "notes.txt"
    notes.write_text("not html", encoding="utf-8")

    cli.preview(
        [_deck(tmp_path), tmp_path / "missing.htm", notes], output_dir=out_dir
    )

    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["wrote site/deck-intro.html", "wrote site/deck-detail.html"]
    assert lines[2].startswith("Failed to import 'missing.htm'")
    assert len(lines) == 3
    assert (out_dir / "deck-intro.html").exists()


def test_preview_without_html_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Nothing is imported when no argument is an HTML file."""
    cli.preview([tmp_path / "readme.md"])

    assert capsys.readouterr().out.strip() == "no HTML files to import"


def test_app_dispatches_analyze(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The Cyclopts app routes ``analyze`` with its options."""
    deck = _deck(tmp_path)

    cli.app(["analyze", str(deck), "--indent", "0"], exit_on_error=False)

    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["title"] == "Imported document"


def test_preview_reports_unwritable_output_dir(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Render failures are reported per file instead of aborting the command."""
    blocker = tmp_path / "site"
    blocker.write_text("not a directory", encoding="utf-8")

    cli.preview([_deck(tmp_path)], output_dir=blocker)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Failed to import 'deck.html'")
