"""Typed dataclasses describing navscope configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from navscope.analyzer.settings import AnalyzerSettings


class NavscopeConfigError(ValueError):
    """Raised when the navscope configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ScriptsConfig:
    """Advisory script filtering applied before inline scripts are rendered."""

    extra_deny_patterns: tuple[str, ...] = ()


@dc.dataclass(slots=True)
class PreviewConfig:
    """Where and how preview pages are written."""

    output_dir: Path = Path("public/preview")
    filename_prefix: str = ""


@dc.dataclass(slots=True)
class NavscopeConfig:
    """Analyzer, script filter and preview settings loaded from YAML."""

    analyzer: AnalyzerSettings = dc.field(default_factory=AnalyzerSettings)
    scripts: ScriptsConfig = dc.field(default_factory=ScriptsConfig)
    preview: PreviewConfig = dc.field(default_factory=PreviewConfig)


__all__ = [
    "NavscopeConfig",
    "NavscopeConfigError",
    "PreviewConfig",
    "ScriptsConfig",
]
