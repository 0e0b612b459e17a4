"""Load navscope configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from navscope._constants import ELLIPSIS
from navscope.analyzer.settings import AnalyzerSettings

from .helpers import _positive_int, _section, _string_tuple, _validate_patterns
from .models import NavscopeConfig, NavscopeConfigError, PreviewConfig, ScriptsConfig


def load_config(path: Path) -> NavscopeConfig:
    """Load the YAML configuration tuning analysis, script filtering and previews.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/navscope.yaml``).

    Returns
    -------
    NavscopeConfig
        Parsed configuration. Blocks and keys absent from the file keep their
        built-in defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    NavscopeConfigError
        If a block or value has the wrong shape (for example, a negative
        ``title_max_length`` or an invalid deny-pattern regex).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from navscope.config import load_config
    >>> config = load_config(Path("config/navscope.yaml"))  # doctest: +SKIP
    >>> config.analyzer.title_max_length  # doctest: +SKIP
    50
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return NavscopeConfig(
        analyzer=_build_analyzer_settings(_section(raw, "analyzer")),
        scripts=_build_scripts_config(_section(raw, "scripts")),
        preview=_build_preview_config(_section(raw, "preview")),
    )


def _build_analyzer_settings(payload: typ.Mapping[str, typ.Any]) -> AnalyzerSettings:
    """Merge analyzer overrides into the default pattern lists and limits."""
    base = AnalyzerSettings()
    toc_patterns = _patterns(payload, "toc_patterns", base.toc_patterns)
    section_patterns = _patterns(payload, "section_patterns", base.section_patterns)
    title_patterns = _patterns(payload, "title_patterns", base.title_patterns)
    extra_toc = _patterns(payload, "extra_toc_patterns")
    extra_sections = _patterns(payload, "extra_section_patterns")

    title_max_length = _positive_int(
        payload.get("title_max_length"),
        field="analyzer.title_max_length",
        default=base.title_max_length,
    )
    if title_max_length <= len(ELLIPSIS):
        msg = (
            "'analyzer.title_max_length' must leave room for the ellipsis "
            f"(more than {len(ELLIPSIS)} characters)."
        )
        raise NavscopeConfigError(msg)
    fallback_title_chars = _positive_int(
        payload.get("fallback_title_chars"),
        field="analyzer.fallback_title_chars",
        default=base.fallback_title_chars,
    )

    return AnalyzerSettings(
        toc_patterns=extra_toc + toc_patterns,
        section_patterns=extra_sections + section_patterns,
        title_patterns=title_patterns,
        title_max_length=title_max_length,
        fallback_title_chars=fallback_title_chars,
    )


def _patterns(
    payload: typ.Mapping[str, typ.Any], key: str, default: tuple[str, ...] = ()
) -> tuple[str, ...]:
    """Return the analyzer pattern list under ``key`` or ``default`` when unset."""
    return _string_tuple(payload.get(key), field=f"analyzer.{key}") or default


def _build_scripts_config(payload: typ.Mapping[str, typ.Any]) -> ScriptsConfig:
    field = "scripts.extra_deny_patterns"
    patterns = _string_tuple(payload.get("extra_deny_patterns"), field=field)
    return ScriptsConfig(extra_deny_patterns=_validate_patterns(patterns, field=field))


def _build_preview_config(payload: typ.Mapping[str, typ.Any]) -> PreviewConfig:
    base = PreviewConfig()
    prefix = payload.get("filename_prefix", base.filename_prefix)
    if not isinstance(prefix, str):
        msg = "'preview.filename_prefix' must be a string."
        raise NavscopeConfigError(msg)
    return PreviewConfig(
        output_dir=Path(payload.get("output_dir", base.output_dir)),
        filename_prefix=prefix,
    )


__all__ = ["load_config"]
