"""Load and validate navscope configuration YAML.

This subpackage parses an optional ``navscope.yaml`` file, merges it with the
built-in analyzer heuristics, and produces typed dataclasses
(:class:`NavscopeConfig`, :class:`PreviewConfig`, etc.) consumed by the CLI,
the importer and the preview renderer. The primary entry point is
:func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from navscope.config import load_config
>>> config = load_config(Path("config/navscope.yaml"))  # doctest: +SKIP
>>> config.preview.output_dir  # doctest: +SKIP
PosixPath('public/preview')
"""

from .loader import load_config
from .models import NavscopeConfig, NavscopeConfigError, PreviewConfig, ScriptsConfig

__all__ = [
    "NavscopeConfig",
    "NavscopeConfigError",
    "PreviewConfig",
    "ScriptsConfig",
    "load_config",
]
