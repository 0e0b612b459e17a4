"""Utility helpers shared by the navscope configuration loader."""

from __future__ import annotations

import re
import typing as typ

from .models import NavscopeConfigError


def _string_tuple(value: object, *, field: str) -> tuple[str, ...]:
    """Normalize a YAML scalar or list into a tuple of non-empty strings."""
    match value:
        case None:
            return ()
        case str() as text:
            stripped = text.strip()
            return (stripped,) if stripped else ()
        case list() | tuple():
            normalized: list[str] = []
            for segment in value:
                text = str(segment).strip()
                if text:
                    normalized.append(text)
            return tuple(normalized)
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise NavscopeConfigError(msg)


def _positive_int(value: object, *, field: str, default: int) -> int:
    """Return ``value`` as a positive integer, or ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        msg = f"'{field}' must be a positive integer, got {value!r}."
        raise NavscopeConfigError(msg)
    return value


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating a missing block as empty."""
    payload = raw.get(key) or {}
    if not isinstance(payload, dict):
        msg = f"'{key}' must be a mapping."
        raise NavscopeConfigError(msg)
    return payload


def _validate_patterns(patterns: tuple[str, ...], *, field: str) -> tuple[str, ...]:
    """Ensure every entry compiles as a regular expression."""
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            msg = f"Invalid regular expression in '{field}': {pattern!r} ({exc})"
            raise NavscopeConfigError(msg) from exc
    return patterns


__all__ = ["_positive_int", "_section", "_string_tuple", "_validate_patterns"]
