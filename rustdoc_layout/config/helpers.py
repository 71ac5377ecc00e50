"""Utility helpers shared by the rustdoc-layout configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _text(value: object | None, default: str = "") -> str:
    """Return ``value`` as a string, substituting ``default`` for ``None``."""
    if value is None:
        return default
    return str(value)


def _path_list(value: object | None, *, field: str) -> list[str]:
    """Normalize a single path or a list of paths into a list of strings."""
    match value:
        case None:
            return []
        case str() as text:
            return [text] if text.strip() else []
        case list() as items:
            return [
                str(item) for item in items if item is not None and str(item).strip()
            ]
        case _:
            msg = f"'{field}' must be a path or a list of paths."
            raise SiteConfigError(msg)


def _resolve_path(base_dir: Path, value: str) -> Path:
    """Resolve ``value`` against ``base_dir`` unless it is already absolute."""
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _as_bool(value: object | None, *, field: str, default: bool = False) -> bool:
    """Return ``value`` as a bool, rejecting anything that is not one."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    msg = f"'{field}' must be true or false, got {value!r}."
    raise SiteConfigError(msg)


def _mapping(value: object | None, *, field: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{field}' must be a mapping."
        raise SiteConfigError(msg)
    return value


__all__ = [
    "_as_bool",
    "_mapping",
    "_optional_str",
    "_path_list",
    "_resolve_path",
    "_text",
]
