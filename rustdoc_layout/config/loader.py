"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from rustdoc_layout._constants import DEFAULT_DESCRIPTION, DEFAULT_KEYWORDS
from rustdoc_layout.content import ContentRenderer
from rustdoc_layout.layout.models import Layout, root_path_for_output

from .external import load_external_html
from .helpers import (
    _as_bool,
    _mapping,
    _optional_str,
    _path_list,
    _resolve_path,
    _text,
)
from .models import PageEntry, RedirectEntry, SiteConfig, SiteConfigError

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the layout, pages and redirects.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file. Relative fragment
        paths inside it resolve against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with a fully loaded :class:`Layout`.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid, or a referenced
        fragment file is missing or unreadable.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from rustdoc_layout.config import load_site_config
    >>> config = load_site_config(Path("layout.yaml"))  # doctest: +SKIP
    >>> config.layout.krate  # doctest: +SKIP
    'mycrate'
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
    base_dir = path.resolve().parent

    defaults = _mapping(raw.get("defaults"), field="defaults")
    pygments_style = _text(defaults.get("pygments_style"), "monokai")
    renderer = ContentRenderer(pygments_style)
    layout = _build_layout(
        _mapping(raw.get("layout"), field="layout"),
        base_dir=base_dir,
        renderer=renderer,
    )

    page_defaults = _PageDefaults(
        description=_text(defaults.get("description"), DEFAULT_DESCRIPTION).replace(
            "{krate}", layout.krate
        ),
        keywords=_text(defaults.get("keywords"), DEFAULT_KEYWORDS),
        css_class=_text(defaults.get("css_class")),
        theme_stylesheet=_as_bool(
            defaults.get("theme_stylesheet"), field="defaults.theme_stylesheet"
        ),
    )

    pages_raw = _mapping(raw.get("pages"), field="pages")
    if not pages_raw:
        msg = "No pages defined in layout configuration."
        raise SiteConfigError(msg)
    pages: dict[str, PageEntry] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                output_key = _output_key(key, "pages")
                if output_key in pages:
                    msg = f"pages entry '{key}' duplicates '{output_key}'."
                    raise SiteConfigError(msg)
                pages[output_key] = _build_page_entry(
                    key=output_key,
                    payload=payload,
                    defaults=page_defaults,
                    base_dir=base_dir,
                )
            case _:
                msg = f"Page '{key}' must be a mapping."
                raise SiteConfigError(msg)

    redirects: list[RedirectEntry] = []
    claimed = set(pages)
    for key, target in _mapping(raw.get("redirects"), field="redirects").items():
        output_key = _output_key(key, "redirects")
        if output_key in claimed:
            msg = f"redirects entry '{key}' collides with output '{output_key}'."
            raise SiteConfigError(msg)
        claimed.add(output_key)
        redirects.append(RedirectEntry(key=output_key, target=_text(target)))
    logger.debug(
        "Loaded %s: %d pages, %d redirects", path, len(pages), len(redirects)
    )

    output_dir = _resolve_path(base_dir, _text(defaults.get("output_dir"), "doc"))
    return SiteConfig(
        layout=layout,
        pages=pages,
        redirects=redirects,
        output_dir=output_dir,
        escape_metadata=_as_bool(
            defaults.get("escape_metadata"), field="defaults.escape_metadata"
        ),
        pygments_style=pygments_style,
    )


@dc.dataclass(slots=True)
class _PageDefaults:
    """Internal container for page default configuration values."""

    description: str
    keywords: str
    css_class: str
    theme_stylesheet: bool


def _build_layout(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path, renderer: ContentRenderer
) -> Layout:
    """Build the site-wide Layout, loading external HTML fragment files."""
    krate = _optional_str(payload.get("krate"))
    if not krate:
        msg = "Layout configuration is missing 'krate'."
        raise SiteConfigError(msg)

    external = _mapping(payload.get("external_html"), field="layout.external_html")
    fragments: dict[str, list[Path]] = {}
    for slot in ("in_header", "before_content", "after_content"):
        field = f"layout.external_html.{slot}"
        fragments[slot] = [
            _resolve_path(base_dir, item)
            for item in _path_list(external.get(slot), field=field)
        ]

    return Layout(
        krate=krate,
        logo=_optional_str(payload.get("logo")) or "",
        favicon=_optional_str(payload.get("favicon")) or "",
        external_html=load_external_html(renderer=renderer, **fragments),
    )


def _build_page_entry(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _PageDefaults,
    base_dir: Path,
) -> PageEntry:
    """Build a PageEntry for a single page using defaults and overrides."""
    root_path = payload.get("root_path")
    return PageEntry(
        key=key,
        title=_text(payload.get("title")),
        css_class=_text(payload.get("css_class"), defaults.css_class),
        description=_text(payload.get("description"), defaults.description),
        keywords=_text(payload.get("keywords"), defaults.keywords),
        sidebar=_fragment_path(payload.get("sidebar"), key, "sidebar", base_dir),
        content=_fragment_path(payload.get("content"), key, "content", base_dir),
        root_path=None if root_path is None else str(root_path),
        theme_stylesheet=_as_bool(
            payload.get("theme_stylesheet"),
            field=f"pages.{key}.theme_stylesheet",
            default=defaults.theme_stylesheet,
        ),
    )


def _output_key(key: object, section: str) -> str:
    """Normalize an output path key to a file path inside the output root."""
    text = str(key).replace("\\", "/").lstrip("/")
    if text.endswith("/") or posixpath.normpath(text or ".") == ".":
        msg = (
            f"{section} entry '{key}' must name a file inside the output directory."
        )
        raise SiteConfigError(msg)
    try:
        root_path_for_output(text)
    except ValueError as exc:
        msg = f"{section} entry '{key}' must stay inside the output directory."
        raise SiteConfigError(msg) from exc
    return posixpath.normpath(text)


def _fragment_path(
    value: object | None, key: str, field: str, base_dir: Path
) -> Path | None:
    """Resolve a page fragment path, requiring the file to exist."""
    text = _optional_str(value)
    if text is None:
        return None
    path = _resolve_path(base_dir, text)
    if not path.is_file():
        msg = f"Page '{key}' {field} file '{path}' not found."
        raise SiteConfigError(msg)
    return path


__all__ = ["load_site_config"]
