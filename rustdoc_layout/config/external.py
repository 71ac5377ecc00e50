"""Load external HTML fragments injected into every rendered page."""

from __future__ import annotations

import logging
import typing as typ

from rustdoc_layout.content import ContentRenderer
from rustdoc_layout.layout.models import ExternalHtml

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_external_html(
    *,
    in_header: cabc.Sequence[Path] = (),
    before_content: cabc.Sequence[Path] = (),
    after_content: cabc.Sequence[Path] = (),
    renderer: ContentRenderer | None = None,
) -> ExternalHtml:
    """Read fragment files and concatenate them into an :class:`ExternalHtml`.

    Parameters
    ----------
    in_header, before_content, after_content : Sequence[Path]
        Fragment files for each injection point, concatenated in order.
        Markdown files are converted to HTML.
    renderer : ContentRenderer, optional
        Renderer used for fragment files; a default one is created when
        omitted.

    Returns
    -------
    ExternalHtml
        Fragments with empty strings for injection points without files.

    Raises
    ------
    SiteConfigError
        If any listed file is missing or cannot be read.
    """
    content_renderer = renderer or ContentRenderer()
    return ExternalHtml(
        in_header=_load_all(in_header, content_renderer),
        before_content=_load_all(before_content, content_renderer),
        after_content=_load_all(after_content, content_renderer),
    )


def _load_all(paths: cabc.Sequence[Path], renderer: ContentRenderer) -> str:
    return "".join(load_fragment(path, renderer) for path in paths)


def load_fragment(path: Path, renderer: ContentRenderer) -> str:
    """Return the HTML for one fragment file, wrapping read failures."""
    try:
        fragment = renderer.render_fragment(path)
    except OSError as exc:
        msg = f"Failed to read HTML fragment '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    logger.debug("Loaded fragment %s (%d chars)", path, len(fragment))
    return fragment


__all__ = ["load_external_html", "load_fragment"]
