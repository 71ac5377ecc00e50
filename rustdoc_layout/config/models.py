"""Typed dataclasses describing a rustdoc-layout site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from rustdoc_layout.layout.models import Layout, Page, root_path_for_output


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PageEntry:
    """A page to render, with its metadata and fragment sources.

    Attributes
    ----------
    key : str
        Output path relative to the output directory, e.g.
        ``"mycrate/index.html"``.
    title : str
        Document title.
    css_class : str
        Body class token.
    description : str
        Description meta content.
    keywords : str
        Keywords meta content.
    sidebar : Path | None
        Fragment file holding sidebar markup; ``None`` for an empty sidebar.
    content : Path | None
        Fragment file holding main content; ``None`` for an empty body.
    root_path : str | None
        Explicit root prefix; derived from ``key`` when ``None``.
    theme_stylesheet : bool
        Whether the page links ``theme.css``.
    """

    key: str
    title: str
    css_class: str
    description: str
    keywords: str
    sidebar: Path | None
    content: Path | None
    root_path: str | None = None
    theme_stylesheet: bool = False

    def resolved_root_path(self) -> str:
        """Return the configured root prefix or one derived from the key depth."""
        if self.root_path is not None:
            return self.root_path
        return root_path_for_output(self.key)

    def to_page(self) -> Page:
        """Return the immutable :class:`Page` consumed by the renderer."""
        return Page(
            title=self.title,
            css_class=self.css_class,
            root_path=self.resolved_root_path(),
            description=self.description,
            keywords=self.keywords,
        )


@dc.dataclass(slots=True)
class RedirectEntry:
    """A redirect page written at ``key`` pointing at ``target``."""

    key: str
    target: str


@dc.dataclass(slots=True)
class SiteConfig:
    """Layout settings plus the pages and redirects to emit."""

    layout: Layout
    pages: dict[str, PageEntry]
    redirects: list[RedirectEntry] = dc.field(default_factory=list)
    output_dir: Path = Path("doc")
    escape_metadata: bool = False
    pygments_style: str = "monokai"

    def get_page(self, key: str) -> PageEntry:
        """Return the page entry for ``key``."""
        try:
            return self.pages[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages))
            msg = f"Unknown page '{key}'. Known pages: {available}"
            raise KeyError(msg) from exc


__all__ = ["PageEntry", "RedirectEntry", "SiteConfig", "SiteConfigError"]
