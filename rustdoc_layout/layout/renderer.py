"""Render complete rustdoc HTML pages from layout settings and page fragments.

:class:`PageRenderer` wraps the ``doc_page.jinja`` skeleton. Each call merges a
site-wide :class:`~rustdoc_layout.layout.models.Layout`, a per-document
:class:`~rustdoc_layout.layout.models.Page`, and two pre-rendered fragments
(sidebar and main content) into one HTML5 document, then hands the encoded
document to the caller's sink in a single write.

Optional markup (logo, favicon, theme stylesheet, and the three external HTML
fragments) is resolved up front by :func:`~rustdoc_layout.layout.slots.build_slots`
so the template only fills placeholders. Fragments and metadata are embedded
verbatim unless the renderer is created with ``escape_metadata=True``.

Example
-------
>>> import io
>>> from rustdoc_layout.layout import Layout, Page, PageRenderer
>>> sink = io.BytesIO()
>>> PageRenderer().render(
...     sink,
...     Layout(krate="demo"),
...     Page("demo - Rust", "mod", "../", "", ""),
...     "<p>nav</p>",
...     "<p>body</p>",
... )
>>> b"<title>demo - Rust</title>" in sink.getvalue()
True
"""

from __future__ import annotations

import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from rustdoc_layout._constants import (
    MAIN_CSS,
    MAIN_JS,
    NORMALIZE_CSS,
    PAGE_TEMPLATE,
    RUSTDOC_CSS,
    SEARCH_INDEX_JS,
)

from .sink import write_document
from .slots import build_slots

if typ.TYPE_CHECKING:
    from .models import Layout, Page
    from .sink import Sink

ASSETS: dict[str, str] = {
    "normalize_css": NORMALIZE_CSS,
    "rustdoc_css": RUSTDOC_CSS,
    "main_css": MAIN_CSS,
    "main_js": MAIN_JS,
    "search_index_js": SEARCH_INDEX_JS,
}

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used by the page and redirect renderers.

    Autoescaping stays off: every value reaching the templates is either a
    trusted fragment or has already been escaped by the caller.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=False,  # noqa: S701
        trim_blocks=True,
        lstrip_blocks=True,
    )


class PageRenderer:
    """Compose layout settings and pre-rendered fragments into HTML documents."""

    def __init__(
        self, *, escape_metadata: bool = False, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and load the page skeleton.

        Parameters
        ----------
        escape_metadata : bool, optional
            HTML-escape ``title``, ``description``, ``keywords`` and
            ``css_class`` before embedding them. Defaults to ``False``, which
            embeds them exactly as supplied.
        templates_dir : Path, optional
            Directory containing ``doc_page.jinja``; defaults to the package
            templates.
        """
        self.escape_metadata = escape_metadata
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = build_environment(self.templates_dir)
        self.template = self.env.get_template(PAGE_TEMPLATE)

    def render(  # noqa: PLR0913
        self,
        sink: Sink,
        layout: Layout,
        page: Page,
        sidebar: object,
        content: object,
        include_theme_stylesheet: bool = False,  # noqa: FBT001, FBT002
    ) -> None:
        """Write one complete HTML document for ``page`` to ``sink``.

        Parameters
        ----------
        sink : Sink
            Writable destination. Binary sinks receive UTF-8 bytes; text
            sinks receive the document string.
        layout : Layout
            Site-wide settings shared across pages.
        page : Page
            Metadata for this document.
        sidebar : object
            Pre-rendered sidebar markup; embedded via ``str()``.
        content : object
            Pre-rendered main content markup; embedded via ``str()``.
        include_theme_stylesheet : bool, optional
            Emit a ``theme.css`` link prefixed with ``page.root_path``.

        Raises
        ------
        OSError
            Propagated unchanged when the sink fails to accept the write.
        """
        document = self.render_to_string(
            layout, page, sidebar, content, include_theme_stylesheet
        )
        write_document(sink, document)

    def render_to_string(
        self,
        layout: Layout,
        page: Page,
        sidebar: object,
        content: object,
        include_theme_stylesheet: bool = False,  # noqa: FBT001, FBT002
    ) -> str:
        """Return the HTML document that :meth:`render` would write."""
        context = {
            "title": self._metadata(page.title),
            "description": self._metadata(page.description),
            "keywords": self._metadata(page.keywords),
            "css_class": self._metadata(page.css_class),
            "root_path": page.root_path,
            "krate": layout.krate,
            "assets": ASSETS,
            "slots": build_slots(
                layout, page, include_theme_stylesheet=include_theme_stylesheet
            ),
            "sidebar": str(sidebar),
            "content": str(content),
        }
        return self.template.render(**context)

    def _metadata(self, value: str) -> str:
        if self.escape_metadata:
            return escape(value, quote=True)
        return value


def render(  # noqa: PLR0913
    sink: Sink,
    layout: Layout,
    page: Page,
    sidebar: object,
    content: object,
    include_theme_stylesheet: bool = False,  # noqa: FBT001, FBT002
) -> None:
    """Render a page with a default :class:`PageRenderer`."""
    PageRenderer().render(
        sink, layout, page, sidebar, content, include_theme_stylesheet
    )


__all__ = [
    "ASSETS",
    "DEFAULT_TEMPLATES_DIR",
    "PageRenderer",
    "build_environment",
    "render",
]
