"""Render rustdoc-style HTML documentation pages and redirects.

The core lives in :mod:`rustdoc_layout.layout`: :class:`PageRenderer` turns a
site-wide :class:`Layout`, a per-document :class:`Page`, and pre-rendered
sidebar and content fragments into a complete HTML document, and
:func:`render_redirect` writes a minimal page that forwards the browser to
another URL. The :mod:`~rustdoc_layout.config`, :mod:`~rustdoc_layout.site`
and :mod:`~rustdoc_layout.cli` modules drive both from a YAML site
configuration.

Examples
--------
>>> import io
>>> from rustdoc_layout import render_redirect
>>> sink = io.BytesIO()
>>> render_redirect(sink, "index.html")
>>> b'content="0;URL=index.html"' in sink.getvalue()
True
"""

from __future__ import annotations

from .cli import app, main
from .layout import (
    ExternalHtml,
    Layout,
    Page,
    PageRenderer,
    RedirectRenderer,
    render,
    render_redirect,
)

__all__ = [
    "ExternalHtml",
    "Layout",
    "Page",
    "PageRenderer",
    "RedirectRenderer",
    "app",
    "main",
    "render",
    "render_redirect",
]
