"""Page and redirect rendering for rustdoc-style documentation output."""

from .models import ExternalHtml, Layout, Page, root_path_for, root_path_for_output
from .redirect import RedirectRenderer, render_redirect
from .renderer import PageRenderer, render
from .sink import Sink, write_document
from .slots import SLOTS, build_slots

__all__ = [
    "SLOTS",
    "ExternalHtml",
    "Layout",
    "Page",
    "PageRenderer",
    "RedirectRenderer",
    "Sink",
    "build_slots",
    "render",
    "render_redirect",
    "root_path_for",
    "root_path_for_output",
    "write_document",
]
