"""Turn fragment files into HTML ready for page slots and bodies.

Sidebar, content, and external HTML fragments referenced from the site
configuration are either raw HTML, embedded as-is, or Markdown, converted here
with syntax-highlighted code blocks. Highlighted blocks carry a
``data-language`` attribute so client scripts can label them.

Examples
--------
>>> renderer = ContentRenderer()
>>> renderer.markdown("# Title")
'<h1>Title</h1>'
>>> renderer.markdown("   ")
''
"""


from __future__ import annotations

import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from pathlib import Path

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LANGUAGE_PREFIX = "language-"


class LanguageTaggedFormatter(HtmlFormatter):
    """HTML formatter that records the block language on the wrapping ``div``.

    ``codehilite`` passes ``lang_str`` to callable formatters. Indented code
    blocks and fences without a language are highlighted as ``text``.
    """

    def __init__(self, *, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANGUAGE_PREFIX) or "text"

    def format(self, tokensource: typ.Any, outfile: typ.Any) -> None:
        buffer = io.StringIO()
        super().format(tokensource, buffer)
        lang = escape(self.language, quote=True)
        html = CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{lang}">', buffer.getvalue(), 1
        )
        outfile.write(html)


class ContentRenderer:
    """Render Markdown fragments with ``codehilite`` code blocks."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize the renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for highlighted code. Defaults to ``"monokai"``.
        """
        self.pygments_style = pygments_style

    def markdown(self, text: str) -> str:
        """Convert Markdown ``text`` to HTML; blank input yields ``""``."""
        normalized = self._normalize_fences(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "lang_prefix": LANGUAGE_PREFIX,
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedFormatter,
                }
            },
        )
        return md.convert(normalized)

    def render_fragment(self, path: Path) -> str:
        """Return HTML for the fragment file at ``path``.

        Markdown files (``.md``/``.markdown``) are converted; anything else is
        returned verbatim. ``OSError`` from reading the file propagates.
        """
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in MARKDOWN_SUFFIXES:
            return self.markdown(text)
        return text

    @staticmethod
    def _normalize_fences(text: str) -> str:
        # ``fenced_code`` only matches fences at column zero, so pull indented
        # fences (list items, quotes) left and drop rustdoc attributes such as
        # ``rust,no_run`` after the language.
        dedented = FENCED_INDENT_PATTERN.sub(r"\1", text)
        return FENCE_LABEL_PATTERN.sub(r"\1\2", dedented)


__all__ = ["MARKDOWN_SUFFIXES", "ContentRenderer", "LanguageTaggedFormatter"]
