"""Minimal redirect pages for moved documentation items.

The generated document redirects three ways: a meta refresh for clients
without scripting, a ``location.replace`` call that carries the current query
string and fragment across, and a visible link for clients with neither. The
target URL is embedded byte-for-byte in all three places.
"""

from __future__ import annotations

import typing as typ

from rustdoc_layout._constants import REDIRECT_TEMPLATE

from .renderer import DEFAULT_TEMPLATES_DIR, build_environment
from .sink import write_document

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .sink import Sink


class RedirectRenderer:
    """Render redirect documents pointing at a target URL."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = build_environment(self.templates_dir)
        self.template = self.env.get_template(REDIRECT_TEMPLATE)

    def render(self, sink: Sink, url: str) -> None:
        """Write a redirect to ``url`` into ``sink`` with a single write.

        The URL is not validated or escaped; callers pass an embeddable value.
        ``OSError`` from the sink propagates unchanged.
        """
        write_document(sink, self.render_to_string(url))

    def render_to_string(self, url: str) -> str:
        """Return the redirect document for ``url``."""
        return self.template.render(url=url)


def render_redirect(sink: Sink, url: str) -> None:
    """Write a redirect page for ``url`` with a default :class:`RedirectRenderer`."""
    RedirectRenderer().render(sink, url)


__all__ = ["RedirectRenderer", "render_redirect"]
