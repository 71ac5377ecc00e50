"""Write every configured page and redirect of a documentation site to disk.

:class:`SiteBuilder` takes a loaded :class:`~rustdoc_layout.config.SiteConfig`,
reads each page's sidebar and content fragments, renders the page through
:class:`~rustdoc_layout.layout.PageRenderer` straight into a binary file
handle, and then emits the configured redirect pages.

>>> from pathlib import Path
>>> from rustdoc_layout.config import load_site_config
>>> builder = SiteBuilder(load_site_config(Path("layout.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('doc/mycrate/index.html'), ...]

Output files are UTF-8 encoded. Parent directories are created as needed and
filesystem errors propagate to the caller.
"""

from __future__ import annotations

import logging
import typing as typ

from .config import load_fragment
from .content import ContentRenderer
from .layout import PageRenderer, RedirectRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import PageEntry, RedirectEntry, SiteConfig

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Render the pages and redirects described by a site configuration."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and its renderers.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed configuration from :func:`rustdoc_layout.config.load_site_config`.
        output_dir : Path, optional
            Override for the configured output directory.
        templates_dir : Path, optional
            Directory containing the Jinja templates; defaults to the package
            templates.
        """
        self.site_config = site_config
        self.output_dir = output_dir or site_config.output_dir
        self.page_renderer = PageRenderer(
            escape_metadata=site_config.escape_metadata, templates_dir=templates_dir
        )
        self.redirect_renderer = RedirectRenderer(templates_dir=templates_dir)
        self.content_renderer = ContentRenderer(site_config.pygments_style)

    def run(self) -> list[Path]:
        """Render every page, then every redirect, returning the written paths."""
        written = [self.render_page(entry) for entry in self.site_config.pages.values()]
        written.extend(
            self.render_redirect(entry) for entry in self.site_config.redirects
        )
        return written

    def render_page(self, entry: PageEntry) -> Path:
        """Render a single page entry into the output directory."""
        sidebar = self._fragment(entry.sidebar)
        content = self._fragment(entry.content)
        output_path = self._output_path(entry.key)
        with output_path.open("wb") as sink:
            self.page_renderer.render(
                sink,
                self.site_config.layout,
                entry.to_page(),
                sidebar,
                content,
                entry.theme_stylesheet,
            )
        logger.debug("Rendered page %s", output_path)
        return output_path

    def render_redirect(self, entry: RedirectEntry) -> Path:
        """Write a redirect page for ``entry`` into the output directory."""
        output_path = self._output_path(entry.key)
        with output_path.open("wb") as sink:
            self.redirect_renderer.render(sink, entry.target)
        logger.debug("Rendered redirect %s -> %s", output_path, entry.target)
        return output_path

    def _fragment(self, path: Path | None) -> str:
        if path is None:
            return ""
        return load_fragment(path, self.content_renderer)

    def _output_path(self, key: str) -> Path:
        output_path = self.output_dir / key
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return output_path


__all__ = ["SiteBuilder"]
