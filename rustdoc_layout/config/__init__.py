"""Load and validate site configuration YAML for rustdoc-layout builds.

This subpackage parses a ``layout.yaml`` file into the immutable
:class:`~rustdoc_layout.layout.models.Layout` shared by every page, the page
entries to render, and the redirects to emit. External HTML fragments named
by the configuration are read (and Markdown fragments converted) while
loading, so the resulting :class:`SiteConfig` is ready for rendering.

Examples
--------
>>> from pathlib import Path
>>> from rustdoc_layout.config import load_site_config
>>> site = load_site_config(Path("layout.yaml"))  # doctest: +SKIP
>>> site.get_page("mycrate/index.html").to_page().root_path  # doctest: +SKIP
'../'
"""

from .external import load_external_html, load_fragment
from .loader import load_site_config
from .models import PageEntry, RedirectEntry, SiteConfig, SiteConfigError

__all__ = [
    "PageEntry",
    "RedirectEntry",
    "SiteConfig",
    "SiteConfigError",
    "load_external_html",
    "load_fragment",
    "load_site_config",
]
