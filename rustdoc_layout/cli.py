"""Cyclopts CLI entrypoint for rendering rustdoc-style documentation pages.

The ``rustdoc-layout`` console script renders every page and redirect listed
in a ``layout.yaml`` site configuration, or writes a single redirect page.
Every option can also be supplied through ``RUSTDOC_LAYOUT_*`` environment
variables, which keeps CI invocations short.

Examples
--------
Render the site described by the default configuration:

>>> from rustdoc_layout.cli import main
>>> main()  # doctest: +SKIP

Write one redirect page:

>>> from rustdoc_layout.cli import app
>>> app(
...     ["redirect", "https://example.com/new.html", "--output", "old.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfigError, load_site_config
from .layout import RedirectRenderer
from .site import SiteBuilder

DEFAULT_CONFIG = Path("layout.yaml")

app = App(
    name="rustdoc-layout",
    config=cyclopts.config.Env("RUSTDOC_LAYOUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command(help="Render every page and redirect in a site configuration.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the site configuration")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log each rendered file at debug level")
    ] = False,
) -> None:
    """Render the documentation site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``layout.yaml`` configuration file.
    output_dir : Path or None, optional
        Directory receiving the rendered files; defaults to the configured
        ``defaults.output_dir``.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when the configuration file is missing, is not a
        mapping, or is invalid. The error message goes to standard error.
    """
    _configure_logging(verbose=verbose)
    try:
        site_config = load_site_config(config)
    except (FileNotFoundError, TypeError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    for path in SiteBuilder(site_config, output_dir=output_dir).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Write a single page redirecting to a URL.")
def redirect(
    url: typ.Annotated[str, Parameter(help="Redirect target URL")],
    *,
    output: typ.Annotated[Path, Parameter(help="File to write")],
) -> None:
    """Write a redirect page pointing at ``url`` to ``output``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("wb") as sink:
        RedirectRenderer().render(sink, url)
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``rustdoc-layout`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
