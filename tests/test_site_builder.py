"""End-to-end tests for ``SiteBuilder`` and the ``rustdoc-layout`` commands.

A small site configuration with one crate page, one top-level page and one
redirect is written to ``tmp_path``; the tests then build it through the
builder and through the CLI command functions and inspect the written files.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup

from rustdoc_layout import cli
from rustdoc_layout.config import load_site_config
from rustdoc_layout.layout.renderer import DEFAULT_TEMPLATES_DIR
from rustdoc_layout.site import SiteBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    """Write a site configuration with fragments and return its path."""
    (tmp_path / "sidebar.html").write_text(
        "<p class='location'>Crate mycrate</p>", encoding="utf-8"
    )
    (tmp_path / "content.md").write_text(
        "# Crate mycrate\n\n```rust\nlet x = 1;\n```\n", encoding="utf-8"
    )
    (tmp_path / "footer.html").write_text("<div id='after'></div>", encoding="utf-8")
    config_path = tmp_path / "layout.yaml"
    config_path.write_text(
        dedent(
            """
            layout:
              krate: mycrate
              logo: https://example.com/logo.png
              external_html:
                after_content: footer.html
            defaults:
              output_dir: doc
            pages:
              mycrate/index.html:
                title: mycrate - Rust
                css_class: mod
                sidebar: sidebar.html
                content: content.md
                theme_stylesheet: true
              index.html:
                title: Index
            redirects:
              mycrate/old/index.html: ../index.html
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


def test_builder_writes_pages_then_redirects(site_config_path: Path) -> None:
    site = load_site_config(site_config_path)
    written = SiteBuilder(site).run()

    out_dir = site_config_path.parent.resolve() / "doc"
    assert written == [
        out_dir / "mycrate/index.html",
        out_dir / "index.html",
        out_dir / "mycrate/old/index.html",
    ]
    assert all(path.is_file() for path in written)


def test_builder_uses_custom_templates_dir(
    site_config_path: Path, tmp_path: Path
) -> None:
    templates = tmp_path / "templates"
    shutil.copytree(DEFAULT_TEMPLATES_DIR, templates)
    (templates / "redirect.jinja").write_text("moved to {{ url }}", encoding="utf-8")

    site = load_site_config(site_config_path)
    builder = SiteBuilder(site, output_dir=tmp_path / "out", templates_dir=templates)
    builder.run()

    redirect = tmp_path / "out" / "mycrate" / "old" / "index.html"
    assert redirect.read_text(encoding="utf-8") == "moved to ../index.html"
    page = (tmp_path / "out" / "index.html").read_text(encoding="utf-8")
    assert page.startswith("<!DOCTYPE html>")


def test_crate_page_contents(site_config_path: Path) -> None:
    site = load_site_config(site_config_path)
    SiteBuilder(site).run()
    html = (site_config_path.parent / "doc/mycrate/index.html").read_text(
        encoding="utf-8"
    )
    soup = BeautifulSoup(html, "html.parser")

    assert soup.title.get_text() == "mycrate - Rust"
    assert soup.body["class"] == ["rustdoc", "mod"]
    assert soup.select_one("nav.sidebar a")["href"] == "../mycrate/index.html"
    assert soup.select_one("nav.sidebar p.location").get_text() == "Crate mycrate"
    main = soup.select_one("section#main")
    assert main.find("h1").get_text() == "Crate mycrate"
    assert main.select_one("div.codehilite")["data-language"] == "rust"
    assert soup.select_one('link[href="../theme.css"]') is not None
    assert soup.select_one("div#after") is not None


def test_top_level_page_uses_empty_root_path(site_config_path: Path) -> None:
    SiteBuilder(load_site_config(site_config_path)).run()
    html = (site_config_path.parent / "doc/index.html").read_text(encoding="utf-8")

    assert 'href="normalize.css"' in html
    assert "<a href='mycrate/index.html'>" in html
    assert "theme.css" not in html
    assert "<section id='main' class=\"content\"></section>" in html


def test_redirect_page_written(site_config_path: Path) -> None:
    SiteBuilder(load_site_config(site_config_path)).run()
    html = (site_config_path.parent / "doc/mycrate/old/index.html").read_text(
        encoding="utf-8"
    )
    assert 'content="0;URL=../index.html"' in html


def test_output_dir_override(site_config_path: Path, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"
    written = SiteBuilder(
        load_site_config(site_config_path), output_dir=target
    ).run()
    assert all(path.is_relative_to(target) for path in written)


def test_builder_logs_each_file(
    site_config_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="rustdoc_layout.site"):
        SiteBuilder(load_site_config(site_config_path)).run()
    messages = [record.getMessage() for record in caplog.records]
    assert sum(message.startswith("Rendered page") for message in messages) == 2
    assert sum(message.startswith("Rendered redirect") for message in messages) == 1


def test_build_command_reports_written_files(
    site_config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.build(config=site_config_path)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.startswith("wrote ") for line in lines)
    assert lines[0].endswith("mycrate/index.html")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        (None, "not found"),
        ("layout: {krate: demo}\n", "No pages"),
    ],
)
def test_build_command_reports_configuration_errors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    body: str | None,
    message: str,
) -> None:
    config = tmp_path / "layout.yaml"
    if body is not None:
        config.write_text(body, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")
    assert message in captured.err
    assert captured.out == ""


def test_redirect_command_writes_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "nested" / "old.html"
    cli.redirect("https://example.com/new.html", output=output)

    html = output.read_text(encoding="utf-8")
    assert 'href="https://example.com/new.html"' in html
    assert capsys.readouterr().out.startswith("wrote ")
