"""Behaviour tests for page and redirect rendering.

These pytest-bdd scenarios, driven by ``features/render_page.feature``, render
pages through :class:`~rustdoc_layout.layout.PageRenderer` into in-memory
sinks and check the resulting documents the way a reader of the generated
docs would see them: title, body class, sidebar, main content, logo link and
theme stylesheet. A final scenario checks the redirect page.

Usage
-----
Run ``pytest tests/bdd/test_render_page.py -v``. No network access or files
outside ``tmp_path`` are needed.
"""

from __future__ import annotations

import io
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from rustdoc_layout.layout import Layout, Page, PageRenderer, render_redirect

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "render_page.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(state: ScenarioState) -> BeautifulSoup:
    return BeautifulSoup(typ.cast("str", state["html"]), "html.parser")


@given(parsers.parse('a layout for crate "{krate}" with no optional settings'))
def given_bare_layout(scenario_state: ScenarioState, krate: str) -> None:
    scenario_state["layout"] = Layout(krate=krate)


@given(parsers.parse('a layout for crate "{krate}" with logo "{logo}"'))
def given_logo_layout(scenario_state: ScenarioState, krate: str, logo: str) -> None:
    scenario_state["layout"] = Layout(krate=krate, logo=logo)


@given(
    parsers.parse(
        'a page titled "{title}" with class "{css_class}" at root path "{root_path}"'
    )
)
def given_page(
    scenario_state: ScenarioState, title: str, css_class: str, root_path: str
) -> None:
    scenario_state["page"] = Page(
        title=title,
        css_class=css_class,
        root_path=root_path,
        description="d",
        keywords="k",
    )


def _render(
    state: ScenarioState, sidebar: str, content: str, *, theme: bool
) -> None:
    sink = io.BytesIO()
    PageRenderer().render(
        sink, state["layout"], state["page"], sidebar, content, theme
    )
    state["html"] = sink.getvalue().decode("utf-8")


@when(
    parsers.parse(
        'I render the page with sidebar paragraph "{sidebar}" '
        'and content paragraph "{content}"'
    )
)
def when_render_page(scenario_state: ScenarioState, sidebar: str, content: str) -> None:
    _render(scenario_state, f"<p>{sidebar}</p>", f"<p>{content}</p>", theme=False)


@when("I render the page with the theme stylesheet")
def when_render_themed_page(scenario_state: ScenarioState) -> None:
    _render(scenario_state, "", "", theme=True)


@when(parsers.parse('I render a redirect to "{url}"'))
def when_render_redirect(scenario_state: ScenarioState, url: str) -> None:
    sink = io.BytesIO()
    render_redirect(sink, url)
    scenario_state["html"] = sink.getvalue().decode("utf-8")


@then(parsers.parse('the document title is "{title}"'))
def then_title(scenario_state: ScenarioState, title: str) -> None:
    assert _soup(scenario_state).title.get_text() == title


@then(parsers.parse('the body class is "{css_class}"'))
def then_body_class(scenario_state: ScenarioState, css_class: str) -> None:
    assert f'<body class="{css_class}">' in scenario_state["html"]


@then(parsers.parse('the sidebar contains the paragraph "{text}"'))
def then_sidebar(scenario_state: ScenarioState, text: str) -> None:
    sidebar = _soup(scenario_state).select_one("nav.sidebar")
    assert f"<p>{text}</p>" in sidebar.decode_contents()


@then(parsers.parse('the main section holds the paragraph "{text}"'))
def then_main(scenario_state: ScenarioState, text: str) -> None:
    main = _soup(scenario_state).select_one("section#main")
    assert main.decode_contents() == f"<p>{text}</p>"


@then("no optional markup is present")
def then_no_optional_markup(scenario_state: ScenarioState) -> None:
    html = typ.cast("str", scenario_state["html"])
    assert "theme.css" not in html, "theme stylesheet leaked into the page"
    assert "shortcut icon" not in html, "favicon leaked into the page"
    assert "<img" not in html, "logo leaked into the page"


@then(parsers.parse('the logo links to "{href}"'))
def then_logo_href(scenario_state: ScenarioState, href: str) -> None:
    anchor = _soup(scenario_state).select_one("nav.sidebar a")
    assert anchor is not None, "expected a logo anchor in the sidebar"
    assert anchor["href"] == href


@then(parsers.parse('the theme stylesheet link is "{href}"'))
def then_theme_link(scenario_state: ScenarioState, href: str) -> None:
    links = [link["href"] for link in _soup(scenario_state).select("link")]
    assert href in links
    assert links.index(href) == len(links) - 1, "theme.css must follow main.css"


@then(parsers.parse('every redirect mechanism targets "{url}"'))
def then_redirect_targets(scenario_state: ScenarioState, url: str) -> None:
    soup = _soup(scenario_state)
    assert soup.select_one('meta[http-equiv="refresh"]')["content"] == f"0;URL={url}"
    assert soup.select_one("body a")["href"] == url
    assert soup.select_one("body a").get_text() == url
    script = soup.select_one("script").get_text()
    assert script == f'location.replace("{url}" + location.search + location.hash);'
