"""Optional fragments composed into the fixed page skeleton.

Every optional piece of markup on a documentation page lives in a named slot.
A slot is a pure function of the site ``Layout``, the ``Page`` being rendered,
and the theme-stylesheet flag; it returns the fragment to embed or ``None``
when the slot stays empty. ``build_slots`` resolves the full ordered set for a
single render so the template only ever fills placeholders.

Examples
--------
>>> from rustdoc_layout.layout.models import Layout, Page
>>> layout = Layout(krate="demo", favicon="/favicon.ico")
>>> page = Page("Demo", "mod", "../", "", "")
>>> slots = build_slots(layout, page, include_theme_stylesheet=False)
>>> slots["favicon"]
'<link rel="shortcut icon" href="/favicon.ico">'
>>> slots["logo"]
''
"""

from __future__ import annotations

import typing as typ

from rustdoc_layout._constants import THEME_CSS

if typ.TYPE_CHECKING:
    from .models import Layout, Page

SlotFunction = typ.Callable[["Layout", "Page", bool], "str | None"]


def logo_slot(
    layout: Layout,
    page: Page,
    include_theme_stylesheet: bool,  # noqa: ARG001, FBT001
) -> str | None:
    """Return the sidebar logo anchor linking back to the crate index."""
    if not layout.logo:
        return None
    return (
        f"<a href='{page.root_path}{layout.krate}/index.html'>"
        f"<img src='{layout.logo}' alt='logo' width='100'></a>"
    )


def favicon_slot(
    layout: Layout,
    page: Page,  # noqa: ARG001
    include_theme_stylesheet: bool,  # noqa: ARG001, FBT001
) -> str | None:
    """Return the shortcut icon link."""
    if not layout.favicon:
        return None
    return f'<link rel="shortcut icon" href="{layout.favicon}">'


def theme_stylesheet_slot(
    layout: Layout,  # noqa: ARG001
    page: Page,
    include_theme_stylesheet: bool,  # noqa: FBT001
) -> str | None:
    """Return the theme stylesheet link when the flag is set."""
    if not include_theme_stylesheet:
        return None
    return (
        f'<link rel="stylesheet" type="text/css" href="{page.root_path}{THEME_CSS}">'
    )


def in_header_slot(
    layout: Layout,
    page: Page,  # noqa: ARG001
    include_theme_stylesheet: bool,  # noqa: ARG001, FBT001
) -> str | None:
    return layout.external_html.in_header or None


def before_content_slot(
    layout: Layout,
    page: Page,  # noqa: ARG001
    include_theme_stylesheet: bool,  # noqa: ARG001, FBT001
) -> str | None:
    return layout.external_html.before_content or None


def after_content_slot(
    layout: Layout,
    page: Page,  # noqa: ARG001
    include_theme_stylesheet: bool,  # noqa: ARG001, FBT001
) -> str | None:
    return layout.external_html.after_content or None


# Document order.
SLOTS: tuple[tuple[str, SlotFunction], ...] = (
    ("theme_stylesheet", theme_stylesheet_slot),
    ("favicon", favicon_slot),
    ("in_header", in_header_slot),
    ("before_content", before_content_slot),
    ("logo", logo_slot),
    ("after_content", after_content_slot),
)


def build_slots(
    layout: Layout, page: Page, *, include_theme_stylesheet: bool
) -> dict[str, str]:
    """Resolve every slot for one render.

    Parameters
    ----------
    layout : Layout
        Site-wide settings supplying logo, favicon, and external fragments.
    page : Page
        Page whose ``root_path`` prefixes relative links.
    include_theme_stylesheet : bool
        Whether the ``theme.css`` link should be emitted.

    Returns
    -------
    dict[str, str]
        Mapping of each slot name in :data:`SLOTS` to its fragment, with
        ``""`` standing in for empty slots.
    """
    resolved: dict[str, str] = {}
    for name, slot in SLOTS:
        fragment = slot(layout, page, include_theme_stylesheet)
        resolved[name] = fragment if fragment is not None else ""
    return resolved


__all__ = [
    "SLOTS",
    "SlotFunction",
    "after_content_slot",
    "before_content_slot",
    "build_slots",
    "favicon_slot",
    "in_header_slot",
    "logo_slot",
    "theme_stylesheet_slot",
]
