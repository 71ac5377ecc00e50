"""Immutable values describing site-wide layout and per-document metadata."""

from __future__ import annotations

import dataclasses as dc
import posixpath


@dc.dataclass(frozen=True, slots=True)
class ExternalHtml:
    """Trusted HTML fragments injected at fixed points of every page.

    Attributes
    ----------
    in_header : str
        Markup appended to ``<head>``.
    before_content : str
        Markup emitted at the top of ``<body>``, ahead of the sidebar.
    after_content : str
        Markup emitted after the help panel, ahead of the trailing scripts.

    Notes
    -----
    Each fragment is embedded verbatim; an empty string means the fragment is
    absent and contributes nothing to the page.
    """

    in_header: str = ""
    before_content: str = ""
    after_content: str = ""

    @classmethod
    def empty(cls) -> ExternalHtml:
        """Return an instance with every fragment absent."""
        return cls()


@dc.dataclass(frozen=True, slots=True)
class Layout:
    """Site-wide settings shared read-only by every page render.

    Attributes
    ----------
    krate : str
        Name of the documented crate, used as display text and path segment.
    logo : str
        Logo image URL, or ``""`` when the sidebar should carry no logo.
    favicon : str
        Favicon URL, or ``""`` when no icon link should be emitted.
    external_html : ExternalHtml
        Configuration-supplied fragments injected around the page body.
    """

    krate: str
    logo: str = ""
    favicon: str = ""
    external_html: ExternalHtml = dc.field(default_factory=ExternalHtml)


@dc.dataclass(frozen=True, slots=True)
class Page:
    """Metadata for a single rendered document.

    Attributes
    ----------
    title : str
        Text placed inside ``<title>``.
    css_class : str
        Class token appended to ``rustdoc`` on ``<body>``.
    root_path : str
        Relative prefix (for example ``"../../"``) leading from the page back
        to the documentation root.
    description : str
        Content of the ``description`` meta tag.
    keywords : str
        Content of the ``keywords`` meta tag.
    """

    title: str
    css_class: str
    root_path: str
    description: str
    keywords: str

    @classmethod
    def at_depth(
        cls,
        depth: int,
        *,
        title: str,
        css_class: str = "",
        description: str = "",
        keywords: str = "",
    ) -> Page:
        """Build a page located ``depth`` directories below the docs root."""
        return cls(
            title=title,
            css_class=css_class,
            root_path=root_path_for(depth),
            description=description,
            keywords=keywords,
        )


def root_path_for(depth: int) -> str:
    """Return the ``../`` prefix for a page ``depth`` directories deep.

    Raises
    ------
    ValueError
        If ``depth`` is negative.

    Examples
    --------
    >>> root_path_for(0)
    ''
    >>> root_path_for(2)
    '../../'
    """
    if depth < 0:
        msg = f"Page depth must be non-negative, got {depth}."
        raise ValueError(msg)
    return "../" * depth


def root_path_for_output(relative_path: str) -> str:
    """Return the root prefix for an output file given relative to the docs root.

    Examples
    --------
    >>> root_path_for_output("index.html")
    ''
    >>> root_path_for_output("mycrate/struct.Foo.html")
    '../'
    """
    normalized = posixpath.normpath(relative_path.replace("\\", "/").lstrip("/"))
    if normalized == ".." or normalized.startswith("../"):
        msg = f"Output path '{relative_path}' escapes the documentation root."
        raise ValueError(msg)
    directory = posixpath.dirname(normalized)
    if not directory:
        return ""
    return root_path_for(len(directory.split("/")))


__all__ = [
    "ExternalHtml",
    "Layout",
    "Page",
    "root_path_for",
    "root_path_for_output",
]
