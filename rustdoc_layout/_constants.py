"""Common literal values used across rustdoc_layout.

These constants keep asset filenames and template names centralized so the
page skeleton, slot builders, and tests can import the same values without
drifting. Intended for internal use within the rustdoc_layout package.

Examples
--------
>>> from rustdoc_layout import _constants
>>> _constants.THEME_CSS
'theme.css'
>>> "../" + _constants.MAIN_JS
'../main.js'
"""

NORMALIZE_CSS = "normalize.css"
RUSTDOC_CSS = "rustdoc.css"
MAIN_CSS = "main.css"
THEME_CSS = "theme.css"
MAIN_JS = "main.js"
SEARCH_INDEX_JS = "search-index.js"

PAGE_TEMPLATE = "doc_page.jinja"
REDIRECT_TEMPLATE = "redirect.jinja"

DEFAULT_DESCRIPTION = "API documentation for the Rust `{krate}` crate."
DEFAULT_KEYWORDS = "rust, rustlang, rust-lang"
