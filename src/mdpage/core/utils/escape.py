"""Escaping primitives for HTML text, attributes, script strings and URL fragments"""

from urllib.parse import quote


# Characters permitted unencoded in a URL fragment besides alphanumerics.
FRAGMENT_SAFE = "!$&'()*+,-./:;=?@_~"


def escape_html(text: str) -> str:
    """Escape &, <, > and double quotes for HTML text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def escape_attribute(text: str) -> str:
    """Escape for a quoted HTML attribute value (single quotes included)."""
    return escape_html(text).replace("'", "&#39;")


def escape_js_string(text: str) -> str:
    """Escape for a double-quoted JavaScript string literal inside <script>.

    Carriage returns are dropped. '<' becomes \\u003c so the value cannot
    close the surrounding script element.
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "")
        .replace("<", "\\u003c")
    )


def encode_fragment(fragment: str) -> str:
    """Percent-encode a fragment identifier (UTF-8), leaving fragment-safe characters alone."""
    return quote(fragment, safe=FRAGMENT_SAFE)
