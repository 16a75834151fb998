"""HTML entity escaping for interpolated values."""

from __future__ import annotations

# str.translate maps every character in a single pass, so the ``&`` of an
# entity it has just written is never escaped a second time.
_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(text: str) -> str:
    """Replace ``& < > " '`` with their HTML entities."""
    return text.translate(_HTML_ESCAPES)
