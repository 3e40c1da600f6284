"""Text helpers shared by the transforms.

Example:
    >>> from pasada.utils.text import escape_html, strip_break
    >>> escape_html("<b>")
    '&lt;b&gt;'
    >>> strip_break("item<br>")
    'item'
"""

from __future__ import annotations

import re

# Inserted after every line by the line-break pass.
BREAK = "<br>"

# Regex fragment for "optional break marker, then end of line".
# Use with re.MULTILINE.
LINE_END = r"(?:<br>)?$"

_BREAK_LINE_RE = re.compile(r"<br>\n")

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}

_HTML_ESCAPE_RE = re.compile(r"""[&<>"']""")


def escape_html(text: str) -> str:
    """Escape HTML special characters, quotes included.

    Converts ``& < > " '`` to entities. The apostrophe becomes ``&#039;``
    so escaped code bodies match what ``htmlspecialchars`` produces.

    Examples:
        >>> escape_html("<script>alert('x')</script>")
        '&lt;script&gt;alert(&#039;x&#039;)&lt;/script&gt;'
    """
    if not text:
        return ""
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group()], text)


def strip_break(line: str) -> str:
    """Remove one trailing break marker from a line, if present."""
    if line.endswith(BREAK):
        return line[: -len(BREAK)]
    return line


def remove_breaks(text: str) -> str:
    """Undo the line-break pass for a multi-line region."""
    return _BREAK_LINE_RE.sub("\n", text)
