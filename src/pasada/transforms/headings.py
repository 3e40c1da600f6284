"""ATX heading pass.

Syntax:
# Title             → <h1>Title</h1>
### Title ###       → <h3>Title</h3>
## Title {#anchor}  → <h2 id="anchor">Title</h2>

Heading text may not contain ``#``. A heading drops its break marker and keeps
its newline.

"""

from __future__ import annotations

import re

_HEADING_RE = re.compile(
    r"^(?P<marks>#{1,6})[ \t]*"
    r"(?P<text>[^#\n]*?)"
    r"(?:[ \t]+\{#(?P<id>[^}\n]+)\})?"
    r"[ \t]*#*[ \t]*(?:<br>)?(?P<eol>\n|\Z)",
    re.MULTILINE,
)


def _render_heading(match: re.Match[str]) -> str:
    level = len(match.group("marks"))
    text = match.group("text").strip()
    anchor = match.group("id")
    id_attr = f' id="{anchor}"' if anchor else ""
    return f"<h{level}{id_attr}>{text}</h{level}>{match.group('eol')}"


def convert_headings(text: str) -> str:
    return _HEADING_RE.sub(_render_heading, text)
