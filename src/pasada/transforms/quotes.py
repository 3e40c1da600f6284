"""Blockquote pass.

Syntax:
> quote        → <blockquote>quote</blockquote>
>> nested      → <blockquote><blockquote>nested</blockquote></blockquote>
> > nested     → <blockquote><blockquote>nested</blockquote></blockquote>

Depth is the number of leading ``>`` markers. Each line is quoted on its
own; consecutive quote lines are not merged into one block.

"""

from __future__ import annotations

import re

from pasada.utils.text import LINE_END

_QUOTE_RE = re.compile(r"^(?P<markers>>(?:[ \t]*>)*)[ \t]*(?P<content>.*?)[ \t]*" + LINE_END, re.MULTILINE)


def _render_quote(match: re.Match[str]) -> str:
    depth = match.group("markers").count(">")
    return "<blockquote>" * depth + match.group("content") + "</blockquote>" * depth


def convert_blockquotes(text: str) -> str:
    return _QUOTE_RE.sub(_render_quote, text)
