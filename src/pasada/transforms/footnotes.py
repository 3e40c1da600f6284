"""Footnote passes.

Syntax:
Text with a note[^1].    → Text with a note<sup id="fnref:1"><a href="#fn:1" class="footnote-ref">[1]</a></sup>.
[^1]: The note.          → <div id="fn:1" class="footnote"><sup>1</sup> The note.</div>

Definitions are matched first (a ``[^n]:`` at the start of a line), so the
reference pass only sees ``[^n]`` markers in running text. Labels are
numeric; the footnote stays where it was written.

"""

from __future__ import annotations

import re

from pasada.utils.text import LINE_END

_DEFINITION_RE = re.compile(
    r"^\[\^(?P<index>\d+)\]:[ \t]*(?P<content>.*?)[ \t]*" + LINE_END,
    re.MULTILINE,
)
_REFERENCE_RE = re.compile(r"\[\^(?P<index>\d+)\](?!:)")


def _render_definition(match: re.Match[str]) -> str:
    index = match.group("index")
    return f'<div id="fn:{index}" class="footnote"><sup>{index}</sup> {match.group("content")}</div>'


def _render_reference(match: re.Match[str]) -> str:
    index = match.group("index")
    return f'<sup id="fnref:{index}"><a href="#fn:{index}" class="footnote-ref">[{index}]</a></sup>'


def convert_footnotes(text: str) -> str:
    text = _DEFINITION_RE.sub(_render_definition, text)
    return _REFERENCE_RE.sub(_render_reference, text)
