"""Definition list pass.

Syntax:
Apple : A red fruit      → <dl>
Pear : A green fruit       <dt>Apple</dt><dd>A red fruit</dd>
                           <dt>Pear</dt><dd>A green fruit</dd>
                           </dl>

The colon needs whitespace on both sides, which keeps ``Note: ...`` and
``https://`` out. Lines that already start with a tag are skipped.
Adjacent definition lines share one ``<dl>``.

"""

from __future__ import annotations

import re

from pasada.utils.text import LINE_END

_DEFINITION_RE = re.compile(r"^(?P<term>[^\s<].*?)[ \t]+:[ \t]+(?P<definition>.*?)[ \t]*" + LINE_END, re.MULTILINE)
_DEFINITION_RUN_RE = re.compile(r"^<dt>.*(?:\n<dt>.*)*", re.MULTILINE)


def convert_definition_lists(text: str) -> str:
    text = _DEFINITION_RE.sub(r"<dt>\g<term></dt><dd>\g<definition></dd>", text)
    return _DEFINITION_RUN_RE.sub(lambda m: f"<dl>\n{m.group()}\n</dl>", text)
