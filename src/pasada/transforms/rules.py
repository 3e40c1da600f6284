"""Horizontal rule pass.

Syntax:
---      → <hr>
* * *    → <hr>
______   → <hr>

One of ``-``, ``_`` or ``*`` repeated at least three times, optionally
separated by spaces, alone on its line.

"""

from __future__ import annotations

import re

from pasada.utils.text import LINE_END

_RULE_RE = re.compile(r"^[ \t]*([-_*])(?:[ \t]*\1){2,}[ \t]*" + LINE_END, re.MULTILINE)


def convert_horizontal_rules(text: str) -> str:
    return _RULE_RE.sub("<hr>", text)
