"""Task list pass.

Syntax:
- [ ] Unchecked task   → <input type="checkbox" disabled> Unchecked task
- [x] Checked task     → <input type="checkbox" checked disabled> Checked task

The item stays an inline line: its break marker is kept, and it is no
longer seen as a list item by the list passes.

"""

from __future__ import annotations

import re

from pasada.utils.text import BREAK

_TASK_RE = re.compile(r"^- \[(?P<mark>[x ])\](?P<item>.*?)(?P<br>(?:<br>)?)$", re.MULTILINE)


def _render_task(match: re.Match[str]) -> str:
    checked = " checked" if match.group("mark") == "x" else ""
    item = match.group("item").strip()
    trailer = BREAK if match.group("br") else ""
    return f'<input type="checkbox"{checked} disabled> {item}{trailer}'


def convert_task_lists(text: str) -> str:
    return _TASK_RE.sub(_render_task, text)
