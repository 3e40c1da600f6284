"""Line-break pass.

Collapses every newline convention to ``\\n`` and puts a break marker in
front of it, so later passes can reason line by line while the rendered
HTML keeps the author's line breaks.

Syntax:
"a\\r\\nb" → "a<br>\\nb"

"""

from __future__ import annotations

import re

from pasada.utils.text import BREAK

# \r\n first so it is not seen as two terminators.
_NEWLINE_RE = re.compile("\r\n|[\n\v\f\r\x85\u2028\u2029]")


def convert_line_breaks(text: str) -> str:
    return _NEWLINE_RE.sub(BREAK + "\n", text)
