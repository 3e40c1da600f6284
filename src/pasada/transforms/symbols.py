"""Special symbol pass.

Syntax:
(c)  → &copy;
(r)  → &reg;
(tm) → &trade;
(p)  → &pound;
+-   → &plusmn;

Letters match case-insensitively.

"""

from __future__ import annotations

import re

_SYMBOLS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\(c\)", re.IGNORECASE), "&copy;"),
    (re.compile(r"\(r\)", re.IGNORECASE), "&reg;"),
    (re.compile(r"\(tm\)", re.IGNORECASE), "&trade;"),
    (re.compile(r"\(p\)", re.IGNORECASE), "&pound;"),
    (re.compile(r"\+-"), "&plusmn;"),
)


def convert_special_symbols(text: str) -> str:
    for pattern, entity in _SYMBOLS:
        text = pattern.sub(entity, text)
    return text
