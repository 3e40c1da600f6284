"""Emoji shortcode pass.

Syntax:
:smile:   → <span class="emoji">&#x1F604;</span>

Every entry of ``pasada.emoji.SHORTCODES`` is replaced in table order by
plain substring search. Unknown shortcodes are left as written.

"""

from __future__ import annotations

from pasada.config import get_convert_config
from pasada.emoji import SHORTCODES


def convert_emoji(text: str) -> str:
    if ":" not in text:
        return text
    css_class = get_convert_config().emoji_class
    for shortcode, entity in SHORTCODES.items():
        if shortcode in text:
            text = text.replace(shortcode, f'<span class="{css_class}">{entity}</span>')
    return text
