"""Link and image passes.

Syntax:
[text](url)     → <a href="url">text</a>
![alt](url)     → <img src="url" alt="alt">

Links run first and never match a bracket preceded by ``!``, which leaves
images for the image pass. Neither pass nests. The href, src and alt
attribute values are inserted verbatim unless
``ConvertConfig.escape_attributes`` is set. Link text is element content
and is never escaped, so markup from earlier passes survives inside it.

"""

from __future__ import annotations

import re

from pasada.config import get_convert_config
from pasada.utils.text import escape_html

_LINK_RE = re.compile(r"(?<!!)\[(?P<text>[^\]\n]*)\]\((?P<url>[^)\n]*)\)")
_IMAGE_RE = re.compile(r"!\[(?P<alt>[^\]\n]*)\]\((?P<url>[^)\n]*)\)")


def _attr(value: str) -> str:
    if get_convert_config().escape_attributes:
        return escape_html(value)
    return value


def _render_link(match: re.Match[str]) -> str:
    return f'<a href="{_attr(match.group("url"))}">{match.group("text")}</a>'


def _render_image(match: re.Match[str]) -> str:
    return f'<img src="{_attr(match.group("url"))}" alt="{_attr(match.group("alt"))}">'


def convert_links(text: str) -> str:
    return _LINK_RE.sub(_render_link, text)


def convert_images(text: str) -> str:
    return _IMAGE_RE.sub(_render_image, text)
