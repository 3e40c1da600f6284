"""Delimiter-pair passes.

Each pass swaps a pair of delimiters around a run of text for an inline tag:

- strong: ``**text**`` / ``__text__`` → ``<strong>``
- emphasis: ``*text*`` / ``_text_`` → ``<em>``
- strikethrough: ``~~text~~`` → ``<del>``
- highlight: ``===text===`` → ``<mark>``
- superscript: ``^^text^^`` → ``<sup>``
- subscript: ``~text~`` → ``<sub>``

Matching is lazy and flat: the leftmost opening delimiter pairs with the
next closing one on the same line. There is no nesting stack, so crossed
markers such as ``*a _b* c_`` pair up in reading order rather than by
structure.

"""

from __future__ import annotations

import re
from collections.abc import Callable

# Content must start and end with a non-space character that is not itself
# a delimiter, so rule lines such as ``***`` and ``___`` are left alone.
# Underscores never open or close inside a word (snake_case stays intact).
_STRONG_RE = re.compile(
    r"\*\*(?=[^\s*_])(.+?)(?<=[^\s*_])\*\*"
    r"|(?<!\w)__(?=[^\s*_])(.+?)(?<=[^\s*_])__(?!\w)"
)
_EMPHASIS_RE = re.compile(
    r"\*(?=[^\s*_])(.+?)(?<=[^\s*_])\*"
    r"|(?<!\w)_(?=[^\s*_])(.+?)(?<=[^\s*_])_(?!\w)"
)
_STRIKETHROUGH_RE = re.compile(r"~~(.*?)~~")
_HIGHLIGHT_RE = re.compile(r"===(.*?)===")
_SUPERSCRIPT_RE = re.compile(r"\^\^(\S.*?)\^\^")
_SUBSCRIPT_RE = re.compile(r"~(\S.*?)~")


def _wrap(tag: str) -> Callable[[re.Match[str]], str]:
    def render(match: re.Match[str]) -> str:
        inner = match.group(1) if match.group(1) is not None else match.group(2)
        return f"<{tag}>{inner}</{tag}>"

    return render


def convert_emphasis(text: str) -> str:
    """Strong first, so ``**`` is never read as two ``*`` delimiters."""
    text = _STRONG_RE.sub(_wrap("strong"), text)
    return _EMPHASIS_RE.sub(_wrap("em"), text)


def convert_strikethrough(text: str) -> str:
    return _STRIKETHROUGH_RE.sub(r"<del>\1</del>", text)


def convert_highlight(text: str) -> str:
    return _HIGHLIGHT_RE.sub(r"<mark>\1</mark>", text)


def convert_sub_superscript(text: str) -> str:
    text = _SUPERSCRIPT_RE.sub(r"<sup>\1</sup>", text)
    return _SUBSCRIPT_RE.sub(r"<sub>\1</sub>", text)
