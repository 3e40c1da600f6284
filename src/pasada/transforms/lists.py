"""List passes.

Two passes share the work:

1. ``convert_lists`` (coarse) finds runs of adjacent list lines. Ordered runs
   (``1.``) become ``<ol>``; unordered runs (``-``, ``*``, ``+``) become
   ``<ul>`` when every item in the run sits at the same, zero, indent. Runs
   with indented items are left untouched for the second pass.

2. ``convert_nested_lists`` scans line by line and nests unordered items by
   the change in indentation from the previous item:

   - deeper: open a ``<ul>`` inside the current item
   - same: close the item, open the next one
   - shallower: close ``(previous - current) // list_indent_width`` lists
     (at least one), then open the next item

   A tab in the indentation counts as ``list_indent_width`` spaces. Open
   lists are counted, so the run is always closed completely when it ends
   or at end of input.

Syntax:
- a          → <ul>
  - b          <li>a
- c            <ul>
               <li>b</li>
               </ul>
               </li>
               <li>c</li>
               </ul>

"""

from __future__ import annotations

import re

from pasada.config import get_convert_config
from pasada.utils.text import strip_break

_UNORDERED_ITEM = r"[ \t]*[*+-][ \t]+.*"
_ORDERED_ITEM = r"[ \t]*\d+\.[ \t]+.*"

_UNORDERED_RUN_RE = re.compile(rf"^{_UNORDERED_ITEM}(?:\n{_UNORDERED_ITEM})*", re.MULTILINE)
_ORDERED_RUN_RE = re.compile(rf"^{_ORDERED_ITEM}(?:\n{_ORDERED_ITEM})*", re.MULTILINE)

_UNORDERED_LINE_RE = re.compile(r"^[*+-][ \t]+(?P<item>.*)$")
_ORDERED_LINE_RE = re.compile(r"^[ \t]*\d+\.[ \t]+(?P<item>.*)$")
_NESTED_LINE_RE = re.compile(r"^(?P<indent>[ \t]*)[*+-][ \t]+(?P<item>.*)$")


def _item(raw: str) -> str:
    return strip_break(raw).strip()


def _close(depth: int) -> str:
    return "\n".join(["</li>\n</ul>"] * depth)


def _wrap_run(tag: str, pattern: re.Pattern[str], run: str) -> str:
    items = []
    for line in run.split("\n"):
        match = pattern.match(line)
        if match is None:
            return run
        items.append(f"<li>{_item(match.group('item'))}</li>")
    return "\n".join([f"<{tag}>", *items, f"</{tag}>"])


def convert_lists(text: str) -> str:
    text = _UNORDERED_RUN_RE.sub(lambda m: _wrap_run("ul", _UNORDERED_LINE_RE, m.group()), text)
    return _ORDERED_RUN_RE.sub(lambda m: _wrap_run("ol", _ORDERED_LINE_RE, m.group()), text)


def convert_nested_lists(text: str) -> str:
    width = get_convert_config().list_indent_width
    out: list[str] = []
    depth = 0
    previous = 0

    for line in text.split("\n"):
        match = _NESTED_LINE_RE.match(line)
        if match is None:
            if depth:
                out.append(_close(depth))
                depth = 0
            out.append(line)
            continue

        indent = len(match.group("indent").replace("\t", " " * width))
        item = _item(match.group("item"))
        if depth == 0:
            out.append(f"<ul>\n<li>{item}")
            depth = 1
        elif indent > previous:
            out.append(f"<ul>\n<li>{item}")
            depth += 1
        elif indent < previous:
            closing = min(max(1, (previous - indent) // width), depth - 1)
            prefix = _close(closing) + "\n" if closing else ""
            out.append(f"{prefix}</li>\n<li>{item}")
            depth -= closing
        else:
            out.append(f"</li>\n<li>{item}")
        previous = indent

    if depth:
        out.append(_close(depth))

    return "\n".join(out)
