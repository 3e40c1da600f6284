"""Pipe table pass.

Unlike the other passes this one is a line scanner with memory: it walks the
document one line at a time in one of three states.

    OUTSIDE --pipe line--> HEAD --separator--> BODY
       ^                     |                   |
       +----non-pipe line----+-------------------+

Syntax:
a|b          → <table>
---|---        <thead>
1|2            <tr><td>a</td><td>b</td></tr>
               </thead>
               <tbody>
               <tr><td>1</td><td>2</td></tr>
               </tbody>
               </table>

Any line containing ``|`` is a row; a row containing ``---`` is the
separator. One leading and one trailing pipe are dropped and cells are
trimmed. A table still open at end of input is closed there.

"""

from __future__ import annotations

from enum import Enum, auto

from pasada.utils.text import strip_break


class TableState(Enum):
    """Where the scanner is relative to a table."""

    OUTSIDE = auto()
    HEAD = auto()
    BODY = auto()


_SEPARATOR = "---"

_CLOSE_SECTION = {
    TableState.HEAD: "</thead>",
    TableState.BODY: "</tbody>",
}


def _render_row(line: str) -> str:
    row = strip_break(line).strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    cells = "</td><td>".join(cell.strip() for cell in row.split("|"))
    return f"<tr><td>{cells}</td></tr>"


def convert_tables(text: str) -> str:
    out: list[str] = []
    state = TableState.OUTSIDE

    for line in text.split("\n"):
        if "|" not in line:
            if state is not TableState.OUTSIDE:
                out.append(_CLOSE_SECTION[state])
                out.append("</table>")
                state = TableState.OUTSIDE
            out.append(line)
            continue

        is_separator = _SEPARATOR in line
        if state is TableState.OUTSIDE:
            out.append("<table>")
            if is_separator:
                out.append("<tbody>")
                state = TableState.BODY
                continue
            out.append("<thead>")
            state = TableState.HEAD

        if is_separator:
            if state is TableState.HEAD:
                out.append("</thead>")
                out.append("<tbody>")
                state = TableState.BODY
            continue

        out.append(_render_row(line))

    if state is not TableState.OUTSIDE:
        out.append(_CLOSE_SECTION[state])
        out.append("</table>")

    return "\n".join(out)
