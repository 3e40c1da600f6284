"""Tests for the pipe table scanner."""

from __future__ import annotations

from pasada import convert
from pasada.transforms import TableState, convert_tables


class TestTableScanner:
    """The table pass walks lines through OUTSIDE, HEAD and BODY."""

    def test_header_separator_and_row(self) -> None:
        html = convert("a|b\n---|---\n1|2\nafter\n")
        assert html == (
            "<table>\n"
            "<thead>\n"
            "<tr><td>a</td><td>b</td></tr>\n"
            "</thead>\n"
            "<tbody>\n"
            "<tr><td>1</td><td>2</td></tr>\n"
            "</tbody>\n"
            "</table>\n"
            "after<br>\n"
        )

    def test_outer_pipes_and_padding(self) -> None:
        html = convert_tables("| a | b |\n|---|---|\n| 1 | 2 |")
        assert html == (
            "<table>\n<thead>\n<tr><td>a</td><td>b</td></tr>\n</thead>\n"
            "<tbody>\n<tr><td>1</td><td>2</td></tr>\n</tbody>\n</table>"
        )

    def test_table_open_at_end_of_input_is_closed(self) -> None:
        html = convert_tables("a|b\n---|---\n1|2")
        assert html.endswith("</tbody>\n</table>")

    def test_without_separator_everything_is_head(self) -> None:
        html = convert_tables("a|b\nc")
        assert html == "<table>\n<thead>\n<tr><td>a</td><td>b</td></tr>\n</thead>\n</table>\nc"

    def test_separator_first_opens_body(self) -> None:
        html = convert_tables("---|---\n1|2")
        assert html == "<table>\n<tbody>\n<tr><td>1</td><td>2</td></tr>\n</tbody>\n</table>"

    def test_second_separator_is_dropped(self) -> None:
        html = convert_tables("a|b\n---|---\n1|2\n---|---\n3|4")
        assert html.count("<tbody>") == 1
        assert html.count("<tr>") == 3
        assert "---" not in html

    def test_two_tables(self) -> None:
        html = convert_tables("a|b\n\nc|d\n")
        assert html.count("<table>") == 2
        assert html.count("</table>") == 2

    def test_text_without_pipes_is_unchanged(self) -> None:
        assert convert_tables("x\ny\n") == "x\ny\n"

    def test_states(self) -> None:
        assert {state.name for state in TableState} == {"OUTSIDE", "HEAD", "BODY"}
