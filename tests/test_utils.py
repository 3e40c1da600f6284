"""Tests for pasada.utils."""

from __future__ import annotations

import re

from pasada.utils import BREAK, LINE_END, escape_html, get_logger, remove_breaks, strip_break


class TestEscapeHtml:
    def test_special_characters(self) -> None:
        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#039;&amp;&#039;&lt;/a&gt;"
        )

    def test_empty(self) -> None:
        assert escape_html("") == ""

    def test_ampersand_is_escaped_once(self) -> None:
        assert escape_html("&lt;") == "&amp;lt;"


class TestBreakHelpers:
    def test_break_tag(self) -> None:
        assert BREAK == "<br>"

    def test_strip_break(self) -> None:
        assert strip_break("item<br>") == "item"
        assert strip_break("item") == "item"
        assert strip_break("a<br><br>") == "a<br>"

    def test_remove_breaks(self) -> None:
        assert remove_breaks("a<br>\nb<br>\nc") == "a\nb\nc"
        assert remove_breaks("a<br>b") == "a<br>b"

    def test_line_end_accepts_optional_break(self) -> None:
        pattern = re.compile(r"^x" + LINE_END, re.MULTILINE)
        assert pattern.findall("x<br>\nx\nx<br><br>\n") == ["x<br>", "x"]


class TestGetLogger:
    def test_prefix_is_added(self) -> None:
        assert get_logger("mymodule").name == "pasada.mymodule"

    def test_package_names_are_kept(self) -> None:
        assert get_logger("pasada.pipeline").name == "pasada.pipeline"
        assert get_logger("pasada").name == "pasada"
