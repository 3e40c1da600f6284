"""Tests for the public convert() API."""

from __future__ import annotations

import pytest

import pasada
from pasada import convert


class TestConvert:
    """End-to-end behavior of convert()."""

    def test_empty_document(self) -> None:
        assert convert("") == ""

    def test_plain_text_only_gets_breaks(self) -> None:
        assert convert("hello\nworld") == "hello<br>\nworld"

    def test_heading(self) -> None:
        assert convert("# Title\n") == "<h1>Title</h1>\n"

    def test_heading_with_anchor(self) -> None:
        assert convert("###### Sub {#anchor}\n") == '<h6 id="anchor">Sub</h6>\n'

    def test_heading_with_inline_markup(self) -> None:
        assert convert("# Hello **World**") == "<h1>Hello <strong>World</strong></h1>"

    def test_mixed_document(self) -> None:
        html = convert("# Hello\nSome **bold** text")
        assert html == "<h1>Hello</h1>\nSome <strong>bold</strong> text"

    def test_output_is_a_fragment(self) -> None:
        html = convert("# Title\n\nBody")
        assert "<html" not in html
        assert "<body" not in html

    def test_bytes_are_decoded_as_utf8(self) -> None:
        assert convert("# Café\n".encode()) == "<h1>Café</h1>\n"

    def test_undecodable_bytes_do_not_raise(self) -> None:
        assert "\ufffd" in convert(b"bad \xff byte")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="str or bytes"):
            convert(123)  # type: ignore[arg-type]

    def test_unmatched_markup_passes_through(self) -> None:
        assert convert("a **b and [c](d") == "a **b and [c](d"


class TestPackageSurface:
    """Names exported from the package root."""

    def test_version(self) -> None:
        assert isinstance(pasada.__version__, str)

    def test_all_names_resolve(self) -> None:
        for name in pasada.__all__:
            assert hasattr(pasada, name), name
