"""Tests for the inline passes."""

from __future__ import annotations

from pasada import ConvertConfig, convert, convert_config_context
from pasada.transforms import (
    convert_emphasis,
    convert_highlight,
    convert_images,
    convert_inline_code,
    convert_links,
    convert_special_symbols,
    convert_strikethrough,
    convert_sub_superscript,
)


class TestEmphasis:
    def test_strong(self) -> None:
        assert convert_emphasis("**bold**") == "<strong>bold</strong>"
        assert convert_emphasis("__bold__") == "<strong>bold</strong>"

    def test_em(self) -> None:
        assert convert_emphasis("*em*") == "<em>em</em>"
        assert convert_emphasis("_em_") == "<em>em</em>"

    def test_adjacent_pairs_resolve_independently(self) -> None:
        assert convert_emphasis("*a* *b*") == "<em>a</em> <em>b</em>"

    def test_strong_inside_em(self) -> None:
        assert convert_emphasis("***x***") == "<em><strong>x</strong></em>"

    def test_spaces_inside_delimiters(self) -> None:
        assert convert_emphasis("* not em *") == "* not em *"

    def test_intraword_underscores(self) -> None:
        assert convert_emphasis("snake_case_name") == "snake_case_name"

    def test_rule_line_is_untouched(self) -> None:
        assert convert_emphasis("***") == "***"
        assert convert_emphasis("___") == "___"

    def test_does_not_cross_lines(self) -> None:
        assert convert_emphasis("*a<br>\nb*") == "*a<br>\nb*"


class TestStrikethroughAndHighlight:
    def test_strikethrough(self) -> None:
        assert convert_strikethrough("~~gone~~ stays") == "<del>gone</del> stays"

    def test_highlight(self) -> None:
        assert convert_highlight("a ===hot=== b") == "a <mark>hot</mark> b"


class TestSubSuperscript:
    def test_superscript(self) -> None:
        assert convert_sub_superscript("x^^2^^") == "x<sup>2</sup>"

    def test_subscript(self) -> None:
        assert convert_sub_superscript("H~2~O") == "H<sub>2</sub>O"

    def test_subscript_needs_leading_non_space(self) -> None:
        assert convert_sub_superscript("~ a~") == "~ a~"

    def test_strikethrough_runs_first_end_to_end(self) -> None:
        assert convert("~~a~~ H~2~O") == "<del>a</del> H<sub>2</sub>O"


class TestInlineCode:
    def test_span(self) -> None:
        assert convert_inline_code("use `x = 1` here") == "use <code>x = 1</code> here"

    def test_does_not_cross_lines(self) -> None:
        assert convert_inline_code("`a<br>\nb`") == "`a<br>\nb`"

    def test_empty_span_is_left_alone(self) -> None:
        assert convert_inline_code("``") == "``"


class TestLinksAndImages:
    def test_link(self) -> None:
        assert convert_links("[site](http://x.org)") == '<a href="http://x.org">site</a>'

    def test_link_pass_skips_images(self) -> None:
        assert convert_links("![alt](img.png)") == "![alt](img.png)"

    def test_image(self) -> None:
        assert convert_images("![alt](img.png)") == '<img src="img.png" alt="alt">'

    def test_image_end_to_end(self) -> None:
        assert convert("![alt](img.png)") == '<img src="img.png" alt="alt">'

    def test_link_end_to_end(self) -> None:
        assert convert("[site](http://x.org)") == '<a href="http://x.org">site</a>'

    def test_link_and_image_on_one_line(self) -> None:
        html = convert("[a](b) ![c](d)")
        assert html == '<a href="b">a</a> <img src="d" alt="c">'

    def test_attributes_verbatim_by_default(self) -> None:
        assert convert_links('[a<b](x"y)') == '<a href="x"y">a<b</a>'

    def test_attributes_escaped_when_configured(self) -> None:
        with convert_config_context(ConvertConfig(escape_attributes=True)):
            assert convert_links('[a<b](x"y)') == '<a href="x&quot;y">a<b</a>'
            assert convert_images('![a"](<u>)') == '<img src="&lt;u&gt;" alt="a&quot;">'

    def test_link_text_markup_survives_escaping(self) -> None:
        with convert_config_context(ConvertConfig(escape_attributes=True)):
            assert convert_links("[<em>x</em>](u)") == '<a href="u"><em>x</em></a>'
            assert convert("[**bold**](u)") == '<a href="u"><strong>bold</strong></a>'
            assert convert("[`x`](u)") == '<a href="u"><code>x</code></a>'


class TestSpecialSymbols:
    def test_all_symbols(self) -> None:
        html = convert_special_symbols("(C) (r) (TM) (p) +-")
        assert html == "&copy; &reg; &trade; &pound; &plusmn;"

    def test_other_parentheses_untouched(self) -> None:
        assert convert_special_symbols("(x) (cc)") == "(x) (cc)"
