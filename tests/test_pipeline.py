"""Tests for the pipeline driver and pass ordering."""

from __future__ import annotations

import pytest

from pasada import TRANSFORMS, Pipeline, TransformError, convert

EXPECTED_ORDER = (
    "line_breaks",
    "headings",
    "emphasis",
    "strikethrough",
    "code_blocks",
    "inline_code",
    "task_lists",
    "tables",
    "footnotes",
    "links",
    "images",
    "horizontal_rules",
    "blockquotes",
    "lists",
    "nested_lists",
    "definition_lists",
    "highlight",
    "sub_superscript",
    "special_symbols",
    "emoji",
)


def _swapped(first: str, second: str) -> Pipeline:
    transforms = list(TRANSFORMS)
    names = [name for name, _ in transforms]
    i, j = names.index(first), names.index(second)
    transforms[i], transforms[j] = transforms[j], transforms[i]
    return Pipeline(transforms)


class TestPipelineOrder:
    """The default pipeline runs every pass in the documented order."""

    def test_transform_order(self) -> None:
        assert tuple(name for name, _ in TRANSFORMS) == EXPECTED_ORDER

    def test_default_pipeline_uses_all_transforms(self) -> None:
        pipeline = Pipeline()
        assert pipeline.names == EXPECTED_ORDER
        assert len(pipeline) == 20

    def test_default_pipeline_matches_convert(self) -> None:
        source = "# T\n- a\n- b\n:smile:"
        assert Pipeline()(source) == convert(source)

    def test_reordering_changes_output(self) -> None:
        """Emphasis runs before fenced code, so markers inside code are already tags."""
        source = "```\n*x*\n```\n"

        default = Pipeline()(source)
        reordered = _swapped("emphasis", "code_blocks")(source)

        assert "&lt;em&gt;x&lt;/em&gt;" in default
        assert "<em>x</em>" in reordered
        assert default != reordered

    def test_images_survive_because_links_skip_bang(self) -> None:
        assert convert("![alt](img.png)") == '<img src="img.png" alt="alt">'


class TestCustomPipeline:
    """Pipelines built from explicit pass sequences."""

    def test_empty_pipeline_is_identity(self) -> None:
        assert Pipeline([])("a\nb") == "a\nb"

    def test_passes_are_chained(self) -> None:
        pipeline = Pipeline([("upper", str.upper), ("strip", str.strip)])
        assert pipeline.run("  abc ") == "ABC"

    def test_failing_pass_raises_transform_error(self) -> None:
        def boom(text: str) -> str:
            raise ValueError("bad input")

        pipeline = Pipeline([("identity", lambda t: t), ("boom", boom)])

        with pytest.raises(TransformError) as exc_info:
            pipeline("text")

        assert exc_info.value.transform_name == "boom"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "boom" in str(exc_info.value)
