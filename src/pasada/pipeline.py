"""The conversion pipeline.

A document is threaded through a fixed sequence of passes; the output of
one pass is the input of the next. Passes share nothing but the text, and
later passes rely on the shape earlier passes leave behind, so the order
below is part of the behavior.

Example:
    >>> from pasada.pipeline import convert
    >>> convert("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>'

Thread Safety:
    Pipeline instances are immutable and the passes are stateless, so one
    instance can convert documents from many threads at once.

"""

from __future__ import annotations

from collections.abc import Iterable
from time import perf_counter
from typing import Protocol

from pasada.errors import TransformError
from pasada.profiling import get_convert_accumulator
from pasada.transforms import (
    convert_blockquotes,
    convert_code_blocks,
    convert_definition_lists,
    convert_emoji,
    convert_emphasis,
    convert_footnotes,
    convert_headings,
    convert_highlight,
    convert_horizontal_rules,
    convert_images,
    convert_inline_code,
    convert_line_breaks,
    convert_links,
    convert_lists,
    convert_nested_lists,
    convert_special_symbols,
    convert_strikethrough,
    convert_sub_superscript,
    convert_tables,
    convert_task_lists,
)
from pasada.utils.logger import get_logger

logger = get_logger(__name__)


class Transform(Protocol):
    """A single pass: text in, text out."""

    def __call__(self, text: str) -> str: ...


TRANSFORMS: tuple[tuple[str, Transform], ...] = (
    ("line_breaks", convert_line_breaks),
    ("headings", convert_headings),
    ("emphasis", convert_emphasis),
    ("strikethrough", convert_strikethrough),
    ("code_blocks", convert_code_blocks),
    ("inline_code", convert_inline_code),
    ("task_lists", convert_task_lists),
    ("tables", convert_tables),
    ("footnotes", convert_footnotes),
    ("links", convert_links),
    ("images", convert_images),
    ("horizontal_rules", convert_horizontal_rules),
    ("blockquotes", convert_blockquotes),
    ("lists", convert_lists),
    ("nested_lists", convert_nested_lists),
    ("definition_lists", convert_definition_lists),
    ("highlight", convert_highlight),
    ("sub_superscript", convert_sub_superscript),
    ("special_symbols", convert_special_symbols),
    ("emoji", convert_emoji),
)


class Pipeline:
    """Ordered sequence of passes applied to a whole document.

    ``Pipeline()`` is the standard pipeline. Passing ``transforms`` builds a
    pipeline over another sequence of ``(name, pass)`` pairs, which is how
    the tests show that reordering passes changes the output.

    """

    __slots__ = ("_transforms",)

    def __init__(self, transforms: Iterable[tuple[str, Transform]] | None = None) -> None:
        self._transforms = TRANSFORMS if transforms is None else tuple(transforms)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._transforms)

    def __len__(self) -> int:
        return len(self._transforms)

    def __call__(self, text: str) -> str:
        return self.run(text)

    def run(self, text: str) -> str:
        """Thread text through every pass in order.

        Raises:
            TransformError: If a pass raises. The built-in passes accept any
                string, so this only happens with custom passes.

        """
        acc = get_convert_accumulator()
        if acc is not None:
            acc.record_convert(len(text))

        for name, transform in self._transforms:
            start = perf_counter() if acc is not None else 0.0
            try:
                text = transform(text)
            except Exception as e:
                logger.debug("pass %s failed", name, exc_info=True)
                raise TransformError(name, str(e)) from e
            if acc is not None:
                acc.record_pass(name, (perf_counter() - start) * 1000)

        return text


_DEFAULT_PIPELINE = Pipeline()


def convert(document: str | bytes) -> str:
    """Convert a marked-up document to an HTML fragment.

    Args:
        document: Source text. Bytes are decoded as UTF-8, replacing
            undecodable sequences.

    Returns:
        HTML fragment (no ``<html>``/``<body>`` wrapper).

    Raises:
        TypeError: If document is neither str nor bytes.

    """
    if isinstance(document, bytes):
        document = document.decode("utf-8", errors="replace")
    elif not isinstance(document, str):
        raise TypeError(f"convert() expects str or bytes, got {type(document).__name__}")
    return _DEFAULT_PIPELINE(document)
