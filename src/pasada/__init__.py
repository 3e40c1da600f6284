"""
Pasada — Markdown-like text to HTML, one pass at a time

Converts a lightweight Markdown dialect (headings, emphasis, code, tables,
lists, footnotes, blockquotes, emoji shortcodes and more) into an HTML
fragment. The whole conversion is a fixed pipeline of text-to-text passes;
there is no syntax tree.

Quick Start:
    >>> from pasada import convert
    >>> convert("# Hello\\nSome **bold** text")
    '<h1>Hello</h1>\\nSome <strong>bold</strong> text'

    >>> # Tune what passes emit, per thread
    >>> from pasada import ConvertConfig, convert_config_context
    >>> with convert_config_context(ConvertConfig(escape_attributes=True)):
    ...     html = convert('[a](x" onmouseover="y)')

Not a goal: CommonMark conformance, sanitizing untrusted input, plugins.

Installation:
    pip install pasada              # zero runtime dependencies
    pip install pasada[test]        # + pytest and hypothesis
"""

from pasada.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from pasada.emoji import SHORTCODES
from pasada.errors import ConfigError, PasadaError, TransformError
from pasada.pipeline import TRANSFORMS, Pipeline, Transform, convert
from pasada.profiling import ConvertAccumulator, get_convert_accumulator, profiled_convert

__version__ = "0.1.0"

__all__ = [
    "SHORTCODES",
    "TRANSFORMS",
    "ConfigError",
    "ConvertAccumulator",
    "ConvertConfig",
    "PasadaError",
    "Pipeline",
    "Transform",
    "TransformError",
    "__version__",
    "convert",
    "convert_config_context",
    "get_convert_accumulator",
    "get_convert_config",
    "profiled_convert",
    "reset_convert_config",
    "set_convert_config",
]
