"""Text-to-text passes of the conversion pipeline.

Each pass is a plain ``str -> str`` function. The fixed order in which they
run lives in :mod:`pasada.pipeline`.

Thread Safety:
All passes are stateless (the table pass keeps its scanner state in locals).
Multiple threads can run them concurrently.

"""

from pasada.transforms.breaks import convert_line_breaks
from pasada.transforms.code import convert_code_blocks, convert_inline_code
from pasada.transforms.definitions import convert_definition_lists
from pasada.transforms.emoji import convert_emoji
from pasada.transforms.emphasis import (
    convert_emphasis,
    convert_highlight,
    convert_strikethrough,
    convert_sub_superscript,
)
from pasada.transforms.footnotes import convert_footnotes
from pasada.transforms.headings import convert_headings
from pasada.transforms.links import convert_images, convert_links
from pasada.transforms.lists import convert_lists, convert_nested_lists
from pasada.transforms.quotes import convert_blockquotes
from pasada.transforms.rules import convert_horizontal_rules
from pasada.transforms.symbols import convert_special_symbols
from pasada.transforms.table import TableState, convert_tables
from pasada.transforms.tasks import convert_task_lists

__all__ = [
    "TableState",
    "convert_blockquotes",
    "convert_code_blocks",
    "convert_definition_lists",
    "convert_emoji",
    "convert_emphasis",
    "convert_footnotes",
    "convert_headings",
    "convert_highlight",
    "convert_horizontal_rules",
    "convert_images",
    "convert_inline_code",
    "convert_line_breaks",
    "convert_links",
    "convert_lists",
    "convert_nested_lists",
    "convert_special_symbols",
    "convert_strikethrough",
    "convert_sub_superscript",
    "convert_tables",
    "convert_task_lists",
]
