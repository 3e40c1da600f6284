"""Utility modules for Pasada.

Provides:
- text: escape_html and break-marker helpers
- logger: get_logger for logging
"""

from pasada.utils.logger import get_logger
from pasada.utils.text import BREAK, LINE_END, escape_html, remove_breaks, strip_break

__all__ = [
    "BREAK",
    "LINE_END",
    "escape_html",
    "get_logger",
    "remove_breaks",
    "strip_break",
]
