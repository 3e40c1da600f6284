"""Minimal logging utilities for Pasada.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; output only appears once the host
application configures logging.

Example:
    >>> from pasada.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Converting document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pasada." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pasada.mymodule'
    """
    if not (name == "pasada" or name.startswith("pasada.")):
        name = f"pasada.{name}"
    return logging.getLogger(name)
