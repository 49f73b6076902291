"""Minimal logging utilities for tagcursor.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tagcursor.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing element")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tagcursor." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("grammar")
        >>> logger.name
        'tagcursor.grammar'
    """
    if not (name == "tagcursor" or name.startswith("tagcursor.")):
        name = f"tagcursor.{name}"
    return logging.getLogger(name)
