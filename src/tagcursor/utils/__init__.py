"""Utility modules for tagcursor.

Provides:
- logger: get_logger for logging
"""

from tagcursor.utils.logger import get_logger

__all__ = [
    "get_logger",
]
