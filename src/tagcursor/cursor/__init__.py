"""Character cursor for the tagcursor grammar.

Architecture:
cursor/
├── __init__.py          # Re-exports Cursor, normalize_newlines
└── core.py              # Cursor class (navigation + snapshot/restore)

Usage:
    >>> from tagcursor.cursor import Cursor
    >>> cursor = Cursor("<a>")
    >>> cursor.current_char()
    '<'

"""

from tagcursor.cursor.core import Cursor, normalize_newlines

__all__ = ["Cursor", "normalize_newlines"]
