"""Grammar productions for the tagcursor parser.

Provides mixin classes layered on top of the Cursor:
- `ScannerMixin`: whitespace, attribute name, attribute value, tag name
- `ElementParsingMixin`: element assembly from the scanners

Example:
    >>> from tagcursor.cursor import Cursor
    >>> from tagcursor.parsing import ScannerMixin, ElementParsingMixin
    >>> class Parser(Cursor, ScannerMixin, ElementParsingMixin):
    ...     pass

"""

from tagcursor.parsing.element import ElementParsingMixin
from tagcursor.parsing.scanners import ScannerMixin

__all__ = [
    "ElementParsingMixin",
    "ScannerMixin",
]
