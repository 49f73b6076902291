"""Character cursor with exact backtracking.

The cursor owns the normalized source and a live position triple
(offset, line, column) plus the cached current character. Grammar
productions snapshot the position with ``current_location()``, try to
consume input, and on failure ``backtrack()`` to the snapshot.

Python strings are sequences of code points, so an astral character such
as an emoji occupies exactly one index and can never be split by
``advance()`` or ``extract()``.

Thread Safety:
Cursor instances are not thread-safe. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from tagcursor.location import SourceLocation


def normalize_newlines(source: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return source.replace("\r\n", "\n").replace("\r", "\n")


class Cursor:
    """Forward-only character cursor with snapshot/restore.

    Usage:
            >>> cursor = Cursor("ab\\ncd")
            >>> cursor.advance()
            'b'
            >>> saved = cursor.current_location()
            >>> cursor.advance(), cursor.advance()
            ('\\n', 'c')
            >>> cursor.current_location()
            SourceLocation(offset=3, lineno=2, col_offset=1, ...)
            >>> cursor.backtrack(saved)
            >>> cursor.current_char()
            'b'

    End of input is represented by the empty string: ``current_char()``
    returns ``""`` once the offset reaches ``length``.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_source_file",
        "_pos",
        "_lineno",
        "_col",
        "_char",  # Cached character at _pos; "" at end of input
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Source text; line endings are normalized to LF
            source_file: Optional source file path for locations and errors
        """
        self._source = normalize_newlines(source)
        self._source_len = len(self._source)
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._char = self._char_at(0)

    @property
    def source(self) -> str:
        """The normalized source text."""
        return self._source

    @property
    def length(self) -> int:
        """Number of characters in the normalized source."""
        return self._source_len

    @property
    def source_file(self) -> str | None:
        return self._source_file

    def _char_at(self, pos: int) -> str:
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    # =========================================================================
    # Inspection
    # =========================================================================

    def current_position(self) -> int:
        """Current absolute offset."""
        return self._pos

    def current_location(self) -> SourceLocation:
        """Snapshot of the current offset, line and column."""
        return SourceLocation(
            offset=self._pos,
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

    def current_char(self) -> str:
        """Character at the cursor, or empty string at end of input."""
        return self._char

    def at_end(self) -> bool:
        """Check if the cursor is at end of input."""
        return self._pos >= self._source_len

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self) -> str:
        """Move one character forward and return the new current character.

        Consuming a newline starts a new line at column 1; any other
        character moves one column right. At end of input this is a no-op.

        Returns:
            The character now under the cursor, or empty string at end.
        """
        char = self._char
        if not char:
            return ""

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        self._pos += 1
        self._char = self._char_at(self._pos)
        return self._char

    def backtrack(self, location: SourceLocation) -> None:
        """Restore the cursor to a previously captured snapshot.

        Args:
            location: Snapshot from ``current_location()``

        Raises:
            ValueError: If the location lies outside the source
        """
        if not 0 <= location.offset <= self._source_len:
            raise ValueError(
                f"Cannot backtrack to offset {location.offset}: "
                f"source has {self._source_len} characters"
            )
        self._pos = location.offset
        self._lineno = location.lineno
        self._col = location.col_offset
        self._char = self._char_at(self._pos)

    # =========================================================================
    # Extraction
    # =========================================================================

    def extract(self, start: int, end: int) -> str:
        """Return the characters in ``[start, end)``.

        Raises:
            ValueError: Unless ``0 <= start <= end <= length``
        """
        if not 0 <= start <= end <= self._source_len:
            raise ValueError(
                f"Invalid extract range [{start}, {end}) for source of "
                f"length {self._source_len}"
            )
        return self._source[start:end]
