"""Source location tracking for diagnostics and backtracking.

Provides the SourceLocation dataclass. A location is a snapshot of the
cursor (offset, line, column); the parser captures one before every
speculative production and restores it on failure.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Immutable cursor snapshot.

    ``offset`` is a 0-based index into the normalized character buffer.
    ``lineno`` and ``col_offset`` are 1-indexed.

    Attributes:
        offset: Absolute index into the source (0-indexed)
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        end_offset: Ending absolute index (optional, for spans)
        end_lineno: Ending line number (optional, for spans)
        end_col_offset: Ending column (optional, for spans)
        source_file: Source file path (optional, for error messages)

    Examples:
            >>> loc = SourceLocation(offset=0, lineno=1, col_offset=1)
            >>> str(loc)
            '1:1'

            >>> loc = SourceLocation(4, 2, 3, source_file="page.html")
            >>> str(loc)
            'page.html:2:3'

    """

    offset: int
    lineno: int
    col_offset: int
    end_offset: int | None = None
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "page.html:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end.

        Args:
            end: Ending location

        Returns:
            New SourceLocation with this start and end's position
        """
        return SourceLocation(
            offset=self.offset,
            lineno=self.lineno,
            col_offset=self.col_offset,
            end_offset=end.offset,
            end_lineno=end.lineno,
            end_col_offset=end.col_offset,
            source_file=self.source_file,
        )

    @property
    def start(self) -> SourceLocation:
        """The start point of this location, without span information."""
        return SourceLocation(
            offset=self.offset,
            lineno=self.lineno,
            col_offset=self.col_offset,
            source_file=self.source_file,
        )

    @property
    def end(self) -> SourceLocation | None:
        """The end point of a span, or None if this is a point location."""
        if self.end_offset is None or self.end_lineno is None or self.end_col_offset is None:
            return None
        return SourceLocation(
            offset=self.end_offset,
            lineno=self.end_lineno,
            col_offset=self.end_col_offset,
            source_file=self.source_file,
        )
