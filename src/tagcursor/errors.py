"""Exception classes for tagcursor.

Soft failures inside the grammar are never raised; they are reported as
``NoMatch`` results. Only input that cannot be interpreted at all ends
up as an exception.
"""

from __future__ import annotations


class TagCursorError(Exception):
    """Base exception for all tagcursor errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(TagCursorError):
    """Error during tag parsing.

    Raised when the parser encounters input it cannot interpret.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        offset: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            offset: Absolute character index where error occurred (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.offset = offset

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MalformedAttributeError(ParseError):
    """An attribute ``name=`` is not followed by a double-quoted value.

    Backtracking cannot repair this, so the whole parse is aborted.
    """

    def __init__(
        self,
        attribute_name: str,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        offset: int | None = None,
    ) -> None:
        """Initialize malformed attribute error.

        Args:
            attribute_name: Name of the attribute whose value is missing
            message: Description of what was found instead
            lineno: Line number where the value was expected
            col_offset: Column where the value was expected
            source_file: Path to source file (optional)
            offset: Absolute character index where the value was expected
        """
        self.attribute_name = attribute_name
        super().__init__(
            f"Attribute '{attribute_name}': {message}",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
            offset=offset,
        )
