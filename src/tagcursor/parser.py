"""Recursive descent parser for opening tags.

Architecture:
The parser composes the character cursor with the grammar mixins:
- `Cursor`: source buffer, position tracking, snapshot/backtrack
- `ScannerMixin`: leaf productions (whitespace, names, quoted values)
- `ElementParsingMixin`: ``<tag attr="value" ...`` assembly

Each production returns a Match, NoMatch or Malformed result.
``parse()`` turns those into the public contract: an Element, None, or
a raised ParseError.

Thread Safety:
- Parser instances are single-use and not thread-safe
- Configuration is read from ContextVar (thread-local) at construction
- Parsed nodes are immutable and safe to share across threads

"""

from __future__ import annotations

from tagcursor.config import ParseConfig, get_parse_config
from tagcursor.cursor import Cursor
from tagcursor.nodes import Element
from tagcursor.parsing import ElementParsingMixin, ScannerMixin
from tagcursor.result import Malformed, Match


class Parser(
    Cursor,
    ScannerMixin,
    ElementParsingMixin,
):
    """Cursor-based parser for a single leading opening tag.

    Usage:
            >>> parser = Parser('<DIV CLASS="x">')
            >>> element = parser.parse()
            >>> element.tag_name, element.attrs
            ('div', {'class': 'x'})

    The cursor methods (``current_location``, ``advance``, ``backtrack``,
    ``extract`` ...) and every production (``parse_whitespace``,
    ``parse_attribute_name``, ``parse_attribute_value``,
    ``parse_tag_name``, ``parse_element``) are public, so callers can
    drive the grammar step by step.

    Configuration:
        Parser reads configuration from ContextVar. Use set_parse_config()
        or parse_config_context() before creating a Parser if you need
        non-default configuration.

    """

    __slots__ = (
        "_config",
        "elements",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path for error messages

        """
        super().__init__(source, source_file=source_file)
        self._config: ParseConfig = get_parse_config()
        # Reserved: parse() never populates this
        self.elements: list[Element] = []

    @property
    def config(self) -> ParseConfig:
        """The configuration captured at construction."""
        return self._config

    def parse(self) -> Element | None:
        """Parse exactly one element at the current cursor.

        Returns:
            The Element, or None if the input at the cursor is not an
            opening tag (the cursor is then left where it was).

        Raises:
            MalformedAttributeError: An attribute ``=`` has no valid
                double-quoted value.

        """
        result = self.parse_element()
        if isinstance(result, Malformed):
            raise result.error
        if isinstance(result, Match):
            return result.value
        return None
