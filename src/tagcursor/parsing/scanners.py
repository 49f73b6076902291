"""Token scanners: whitespace, attribute name, attribute value, tag name.

Every scanner follows the same pattern: snapshot the cursor, consume a
maximal run of acceptable characters, and either return a Match or
restore the snapshot and return NoMatch. Scanners never raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagcursor.parsing.charsets import (
    ASCII_LETTERS,
    ATTRIBUTE_NAME_DELIMITERS,
    ATTRIBUTE_VALUE_TERMINATORS,
    QUOTE,
    WHITESPACE,
)
from tagcursor.result import Match, NoMatch, Result
from tagcursor.utils.logger import get_logger

if TYPE_CHECKING:
    from tagcursor.config import ParseConfig
    from tagcursor.location import SourceLocation

logger = get_logger(__name__)


class ScannerMixin:
    """Mixin providing the leaf productions of the tag grammar.

    Required Host Attributes:
        - _config: ParseConfig

    Required Host Methods (provided by Cursor):
        - current_location(), current_position(), current_char()
        - advance(), backtrack(), extract()

    """

    _config: ParseConfig

    def current_location(self) -> SourceLocation:
        raise NotImplementedError

    def current_position(self) -> int:
        raise NotImplementedError

    def current_char(self) -> str:
        raise NotImplementedError

    def advance(self) -> str:
        raise NotImplementedError

    def backtrack(self, location: SourceLocation) -> None:
        raise NotImplementedError

    def extract(self, start: int, end: int) -> str:
        raise NotImplementedError

    def _no_match(self, production: str, start: SourceLocation) -> NoMatch:
        """Restore the cursor to start and report a soft failure."""
        self.backtrack(start)
        logger.debug("%s: no match at %s", production, start)
        return NoMatch(start)

    def _scan_while(self, accept: frozenset[str]) -> None:
        """Advance over a maximal run of characters in accept."""
        char = self.current_char()
        while char in accept:
            char = self.advance()

    def _scan_until(self, stop: frozenset[str]) -> None:
        """Advance until a character in stop or end of input."""
        char = self.current_char()
        while char and char not in stop:
            char = self.advance()

    def parse_whitespace(self) -> Result[str]:
        """Consume a run of spaces, newlines and tabs.

        Returns:
            Match with the consumed text, or NoMatch if there was none.
        """
        start = self.current_location()
        self._scan_while(WHITESPACE)
        end = self.current_location()
        if end.offset > start.offset:
            return Match(self.extract(start.offset, end.offset), start, end)
        return self._no_match("whitespace", start)

    def parse_attribute_name(self) -> Result[str]:
        """Consume an attribute name.

        An attribute name is a run of anything except whitespace, quotes,
        ``=``, ``/`` and ``>``.

        Returns:
            Match with the (case folded) name, or NoMatch.
        """
        start = self.current_location()
        self._scan_until(ATTRIBUTE_NAME_DELIMITERS)
        end = self.current_location()
        if end.offset == start.offset:
            return self._no_match("attribute name", start)
        name = self.extract(start.offset, end.offset)
        if self._config.lowercase_attribute_names:
            name = name.lower()
        return Match(name, start, end)

    def parse_attribute_value(self) -> Result[str]:
        """Consume a double-quoted attribute value.

        The value may not span lines. A missing opening quote, a newline
        before the closing quote, or end of input all produce NoMatch with
        the cursor restored.

        Returns:
            Match with the text between the quotes (verbatim), or NoMatch.
        """
        start = self.current_location()
        if self.current_char() != QUOTE:
            return self._no_match("attribute value", start)

        self.advance()
        value_start = self.current_position()
        self._scan_until(ATTRIBUTE_VALUE_TERMINATORS)
        if self.current_char() != QUOTE:
            return self._no_match("attribute value (unterminated)", start)

        value = self.extract(value_start, self.current_position())
        self.advance()
        return Match(value, start, self.current_location())

    def parse_tag_name(self) -> Result[str]:
        """Consume a tag name made of ASCII letters.

        Returns:
            Match with the (case folded) tag name, or NoMatch.
        """
        start = self.current_location()
        self._scan_while(ASCII_LETTERS)
        end = self.current_location()
        if end.offset == start.offset:
            return self._no_match("tag name", start)
        name = self.extract(start.offset, end.offset)
        if self._config.lowercase_tag_names:
            name = name.lower()
        return Match(name, start, end)
