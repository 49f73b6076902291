"""Element production: ``<`` tag-name (whitespace attribute)*.

Failure policy:
- No ``<`` or no tag name: NoMatch, cursor restored to the ``<``.
- An attribute name followed by ``=`` without a complete double-quoted
  value (missing quote, newline or end of input before the closing
  quote): Malformed. There is no safe reinterpretation of a dangling
  ``=``, so the error propagates to the caller instead of backtracking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tagcursor.errors import MalformedAttributeError
from tagcursor.nodes import Attribute, Element
from tagcursor.parsing.charsets import EQUALS, QUOTE, TAG_OPEN
from tagcursor.result import Malformed, Match, NoMatch, Result
from tagcursor.utils.logger import get_logger

if TYPE_CHECKING:
    from tagcursor.location import SourceLocation

logger = get_logger(__name__)


class ElementParsingMixin:
    """Mixin assembling Element nodes from the scanner productions.

    Required Host Methods:
        - Cursor navigation (current_location, current_char, advance, backtrack)
        - ScannerMixin productions (parse_whitespace, parse_attribute_name,
          parse_attribute_value, parse_tag_name)

    """

    def current_location(self) -> SourceLocation:
        raise NotImplementedError

    def current_char(self) -> str:
        raise NotImplementedError

    def advance(self) -> str:
        raise NotImplementedError

    def backtrack(self, location: SourceLocation) -> None:
        raise NotImplementedError

    def parse_whitespace(self) -> Result[str]:
        raise NotImplementedError

    def parse_attribute_name(self) -> Result[str]:
        raise NotImplementedError

    def parse_attribute_value(self) -> Result[str]:
        raise NotImplementedError

    def parse_tag_name(self) -> Result[str]:
        raise NotImplementedError

    def parse_element(self) -> Result[Element]:
        """Parse one opening tag at the cursor.

        The closing ``>`` is neither consumed nor required; parsing stops
        as soon as no further attribute name can be scanned. Whitespace
        skipped before that failed name stays consumed, so for ``<div >``
        the cursor is left on the ``>``.

        Returns:
            Match with an Element, NoMatch (cursor restored), or Malformed.
        """
        start = self.current_location()
        if self.current_char() != TAG_OPEN:
            self.backtrack(start)
            logger.debug("element: no '<' at %s", start)
            return NoMatch(start)
        self.advance()

        tag_name = self.parse_tag_name()
        if not isinstance(tag_name, Match):
            self.backtrack(start)
            logger.debug("element: no tag name after '<' at %s", start)
            return NoMatch(start)

        attributes: list[Attribute] = []
        while True:
            self.parse_whitespace()
            attribute = self._parse_attribute()
            if isinstance(attribute, Malformed):
                return attribute
            if isinstance(attribute, NoMatch):
                break
            attributes.append(attribute.value)

        end = self.current_location()
        element = Element(
            location=start.span_to(end),
            tag_name=tag_name.value,
            attributes=tuple(attributes),
        )
        logger.debug(
            "element: <%s> with %d attribute(s) at %s",
            element.tag_name,
            len(element.attributes),
            start,
        )
        return Match(element, start, end)

    def _parse_attribute(self) -> Result[Attribute]:
        """Parse ``name [whitespace = whitespace "value"]``.

        The caller skips the whitespace in front of the name. On NoMatch
        the cursor is where the name scan started.
        """
        name = self.parse_attribute_name()
        if not isinstance(name, Match):
            return name

        after_name = self.current_location()
        self.parse_whitespace()
        if self.current_char() != EQUALS:
            # Bare attribute; leave trailing whitespace for the next attribute
            self.backtrack(after_name)
            return Match(
                Attribute(location=name.start.span_to(after_name), name=name.value),
                name.start,
                after_name,
            )

        self.advance()
        self.parse_whitespace()
        value = self.parse_attribute_value()
        if isinstance(value, Match):
            return Match(
                Attribute(
                    location=name.start.span_to(value.end),
                    name=name.value,
                    value=value.value,
                ),
                name.start,
                value.end,
            )
        return Malformed(self._malformed_value(name.value))

    def _malformed_value(self, attribute_name: str) -> MalformedAttributeError:
        """Build the error for ``name=`` without a valid quoted value."""
        location = self.current_location()
        char = self.current_char()
        if not char:
            found = "end of input"
        elif char == QUOTE:
            found = "an unterminated quoted value"
        elif char == "\n":
            found = "a line break"
        else:
            found = f"{char!r}"
        logger.debug("element: attribute %r has no value at %s", attribute_name, location)
        return MalformedAttributeError(
            attribute_name,
            f"expected a double-quoted value after '=', found {found}",
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
            offset=location.offset,
        )
