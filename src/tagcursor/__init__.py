"""
tagcursor: cursor-based recursive descent parser for opening tags.

Recognizes ``<tagname attr="value" ...`` at the start of a source text,
extracting the tag name and attributes while tracking offset, line and
column for diagnostics. Zero runtime dependencies.

Quick Start:
    >>> from tagcursor import parse
    >>> element = parse('<A HREF="/home" hidden>')
    >>> element.tag_name
    'a'
    >>> element.attrs
    {'href': '/home', 'hidden': None}

    >>> # Step through the grammar with a Parser
    >>> from tagcursor import Parser, Match
    >>> parser = Parser("<p>")
    >>> parser.advance()
    'p'
    >>> isinstance(parser.parse_tag_name(), Match)
    True

Errors:
    Input that is simply not a tag gives None. An attribute ``name=``
    without a double-quoted value raises MalformedAttributeError.
"""

from tagcursor.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagcursor.cursor import Cursor
from tagcursor.errors import MalformedAttributeError, ParseError, TagCursorError
from tagcursor.location import SourceLocation
from tagcursor.nodes import Attribute, Element, Node
from tagcursor.parser import Parser
from tagcursor.result import Malformed, Match, NoMatch, Result
from tagcursor.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Element | None:
    """Parse the opening tag at the start of source.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages

    Returns:
        The Element, or None if source does not start with an opening tag

    Raises:
        MalformedAttributeError: An attribute ``=`` has no valid quoted value

    Example:
        >>> parse("<div>").tag_name
        'div'
        >>> parse("text") is None
        True
    """
    return Parser(source, source_file=source_file).parse()


__all__ = [
    # Entry points
    "parse",
    "Parser",
    "Cursor",
    # Nodes
    "Attribute",
    "Element",
    "Node",
    "SourceLocation",
    # Results
    "Malformed",
    "Match",
    "NoMatch",
    "Result",
    # Errors
    "MalformedAttributeError",
    "ParseError",
    "TagCursorError",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
