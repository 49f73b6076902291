"""Production results.

Every grammar production returns one of three results:

- ``Match``: the production consumed input and produced a value.
- ``NoMatch``: soft failure. The cursor has already been restored to the
  production's entry location, so the caller may try something else.
- ``Malformed``: fatal failure carrying a ParseError. Enclosing
  productions must return it unchanged; the top-level ``Parser.parse()``
  raises the error.

Usage:
    >>> result = parser.parse_tag_name()
    >>> match result:
    ...     case Match(value=name):
    ...         ...
    ...     case NoMatch():
    ...         ...
    ...     case Malformed(error=err):
    ...         raise err

Thread Safety:
All result types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from tagcursor.errors import ParseError
from tagcursor.location import SourceLocation

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    """A production consumed ``[start.offset, end.offset)`` and produced ``value``."""

    value: T
    start: SourceLocation
    end: SourceLocation


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Soft failure. ``location`` is where the cursor was restored to."""

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Malformed:
    """Fatal failure. Must be propagated, never recovered from."""

    error: ParseError


Result = Union[Match[T], NoMatch, Malformed]


__all__ = [
    "Malformed",
    "Match",
    "NoMatch",
    "Result",
]
