"""Typed nodes for parsed tags.

All nodes are frozen dataclasses with slots, so parse results are
immutable and safe to share across threads.

Node Hierarchy:
Node (base)
├── Attribute
└── Element

"""

from __future__ import annotations

from dataclasses import dataclass

from tagcursor.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """A single ``name`` or ``name="value"`` pair.

    ``value`` is None when the attribute had no ``=``. The value text is
    kept verbatim; only the name is case folded.

    """

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """One opening tag: ``<tag_name attr="value" ...``.

    The location spans from the ``<`` up to where the scan for another
    attribute name stopped, so whitespace in front of a closing ``>`` is
    included. The ``>`` itself is not consumed and not required.

    """

    tag_name: str
    attributes: tuple[Attribute, ...] = ()

    @property
    def start(self) -> SourceLocation:
        """Location of the opening ``<``."""
        return self.location.start

    @property
    def end(self) -> SourceLocation:
        """Location just after the last consumed character."""
        return self.location.end or self.location.start

    @property
    def attrs(self) -> dict[str, str | None]:
        """Attributes as a dict. The first occurrence of a repeated name wins."""
        result: dict[str, str | None] = {}
        for attr in self.attributes:
            result.setdefault(attr.name, attr.value)
        return result

    def get(self, name: str, default: str | None = None) -> str | None:
        """Look up an attribute value by exact name.

        Returns ``default`` only when the attribute is absent. A bare
        attribute such as ``hidden`` gives ``None``.
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return default

    def has(self, name: str) -> bool:
        """Check whether an attribute is present, with or without a value."""
        return any(attr.name == name for attr in self.attributes)
