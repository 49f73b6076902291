"""Node serialization: JSON round-trip for parsed elements.

Converts Element nodes to/from JSON-compatible dicts. Useful for
debugging, inspection and snapshot tests.

All output is deterministic (sorted keys).

Example:
    from tagcursor import parse
    from tagcursor.serialization import to_json, from_json

    element = parse('<a href="/">')
    json_str = to_json(element)
    restored = from_json(json_str)
    assert element == restored

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from tagcursor.location import SourceLocation
from tagcursor.nodes import Attribute, Element, Node

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Attribute": Attribute,
    "Element": Element,
}


def _location_to_dict(loc: SourceLocation) -> dict[str, Any]:
    return {f.name: getattr(loc, f.name) for f in fields(loc)}


def _location_from_dict(data: dict[str, Any]) -> SourceLocation:
    return SourceLocation(**data)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Each dict carries a ``"_type"`` key naming the node class.

    Args:
        node: Element or Attribute

    Returns:
        Dict suitable for ``json.dumps``
    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, SourceLocation):
            result[f.name] = _location_to_dict(value)
        elif isinstance(value, tuple):
            result[f.name] = [to_dict(item) for item in value]
        else:
            result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a node from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown
    """
    type_name = data.get("_type")
    node_cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "_type":
            continue
        if key == "location":
            kwargs[key] = _location_from_dict(value)
        elif isinstance(value, list):
            kwargs[key] = tuple(from_dict(item) for item in value)
        else:
            kwargs[key] = value
    return node_cls(**kwargs)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string (sorted keys)."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(text: str) -> Node:
    """Deserialize a node from a JSON string produced by ``to_json``."""
    return from_dict(json.loads(text))


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
