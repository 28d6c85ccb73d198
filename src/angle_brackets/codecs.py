"""Conversion between syntax trees and JSON-compatible builtins.

The encoding is the Glimmer AST JSON shape, so trees dumped by the upstream
parser load as-is:

    {"type": "ElementNode", "tag": "Foo", "blockParams": [], ...,
     "loc": {"source": null, "start": {"line": 1, "column": 0}, "end": {...}}}

Field names are camelCased on the way out and back. Keys a node does not
model are ignored on decode, and missing optional fields take their defaults.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from typing import Any

from angle_brackets.nodes import SYNTHETIC_LOC, Node, Position, SourceLocation

_TYPE_KEY = "type"
_MAX_TYPES_IN_ERROR = 10  # Maximum number of node types to show in error messages


def wire_name(field_name: str) -> str:
    """``block_params`` -> ``blockParams``."""
    head, *rest = field_name.split("_")
    return head + "".join(word.capitalize() for word in rest)


def to_builtins(obj: Any) -> Any:
    """Convert a node tree to JSON-compatible Python builtins.

    Args:
        obj: A node, or any value found inside one

    Returns:
        JSON-compatible Python value (dict, list, str, int, float, bool, None)

    """
    # 1. Node objects
    if isinstance(obj, Node):
        node_cls: type[Node] = type(obj)
        result: dict[str, Any] = {_TYPE_KEY: node_cls.node_type}
        for f in fields(obj):
            result[wire_name(f.name)] = to_builtins(getattr(obj, f.name))
        return result

    # 2. Locations and other plain dataclasses
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_builtins(getattr(obj, f.name)) for f in fields(obj)}

    # 3. Sequences become JSON arrays
    if isinstance(obj, Sequence) and not isinstance(obj, str | bytes):
        return [to_builtins(item) for item in obj]

    # 4. Mappings
    if isinstance(obj, Mapping):
        return {k: to_builtins(v) for k, v in obj.items()}

    # 5. Primitives pass through
    return obj


def from_builtins(data: Mapping[str, Any]) -> Node:
    """Deserialize a dict with a ``type`` field to a node.

    Args:
        data: Dict with 'type' field

    Returns:
        Deserialized node, children included

    Raises:
        KeyError: If 'type' field is missing
        ValueError: If the type is unknown or a required field is missing

    """
    if _TYPE_KEY not in data:
        msg = f"Missing required '{_TYPE_KEY}' field"
        raise KeyError(msg)

    node_type = data[_TYPE_KEY]
    node_cls = Node.registry.get(node_type)
    if node_cls is None:
        available = list(Node.registry.keys())[:_MAX_TYPES_IN_ERROR]
        suffix = "..." if len(Node.registry) > _MAX_TYPES_IN_ERROR else ""
        msg = (
            f"Unknown node type '{node_type}'. "
            f"Available node types: {available}{suffix}"
        )
        raise ValueError(msg)

    field_values = {}
    for field in fields(node_cls):
        key = wire_name(field.name)
        if key not in data:
            continue
        if field.name == "loc":
            field_values[field.name] = _decode_loc(data[key])
        else:
            field_values[field.name] = _deserialize_value(data[key])

    try:
        return node_cls(**field_values)
    except TypeError as e:
        msg = f"Cannot build {node_type}: {e}"
        raise ValueError(msg) from e


def _decode_loc(data: Mapping[str, Any] | None) -> SourceLocation:
    """Decode a ``loc`` object. Upstream builders emit ``null`` when synthesizing."""
    if data is None:
        return SYNTHETIC_LOC
    return SourceLocation(
        start=Position(line=data["start"]["line"], column=data["start"]["column"]),
        end=Position(line=data["end"]["line"], column=data["end"]["column"]),
        source=data.get("source"),
    )


def _deserialize_value(value: Any) -> Any:
    """Deserialize a field value. Every array in the tree becomes a tuple."""
    if isinstance(value, Mapping) and _TYPE_KEY in value:
        return from_builtins(value)

    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)

    if isinstance(value, Mapping):
        return {k: _deserialize_value(v) for k, v in value.items()}

    # Primitives pass through
    return value
