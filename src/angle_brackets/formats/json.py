"""JSON format adapter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from angle_brackets.codecs import from_builtins, to_builtins

if TYPE_CHECKING:
    from angle_brackets.nodes import Node


def to_json(node: Node, *, indent: int | None = 2) -> str:
    """Serialize a node tree to a JSON string.

    Args:
        node: The root of the tree to serialize
        indent: JSON indentation level (default 2, None for compact)

    Returns:
        JSON string representation

    """
    return json.dumps(to_builtins(node), indent=indent)


def from_json(s: str) -> Node:
    """Deserialize a JSON string to a node tree.

    Args:
        s: JSON string to deserialize

    Returns:
        Deserialized root node

    Raises:
        ValueError: If the JSON doesn't contain a valid node object
        KeyError: If required 'type' field is missing

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'type' field"
        raise ValueError(msg)
    return from_builtins(data)
