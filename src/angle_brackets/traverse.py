"""Depth-first traversal with explicit visit results.

A :class:`Visitor` returns an :data:`Action` from ``enter``:

- ``KEEP`` leaves the node in place and descends into its children;
- ``Replace(node)`` installs ``node`` instead and then visits it;
- ``REMOVE`` drops the node from the sequence holding it.

Nodes are immutable, so a parent whose children changed is rebuilt with
:func:`dataclasses.replace` on the way back up. ``exit`` is called with the
node ``enter`` saw, after its children.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from typing import Any, TypeAlias

from angle_brackets.nodes import Node


@dataclass(frozen=True)
class Keep:
    """Leave the node unchanged."""


@dataclass(frozen=True)
class Replace:
    """Install ``node`` in place of the visited node."""

    node: Node


@dataclass(frozen=True)
class Remove:
    """Drop the visited node from its parent sequence."""


KEEP = Keep()
REMOVE = Remove()

Action: TypeAlias = Keep | Replace | Remove


class Visitor(ABC):
    """Base class for tree visitors.

    Subclass and implement ``enter`` with pattern matching on node types.
    """

    @abstractmethod
    def enter(self, node: Node) -> Action:
        """Visit ``node`` before its children."""
        ...

    def exit(self, node: Node) -> None:  # noqa: B027
        """Visit ``node`` after its children. Does nothing by default."""


def traverse(root: Node, visitor: Visitor) -> Node:
    """Walk ``root`` depth-first and return the rewritten tree.

    Raises:
        ValueError: If the visitor removes the root or a node held in a
            single-valued field

    """
    result = _visit(root, visitor)
    if result is None:
        msg = f"Cannot remove the traversal root ({type(root).node_type})"
        raise ValueError(msg)
    return result


def _visit(node: Node, visitor: Visitor) -> Node | None:
    match visitor.enter(node):
        case Remove():
            return None
        case Replace(node=new) if new is not node and new != node:
            return _visit(new, visitor)

    changes: dict[str, Any] = {}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            new_value = _visit(value, visitor)
            if new_value is None:
                msg = (
                    f"Cannot remove {type(value).node_type} from "
                    f"{type(node).node_type}.{f.name}; only nodes held in a "
                    "sequence can be removed"
                )
                raise ValueError(msg)
            if new_value is not value:
                changes[f.name] = new_value
        elif isinstance(value, tuple) and any(isinstance(v, Node) for v in value):
            new_items = _visit_sequence(value, visitor)
            if new_items is not None:
                changes[f.name] = new_items

    visitor.exit(node)
    return replace(node, **changes) if changes else node


def _visit_sequence(
    items: tuple[Any, ...],
    visitor: Visitor,
) -> tuple[Any, ...] | None:
    """Visit each node in ``items``. Returns None if nothing changed."""
    result = []
    changed = False
    for item in items:
        if not isinstance(item, Node):
            result.append(item)
            continue
        new_item = _visit(item, visitor)
        if new_item is not item:
            changed = True
        if new_item is not None:
            result.append(new_item)
    return tuple(result) if changed else None
