"""Core syntax node infrastructure with automatic registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, dataclass_transform

SYNTHETIC_SOURCE = "(synthetic)"


@dataclass(frozen=True)
class Position:
    """A point in template source. Lines are 1-based, columns 0-based."""

    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    """Span of template source a node was parsed from."""

    start: Position
    end: Position
    source: str | None = None

    @property
    def is_synthetic(self) -> bool:
        """Return True if the node was built rather than parsed."""
        return self.source == SYNTHETIC_SOURCE


SYNTHETIC_LOC = SourceLocation(
    start=Position(line=1, column=0),
    end=Position(line=1, column=0),
    source=SYNTHETIC_SOURCE,
)


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class Node:
    """Base for syntax nodes. ``node_type`` is the Glimmer ``type`` string."""

    node_type: ClassVar[str]
    registry: ClassVar[dict[str, type[Node]]] = {}

    def __init_subclass__(cls, node_type: str | None = None) -> None:
        """Register node subclass with automatic type derivation."""
        dataclass(frozen=True)(cls)
        cls.node_type = node_type if node_type is not None else cls.__name__

        if (existing := Node.registry.get(cls.node_type)) and existing is not cls:
            msg = (
                f"Node type '{cls.node_type}' already registered to {existing}. "
                "Choose a different node_type."
            )
            raise ValueError(msg)

        Node.registry[cls.node_type] = cls
