"""Block-parameter scope tracking."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ScopeStack:
    """Names introduced by enclosing blocks, innermost last.

    Pushes and pops must be symmetric: each ``pop`` removes the names of the
    most recent unmatched ``push``.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._frames: list[int] = []

    def push(self, names: Iterable[str]) -> None:
        names = list(names)
        self._names.extend(names)
        self._frames.append(len(names))

    def pop(self) -> None:
        count = self._frames.pop()
        if count:
            del self._names[-count:]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)
