"""Node builders.

Thin constructors for synthesized nodes. Anything that takes a ``path``
accepts a plain string and turns it into a :class:`PathExpression`; ``params``
and ``hash`` may be omitted. Every builder defaults ``loc`` to the synthetic
location.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from angle_brackets.nodes import SYNTHETIC_LOC, Position, SourceLocation
from angle_brackets.syntax import (
    AttrNode,
    BlockStatement,
    BooleanLiteral,
    ConcatStatement,
    ElementModifierStatement,
    ElementNode,
    Hash,
    HashPair,
    MustacheStatement,
    NullLiteral,
    NumberLiteral,
    PathExpression,
    Program,
    StringLiteral,
    SubExpression,
    TextNode,
    UndefinedLiteral,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from angle_brackets.syntax import Expression, Literal, Statement


def pos(line: int, column: int) -> Position:
    return Position(line=line, column=column)


def loc(
    start_line: int,
    start_column: int,
    end_line: int,
    end_column: int,
    source: str | None = None,
) -> SourceLocation:
    """Build a source span. Lines are 1-based, columns 0-based."""
    return SourceLocation(
        start=pos(start_line, start_column),
        end=pos(end_line, end_column),
        source=source,
    )


# =============================================================================
# Expressions
# =============================================================================


def path(
    original: str | PathExpression,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> PathExpression:
    """Build a path from its written form.

    ``@foo.bar`` becomes a data path with parts ``foo, bar``; ``this.foo``
    sets ``this`` and drops the ``this`` segment from ``parts``.
    """
    if isinstance(original, PathExpression):
        return original

    data = original.startswith("@")
    text = original[1:] if data else original
    parts = text.split(".") if text else []
    this = bool(parts) and parts[0] == "this"
    if this:
        parts = parts[1:]

    return PathExpression(
        original=original,
        parts=tuple(parts),
        this=this,
        data=data,
        loc=loc,
    )


def _callee(value: str | PathExpression | Literal) -> PathExpression | Literal:
    return path(value) if isinstance(value, str) else value


def string(value: str, loc: SourceLocation = SYNTHETIC_LOC) -> StringLiteral:
    return StringLiteral(value=value, loc=loc)


def number(value: float, loc: SourceLocation = SYNTHETIC_LOC) -> NumberLiteral:
    return NumberLiteral(value=value, loc=loc)


def boolean(value: bool, loc: SourceLocation = SYNTHETIC_LOC) -> BooleanLiteral:
    return BooleanLiteral(value=value, loc=loc)


def null(loc: SourceLocation = SYNTHETIC_LOC) -> NullLiteral:
    return NullLiteral(loc=loc)


def undefined(loc: SourceLocation = SYNTHETIC_LOC) -> UndefinedLiteral:
    return UndefinedLiteral(loc=loc)


def pair(key: str, value: Expression, loc: SourceLocation = SYNTHETIC_LOC) -> HashPair:
    return HashPair(key=key, value=value, loc=loc)


def hash(  # noqa: A001
    pairs: Iterable[HashPair] | None = None,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> Hash:
    return Hash(pairs=tuple(pairs or ()), loc=loc)


def sexpr(
    path: str | PathExpression,
    params: Iterable[Expression] | None = None,
    hash: Hash | None = None,  # noqa: A002
    loc: SourceLocation = SYNTHETIC_LOC,
) -> SubExpression:
    return SubExpression(
        path=_callee(path),
        params=tuple(params or ()),
        hash=hash if hash is not None else Hash(),
        loc=loc,
    )


# =============================================================================
# Statements
# =============================================================================


def text(chars: str, loc: SourceLocation = SYNTHETIC_LOC) -> TextNode:
    return TextNode(chars=chars, loc=loc)


def mustache(
    path: str | PathExpression | Literal,
    params: Iterable[Expression] | None = None,
    hash: Hash | None = None,  # noqa: A002
    raw: bool = False,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> MustacheStatement:
    return MustacheStatement(
        path=_callee(path),
        params=tuple(params or ()),
        hash=hash if hash is not None else Hash(),
        escaped=not raw,
        loc=loc,
    )


def program(
    body: Iterable[Statement] | None = None,
    block_params: Iterable[str] | None = None,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> Program:
    return Program(
        body=tuple(body or ()),
        block_params=tuple(block_params or ()),
        loc=loc,
    )


def block(
    path: str | PathExpression | Literal,
    params: Iterable[Expression] | None,
    hash: Hash | None,  # noqa: A002
    program: Program,
    inverse: Program | None = None,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> BlockStatement:
    return BlockStatement(
        path=_callee(path),
        params=tuple(params or ()),
        hash=hash if hash is not None else Hash(),
        program=program,
        inverse=inverse,
        loc=loc,
    )


def concat(
    parts: Iterable[TextNode | MustacheStatement],
    loc: SourceLocation = SYNTHETIC_LOC,
) -> ConcatStatement:
    return ConcatStatement(parts=tuple(parts), loc=loc)


def attr(
    name: str,
    value: TextNode | MustacheStatement | ConcatStatement,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> AttrNode:
    return AttrNode(name=name, value=value, loc=loc)


def element_modifier(
    path: str | PathExpression,
    params: Iterable[Expression] | None = None,
    hash: Hash | None = None,  # noqa: A002
    loc: SourceLocation = SYNTHETIC_LOC,
) -> ElementModifierStatement:
    return ElementModifierStatement(
        path=_callee(path),
        params=tuple(params or ()),
        hash=hash if hash is not None else Hash(),
        loc=loc,
    )


def element(  # noqa: PLR0913
    tag: str,
    attributes: Iterable[AttrNode] | None = None,
    modifiers: Iterable[ElementModifierStatement] | None = None,
    children: Iterable[Statement] | None = None,
    block_params: Iterable[str] | None = None,
    self_closing: bool | None = None,
    loc: SourceLocation = SYNTHETIC_LOC,
) -> ElementNode:
    return ElementNode(
        tag=tag,
        attributes=tuple(attributes or ()),
        modifiers=tuple(modifiers or ()),
        children=tuple(children or ()),
        block_params=tuple(block_params or ()),
        self_closing=self_closing,
        loc=loc,
    )
