"""Glimmer template syntax tree.

Node types match the ``type`` strings emitted by the Glimmer parser, so trees
dumped as JSON by the upstream toolchain load directly through
:mod:`angle_brackets.codecs`. Only the fields the rewrite needs are modelled;
parser extras such as whitespace-control flags are dropped on load.
"""

from __future__ import annotations

from dataclasses import field
from typing import TypeAlias

from angle_brackets.nodes import SYNTHETIC_LOC, Node, SourceLocation

# =============================================================================
# Expressions
# =============================================================================


class PathExpression(Node):
    """A dotted reference such as ``foo.bar``, ``this.foo`` or ``@foo``.

    ``data`` marks a path that resolves against the caller's named arguments
    rather than a free variable. ``original`` keeps the text as written.
    """

    original: str
    parts: tuple[str, ...] = ()
    this: bool = False
    data: bool = False
    loc: SourceLocation = SYNTHETIC_LOC


class StringLiteral(Node):
    value: str
    loc: SourceLocation = SYNTHETIC_LOC


class NumberLiteral(Node):
    value: int | float
    loc: SourceLocation = SYNTHETIC_LOC


class BooleanLiteral(Node):
    value: bool
    loc: SourceLocation = SYNTHETIC_LOC


class NullLiteral(Node):
    loc: SourceLocation = SYNTHETIC_LOC


class UndefinedLiteral(Node):
    loc: SourceLocation = SYNTHETIC_LOC


class HashPair(Node):
    key: str
    value: Expression
    loc: SourceLocation = SYNTHETIC_LOC


class Hash(Node):
    pairs: tuple[HashPair, ...] = ()
    loc: SourceLocation = SYNTHETIC_LOC


class SubExpression(Node):
    """A parenthesized call: ``(helper param key=value)``."""

    path: PathExpression
    params: tuple[Expression, ...] = ()
    hash: Hash = field(default_factory=Hash)
    loc: SourceLocation = SYNTHETIC_LOC


Literal: TypeAlias = (
    StringLiteral | NumberLiteral | BooleanLiteral | NullLiteral | UndefinedLiteral
)
Expression: TypeAlias = PathExpression | SubExpression | Literal

# =============================================================================
# Statements
# =============================================================================


class TextNode(Node):
    chars: str
    loc: SourceLocation = SYNTHETIC_LOC


class CommentStatement(Node):
    """An HTML comment: ``<!-- value -->``."""

    value: str
    loc: SourceLocation = SYNTHETIC_LOC


class MustacheCommentStatement(Node):
    """A Handlebars comment: ``{{!-- value --}}``."""

    value: str
    loc: SourceLocation = SYNTHETIC_LOC


class MustacheStatement(Node):
    """An inline curly invocation: ``{{path param key=value}}``."""

    path: PathExpression | Literal
    params: tuple[Expression, ...] = ()
    hash: Hash = field(default_factory=Hash)
    escaped: bool = True
    loc: SourceLocation = SYNTHETIC_LOC


class ConcatStatement(Node):
    """An attribute value mixing text and interpolations: ``class="a {{b}}"``."""

    parts: tuple[TextNode | MustacheStatement, ...] = ()
    loc: SourceLocation = SYNTHETIC_LOC


class AttrNode(Node):
    """An attribute on an element.

    Names starting with ``@`` are named arguments; ``...attributes`` is the
    splat marker.
    """

    name: str
    value: TextNode | MustacheStatement | ConcatStatement
    loc: SourceLocation = SYNTHETIC_LOC


class ElementModifierStatement(Node):
    """A modifier in element position: ``<div {{on "click" this.go}}>``."""

    path: PathExpression
    params: tuple[Expression, ...] = ()
    hash: Hash = field(default_factory=Hash)
    loc: SourceLocation = SYNTHETIC_LOC


class Program(Node):
    """A statement list. Both the template root and every block body.

    ``block_params`` are the names the body introduces (``as |a b|``).
    """

    body: tuple[Statement, ...] = ()
    block_params: tuple[str, ...] = ()
    loc: SourceLocation = SYNTHETIC_LOC


class BlockStatement(Node):
    """A block curly invocation: ``{{#path ...}}program{{else}}inverse{{/path}}``."""

    path: PathExpression | Literal
    params: tuple[Expression, ...] = ()
    hash: Hash = field(default_factory=Hash)
    program: Program = field(default_factory=Program)
    inverse: Program | None = None
    loc: SourceLocation = SYNTHETIC_LOC


class ElementNode(Node):
    """A tag in angle-bracket form, either markup or a component invocation.

    ``self_closing`` is None when the parser did not record it. Older parsers
    also lowercase the first character of ``tag``.
    """

    tag: str
    attributes: tuple[AttrNode, ...] = ()
    modifiers: tuple[ElementModifierStatement, ...] = ()
    children: tuple[Statement, ...] = ()
    block_params: tuple[str, ...] = ()
    self_closing: bool | None = None
    loc: SourceLocation = SYNTHETIC_LOC


Statement: TypeAlias = (
    ElementNode
    | MustacheStatement
    | BlockStatement
    | TextNode
    | CommentStatement
    | MustacheCommentStatement
)
