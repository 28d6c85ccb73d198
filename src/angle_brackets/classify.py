"""Deciding what an angle-bracket tag invokes."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

from angle_brackets import builders as b
from angle_brackets.config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from angle_brackets.config import PolyfillConfig
    from angle_brackets.scope import ScopeStack
    from angle_brackets.source import SourceText
    from angle_brackets.syntax import ElementNode, PathExpression, StringLiteral

_UPPER = re.compile(r"[A-Z]")


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def dasherize(name: str) -> str:
    """Convert ``FooBar`` to ``foo-bar``.

    A hyphen goes before each capital except the first character and capitals
    following a non-letter, so ``@Foo`` and ``foo.Bar`` gain no hyphen.
    """

    def hyphenate(match: re.Match[str]) -> str:
        index = match.start()
        char = match.group().lower()
        if index and _is_letter(name[index - 1]):
            return f"-{char}"
        return char

    return _UPPER.sub(hyphenate, name)


def is_uppercase(char: str) -> bool:
    """Return True for a cased, uppercase character. Digits and symbols are not."""
    return char == char.upper() and char != char.lower()


class Resolution(Enum):
    """Where a dynamic invocation's component comes from."""

    ARGUMENT = "argument"  # <@foo>
    THIS = "this"  # <this.foo>
    LOCAL = "local"  # <foo> with foo a block param
    NAME = "name"  # <Foo>, looked up by dasherized name at runtime


@dataclass(frozen=True)
class PlainElement:
    """Ordinary markup; only the splat needs rewriting."""

    has_splat: bool


@dataclass(frozen=True)
class StaticComponent:
    """A component invoked directly by its dasherized name."""

    name: str
    self_closing: bool
    has_splat: bool


@dataclass(frozen=True)
class DynamicComponent:
    """A component invoked through the ``component`` helper."""

    path: PathExpression | StringLiteral
    resolution: Resolution
    self_closing: bool
    has_splat: bool


Invocation: TypeAlias = PlainElement | StaticComponent | DynamicComponent


def classify(
    element: ElementNode,
    scope: ScopeStack,
    source: SourceText,
    config: PolyfillConfig = DEFAULT_CONFIG,
) -> Invocation:
    """Decide how ``element`` is invoked.

    The checks run in order and the first match wins: named argument,
    ``this.`` path, block-param local, single-word capitalized name,
    multi-word capitalized name, plain markup.
    """
    tag = source.tag_name(element)
    first = tag[:1]
    has_splat = any(a.name == config.splat_attribute for a in element.attributes)

    resolution: Resolution
    path: PathExpression | StringLiteral

    if first == "@":
        resolution = Resolution.ARGUMENT
        path = replace(b.path(tag[1:]), original=tag, data=True)
    elif tag.startswith("this."):
        resolution = Resolution.THIS
        path = b.path(tag)
    elif tag.split(".", 1)[0] in scope:
        resolution = Resolution.LOCAL
        path = b.path(tag)
    elif is_uppercase(first):
        name = dasherize(tag)
        if "-" in name:
            return StaticComponent(
                name=name,
                self_closing=source.self_closing(element),
                has_splat=has_splat,
            )
        resolution = Resolution.NAME
        path = b.string(name)
    else:
        return PlainElement(has_splat=has_splat)

    return DynamicComponent(
        path=path,
        resolution=resolution,
        self_closing=source.self_closing(element),
        has_splat=has_splat,
    )
