"""Emitting curly invocations for classified elements."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, assert_never

from angle_brackets import builders as b
from angle_brackets.classify import DynamicComponent, PlainElement, StaticComponent
from angle_brackets.config import DEFAULT_CONFIG
from angle_brackets.syntax import ConcatStatement, MustacheStatement, TextNode
from angle_brackets.traverse import KEEP, Replace

if TYPE_CHECKING:
    from angle_brackets.classify import Invocation
    from angle_brackets.config import PolyfillConfig
    from angle_brackets.syntax import (
        AttrNode,
        ElementNode,
        Expression,
        Hash,
        HashPair,
        Statement,
    )
    from angle_brackets.traverse import Action


def is_simple(mustache: MustacheStatement) -> bool:
    """Return True for an interpolation with no params and no hash pairs."""
    return not mustache.params and not mustache.hash.pairs


class Rewriter:
    """Builds the replacement for an element given its invocation."""

    def __init__(self, config: PolyfillConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def rewrite(self, element: ElementNode, invocation: Invocation) -> Action:
        match invocation:
            case PlainElement(has_splat=False):
                return KEEP
            case PlainElement(has_splat=True):
                return Replace(self.splat_into_element(element))
            case StaticComponent(name=name, self_closing=self_closing):
                return Replace(
                    self.invoke(element, name, (), self_closing=self_closing)
                )
            case DynamicComponent(path=path, self_closing=self_closing):
                return Replace(
                    self.invoke(
                        element,
                        self.config.component_helper,
                        (path,),
                        self_closing=self_closing,
                    )
                )
            case _:
                assert_never(invocation)

    def splat_into_element(self, element: ElementNode) -> ElementNode:
        """Swap ``...attributes`` on markup for the splat modifier."""
        attributes = tuple(
            a for a in element.attributes if a.name != self.config.splat_attribute
        )
        modifier = b.element_modifier(
            self.config.splat_modifier,
            [b.path(self.config.attributes_binding)],
        )
        return replace(
            element,
            attributes=attributes,
            modifiers=(*element.modifiers, modifier),
        )

    def invoke(
        self,
        element: ElementNode,
        callee: str,
        params: tuple[Expression, ...],
        *,
        self_closing: bool,
    ) -> Statement:
        """Build ``{{callee params ...}}`` or its block form for ``element``."""
        hash_ = self.arguments_hash(element.attributes)
        if self_closing:
            return b.mustache(callee, params, hash_, loc=element.loc)
        body = b.program(element.children, element.block_params)
        return b.block(callee, params, hash_, body, loc=element.loc)

    def arguments_hash(self, attributes: tuple[AttrNode, ...]) -> Hash:
        """Named arguments as pairs, plus the merged attributes if any.

        Plain attributes and a forwarded splat go under the attributes-binding
        key as ``(-merge-refs invocation=(hash ...) splat=__ANGLE_ATTRS__)``.
        """
        splat = self.config.splat_attribute
        has_splat = any(a.name == splat for a in attributes)
        args: list[AttrNode] = []
        plain: list[AttrNode] = []
        for a in attributes:
            if a.name == splat:
                continue
            (args if a.name.startswith("@") else plain).append(a)

        pairs = [
            b.pair(a.name[1:], self.expression_for(a.value), a.loc) for a in args
        ]
        if plain or has_splat:
            merged = self.merged_attributes(plain, has_splat=has_splat)
            pairs.append(b.pair(self.config.attributes_binding, merged))
        return b.hash(pairs)

    def merged_attributes(
        self,
        plain: list[AttrNode],
        *,
        has_splat: bool,
    ) -> Expression:
        merge: list[HashPair] = []
        if plain:
            invocation = b.hash(
                b.pair(a.name, self.expression_for(a.value), a.loc) for a in plain
            )
            merge.append(
                b.pair("invocation", b.sexpr(self.config.hash_helper, [], invocation))
            )
        if has_splat:
            merge.append(b.pair("splat", b.path(self.config.attributes_binding)))
        return b.sexpr(self.config.merge_helper, [], b.hash(merge))

    def expression_for(
        self,
        value: TextNode | MustacheStatement | ConcatStatement,
    ) -> Expression:
        """Turn an attribute value into an expression usable as an argument."""
        match value:
            case TextNode(chars=chars):
                return b.string(chars)
            # TODO: data-foo={{is-this-a-helper}} is read as a reference; check
            # whether the runtime expects (is-this-a-helper) instead.
            case MustacheStatement() if is_simple(value):
                return value.path
            case MustacheStatement(path=path, params=params, hash=hash_, loc=loc):
                return b.sexpr(path, params, hash_, loc)
            case ConcatStatement(parts=parts):
                return b.sexpr(
                    self.config.concat_helper,
                    [self.expression_for(part) for part in parts],
                )
            case _:
                assert_never(value)
