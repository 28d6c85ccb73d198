"""Angle-bracket invocation polyfill.

Rewrites ``<Foo @bar={{baz}} class="x">...</Foo>`` into the curly
invocations a pre-angle-bracket compiler understands::

    {{#foo bar=baz __ANGLE_ATTRS__=(-merge-refs invocation=(hash class="x"))}}
      ...
    {{/foo}}

Usage:
    template = transform(template, contents=source_text)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from angle_brackets.classify import classify
from angle_brackets.config import DEFAULT_CONFIG
from angle_brackets.rewrite import Rewriter
from angle_brackets.scope import ScopeStack
from angle_brackets.source import SourceText
from angle_brackets.syntax import ElementNode, Program
from angle_brackets.traverse import KEEP, Replace, Visitor, traverse

if TYPE_CHECKING:
    from angle_brackets.config import PolyfillConfig
    from angle_brackets.nodes import Node
    from angle_brackets.traverse import Action

logger = logging.getLogger(__name__)


class AngleBracketPolyfill(Visitor):
    """Visitor replacing angle-bracket component invocations.

    Holds the scope stack for one traversal; create a new instance (or use
    :func:`transform`) per template.
    """

    def __init__(
        self,
        contents: str | None = None,
        config: PolyfillConfig = DEFAULT_CONFIG,
    ) -> None:
        self.source = SourceText(contents)
        self.scope = ScopeStack()
        self.config = config
        self.rewriter = Rewriter(config)

    def enter(self, node: Node) -> Action:
        match node:
            case Program(block_params=params):
                self.scope.push(params)
                return KEEP
            case ElementNode():
                action = self.rewrite_element(node)
                if isinstance(action, Replace) and action.node != node:
                    return action
                self.scope.push(node.block_params)
                return KEEP
            case _:
                return KEEP

    def exit(self, node: Node) -> None:
        match node:
            case Program() | ElementNode():
                self.scope.pop()

    def rewrite_element(self, element: ElementNode) -> Action:
        invocation = classify(element, self.scope, self.source, self.config)
        logger.debug("<%s> classified as %s", element.tag, invocation)

        action = self.rewriter.rewrite(element, invocation)
        if isinstance(action, Replace):
            logger.debug(
                "<%s> at line %d replaced by %s",
                element.tag,
                element.loc.start.line,
                action.node.node_type,
            )
        return action


def transform(
    template: Program,
    contents: str | None = None,
    config: PolyfillConfig | None = None,
) -> Program:
    """Rewrite every angle-bracket invocation in ``template``.

    Args:
        template: Root of the parsed template
        contents: Original template source, used to recover tag case and
            self-closing status lost by older parsers
        config: Reserved names for the emitted tree

    Returns:
        The rewritten template; ``template`` itself if nothing changed

    """
    visitor = AngleBracketPolyfill(contents, config or DEFAULT_CONFIG)
    return cast("Program", traverse(template, visitor))
