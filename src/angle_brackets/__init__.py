"""angle-brackets - Angle-bracket invocation polyfill for Glimmer templates."""

from angle_brackets.classify import (
    DynamicComponent,
    Invocation,
    PlainElement,
    Resolution,
    StaticComponent,
    classify,
    dasherize,
)
from angle_brackets.codecs import (
    from_builtins,
    to_builtins,
)
from angle_brackets.config import (
    DEFAULT_CONFIG,
    PolyfillConfig,
)
from angle_brackets.formats.json import (
    from_json,
    to_json,
)
from angle_brackets.nodes import (
    SYNTHETIC_LOC,
    Node,
    Position,
    SourceLocation,
)
from angle_brackets.rewrite import Rewriter
from angle_brackets.scope import ScopeStack
from angle_brackets.source import SourceText
from angle_brackets.transform import (
    AngleBracketPolyfill,
    transform,
)
from angle_brackets.traverse import (
    KEEP,
    REMOVE,
    Action,
    Keep,
    Remove,
    Replace,
    Visitor,
    traverse,
)

__all__ = [
    "DEFAULT_CONFIG",
    "KEEP",
    "REMOVE",
    "SYNTHETIC_LOC",
    # Traversal
    "Action",
    # Polyfill
    "AngleBracketPolyfill",
    # Classification
    "DynamicComponent",
    "Invocation",
    "Keep",
    # Syntax tree
    "Node",
    "PlainElement",
    # Configuration
    "PolyfillConfig",
    "Position",
    "Remove",
    "Replace",
    "Resolution",
    "Rewriter",
    "ScopeStack",
    "SourceLocation",
    "SourceText",
    "StaticComponent",
    "Visitor",
    "classify",
    "dasherize",
    # Serialization
    "from_builtins",
    "from_json",
    "to_builtins",
    "to_json",
    "transform",
    "traverse",
]
