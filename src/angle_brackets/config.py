"""Reserved names shared with the runtime half of the polyfill."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PolyfillConfig:
    """Names the rewritten tree uses to talk to the runtime.

    Attributes:
        splat_attribute: Attribute name that forwards the caller's attributes
        attributes_binding: Path bound to the attributes passed to the current
            invocation; also the hash key the merged attributes are passed under
        splat_modifier: Element modifier that applies forwarded attributes to
            plain markup
        merge_helper: Helper merging direct and forwarded attributes
        component_helper: Helper invoking a component resolved at runtime
        concat_helper: Helper joining a concatenated attribute value
        hash_helper: Helper building a hash from its named arguments

    """

    splat_attribute: str = "...attributes"
    attributes_binding: str = "__ANGLE_ATTRS__"
    splat_modifier: str = "_splattributes"
    merge_helper: str = "-merge-refs"
    component_helper: str = "component"
    concat_helper: str = "concat"
    hash_helper: str = "hash"


DEFAULT_CONFIG = PolyfillConfig()
