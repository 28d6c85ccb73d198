"""Original template text lookup.

Older Glimmer parsers lowercase the first character of an element's tag and
do not record whether the element was written self-closing. When the template
source is supplied, both are recovered from the text the element spans.
Without it, the parser's tag is used and no element is self-closing.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from angle_brackets.nodes import SourceLocation
    from angle_brackets.syntax import ElementNode

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n?|\n")
_TAG_WHITESPACE = frozenset("\t\r\n\f ")
_TAG_TERMINATORS = frozenset("/>") | _TAG_WHITESPACE


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


class SourceText:
    """Optional access to the template source a tree was parsed from.

    ``SourceText(None)`` (or an empty string) is a valid, unavailable source;
    every lookup then falls back to what the parser recorded.
    """

    def __init__(self, contents: str | None = None) -> None:
        self.contents = contents
        self.lines: list[str] = _LINE_BREAK.split(contents) if contents else []

    @property
    def available(self) -> bool:
        return len(self.lines) > 0

    def can_locate(self, loc: SourceLocation) -> bool:
        """Return True if the text under ``loc`` can be recovered."""
        return self.available and not loc.is_synthetic

    def slice(self, loc: SourceLocation) -> str:
        """Return the source text ``loc`` covers, line breaks normalized to ``\\n``.

        Spans are trusted; a line outside the source raises ``IndexError``.
        """
        first_line = loc.start.line - 1
        last_line = loc.end.line - 1

        if first_line == last_line:
            return self.lines[first_line][loc.start.column : loc.end.column]

        chunks = [self.lines[first_line][loc.start.column :]]
        chunks.extend(self.lines[first_line + 1 : last_line])
        chunks.append(self.lines[last_line][: loc.end.column])
        return "\n".join(chunks)

    def self_closing(self, element: ElementNode) -> bool:
        """Return True if ``element`` was written as ``<Tag ... />``."""
        if element.self_closing is not None:
            return element.self_closing
        if not self.can_locate(element.loc):
            return False

        text = self.slice(element.loc)
        index = text.find(">")
        return index > 0 and text[index - 1] == "/"

    def tag_name(self, element: ElementNode) -> str:
        """Return the tag as written, with the case of its first character."""
        if not self.can_locate(element.loc):
            logger.debug("No source for <%s>, using parser tag", element.tag)
            return element.tag

        text = self.slice(element.loc)
        name: list[str] = []
        for char in text[1:]:
            if name:
                if char in _TAG_TERMINATORS:
                    break
                name.append(char)
            elif char == "@" or _is_alpha(char):
                name.append(char)
        return "".join(name)
