"""
Block tree produced by the style normalizer.

Nodes are immutable: a pagination pass builds a fresh tree and never
touches it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from .style import StyleRule


class BlockTag(str, Enum):
    HEADING1 = "h1"
    HEADING2 = "h2"
    PARAGRAPH = "p"
    UNORDERED_LIST = "ul"
    ORDERED_LIST = "ol"
    LIST_ITEM = "li"
    IMAGE = "img"
    OTHER = "other"

    @classmethod
    def from_tag_name(cls, name: Optional[str]) -> "BlockTag":
        """Map an HTML tag name to a block tag; anything unknown is ``OTHER``."""
        if not name:
            return cls.OTHER
        try:
            tag = cls(name.strip().lower())
        except ValueError:
            return cls.OTHER
        return tag

    @property
    def html_name(self) -> str:
        return "div" if self is BlockTag.OTHER else self.value


@dataclass(frozen=True, slots=True)
class TextRun:
    """Inline text with its character formatting. ``"\\n"`` is a hard line break."""

    text: str
    bold: bool = False
    italic: bool = False

    @property
    def is_break(self) -> bool:
        return self.text == "\n"


@dataclass(frozen=True, slots=True)
class BlockNode:
    tag: BlockTag
    children: Tuple["BlockNode", ...] = ()
    runs: Tuple[TextRun, ...] = ()
    attributes: Tuple[Tuple[str, str], ...] = ()
    style: StyleRule = field(default_factory=StyleRule)
    source_tag: str = ""

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    @property
    def inline_text(self) -> str:
        """Text of the node's own runs, hard breaks excluded."""
        return "".join(run.text for run in self.runs if not run.is_break)

    @property
    def text(self) -> str:
        """Concatenated text of the node and all descendants (DOM ``textContent``)."""
        return self.inline_text + "".join(child.text for child in self.children)

    @property
    def has_image(self) -> bool:
        return self.tag is BlockTag.IMAGE or any(child.has_image for child in self.children)

    @property
    def has_content(self) -> bool:
        return self.has_image or bool(self.text.strip())

    @property
    def is_empty_paragraph(self) -> bool:
        return self.tag is BlockTag.PARAGRAPH and not self.text.strip() and not self.has_image

    def walk(self) -> Iterator["BlockNode"]:
        """Depth-first walk over the node and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()
