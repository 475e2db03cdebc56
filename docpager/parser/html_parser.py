"""
HTML Parser - reads the editor's HTML serialization into a raw element tree.

Handles:
- void elements (img, br, hr, ...)
- implicit closing of <p> and <li> as browsers do
- stray end tags
- skipping non-content elements (script, style, head)

The resulting tree still carries every authored attribute; presentation is
stripped later by the style normalizer.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

SKIPPED_ELEMENTS = frozenset({"script", "style", "head", "title", "template", "noscript"})

# Wrappers that never become nodes of their own
TRANSPARENT_ELEMENTS = frozenset({"html", "body"})

# Opening one of these closes an open <p>
CLOSES_PARAGRAPH = frozenset({
    "address", "article", "aside", "blockquote", "div", "dl", "fieldset", "figure",
    "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "main",
    "nav", "ol", "p", "pre", "section", "table", "ul",
})

BLOCK_ELEMENTS = CLOSES_PARAGRAPH | frozenset({
    "li", "dd", "dt", "figcaption", "img", "tbody", "thead", "tfoot", "tr", "td", "th",
})

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class RawElement:
    """Authored element: tag name, attributes and mixed element/text children."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[Union["RawElement", str]] = field(default_factory=list)

    @property
    def is_block(self) -> bool:
        return self.tag in BLOCK_ELEMENTS

    def iter_elements(self) -> Iterator["RawElement"]:
        for child in self.children:
            if isinstance(child, RawElement):
                yield child

    def text_content(self) -> str:
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            else:
                parts.append(child.text_content())
        return "".join(parts)


class HTMLContentParser(HTMLParser):
    """HTML parser that builds a ``RawElement`` tree from editor content."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = RawElement(tag="body")
        self.stack: List[RawElement] = [self.root]
        self._skip_depth = 0

    @property
    def current(self) -> RawElement:
        return self.stack[-1]

    def handle_starttag(self, tag: str, attrs: list) -> None:
        tag_lower = tag.lower()

        if self._skip_depth or tag_lower in SKIPPED_ELEMENTS:
            if tag_lower not in VOID_ELEMENTS:
                self._skip_depth += 1
            return

        if tag_lower in TRANSPARENT_ELEMENTS:
            return

        if tag_lower in CLOSES_PARAGRAPH:
            self._close_open("p", stop_at=("li", "td", "th", "blockquote", "div"))
        if tag_lower == "li":
            self._close_open("li", stop_at=("ul", "ol"))

        attributes = {name.lower(): (value if value is not None else "") for name, value in attrs}
        element = RawElement(tag=tag_lower, attributes=attributes)
        self.current.children.append(element)

        if tag_lower not in VOID_ELEMENTS:
            self.stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        self.handle_starttag(tag, attrs)
        # Self-closed non-void element (<p/>) closes right away
        if tag.lower() not in VOID_ELEMENTS:
            self.handle_endtag(tag)

    def handle_endtag(self, tag: str) -> None:
        tag_lower = tag.lower()

        if self._skip_depth:
            if tag_lower not in VOID_ELEMENTS:
                self._skip_depth -= 1
            return

        if tag_lower in TRANSPARENT_ELEMENTS or tag_lower in VOID_ELEMENTS:
            return

        for index in range(len(self.stack) - 1, 0, -1):
            if self.stack[index].tag == tag_lower:
                del self.stack[index:]
                return

        if tag_lower == "p":
            # </p> without an opening tag produces an empty paragraph
            self.current.children.append(RawElement(tag="p"))
            return

        logger.debug("Ignoring stray end tag </%s>", tag_lower)

    def handle_data(self, data: str) -> None:
        if self._skip_depth or not data:
            return
        self.current.children.append(data)

    def _close_open(self, tag: str, stop_at: tuple = ()) -> None:
        for index in range(len(self.stack) - 1, 0, -1):
            open_tag = self.stack[index].tag
            if open_tag == tag:
                del self.stack[index:]
                return
            if open_tag in stop_at:
                return

    def close(self) -> None:
        super().close()
        del self.stack[1:]


def parse_html(html_content: Optional[str]) -> RawElement:
    """
    Parse editor HTML into a ``RawElement`` tree rooted at a synthetic ``body``.

    Args:
        html_content: HTML string (fragment or full document)

    Returns:
        Root element; empty for ``None`` or blank input
    """
    parser = HTMLContentParser()
    if html_content:
        parser.feed(html_content)
    parser.close()
    return parser.root


def _collect_text(node: Union[RawElement, str], parts: List[str]) -> None:
    if isinstance(node, str):
        parts.append(_WHITESPACE_RE.sub(" ", node))
        return
    if node.tag == "br":
        parts.append("\n")
        return
    block = node.is_block
    if block:
        parts.append("\n\n")
    for child in node.children:
        _collect_text(child, parts)
    if block:
        parts.append("\n\n")


def extract_text(content: Union[str, RawElement, None]) -> str:
    """
    Plain-text view of a document: block elements separated by blank lines.

    Args:
        content: HTML string or parsed ``RawElement`` tree

    Returns:
        Text with collapsed whitespace inside blocks
    """
    root = parse_html(content) if not isinstance(content, RawElement) else content
    parts: List[str] = []
    _collect_text(root, parts)
    lines = [line.strip() for line in "".join(parts).split("\n")]
    text = "\n".join(lines)
    return re.sub(r"\n{3,}", "\n\n", text).strip()
