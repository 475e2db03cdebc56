"""
Style normalizer - rebuilds authored content as a canonically styled block tree.

Author and editor presentation (inline ``style``, ``class`` markers, legacy
presentational attributes) is discarded; every node's presentation comes
from the stylesheet keyed by its tag, resolved recursively with inheritance
from the parent node.

The input tree is never modified: a new immutable ``BlockNode`` tree is
produced on every call.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Iterator, List, Sequence, Tuple, Union

from ..models.block import BlockNode, BlockTag, TextRun
from ..models.style import StyleRule
from ..parser.html_parser import RawElement, parse_html
from .defaults import LEGAL_STYLESHEET, StyleSheet

logger = logging.getLogger(__name__)

PRESENTATION_ATTRIBUTES = frozenset({
    "style", "class", "align", "bgcolor", "color", "face", "size", "valign", "border",
})

BOLD_TAGS = frozenset({"strong", "b"})
ITALIC_TAGS = frozenset({"em", "i"})

_WHITESPACE_RE = re.compile(r"\s+")

FlatItem = Tuple[Union[RawElement, str], bool, bool]


class StyleNormalizer:
    """Turns a raw authored tree (or HTML) into a normalized ``BlockNode`` tree."""

    def __init__(self, stylesheet: StyleSheet = LEGAL_STYLESHEET):
        self.stylesheet = stylesheet

    def normalize(self, content: Union[str, RawElement, None]) -> BlockNode:
        """
        Normalize editor content.

        Args:
            content: HTML string or parsed ``RawElement`` tree

        Returns:
            Root ``BlockNode`` (tag ``OTHER``) whose children are the top-level blocks
        """
        root = content if isinstance(content, RawElement) else parse_html(content)
        base = self.stylesheet.base
        children, _ = self._normalize_content(root.children, base, force_blocks=True)
        logger.debug("Normalized %d top-level nodes", len(children))
        return BlockNode(tag=BlockTag.OTHER, children=children, style=base, source_tag=root.tag)

    # ------------------------------------------------------------------
    def _normalize_element(self, element: RawElement, parent_style: StyleRule) -> BlockNode:
        tag = BlockTag.from_tag_name(element.tag)
        attributes = self._clean_attributes(element)

        if tag is BlockTag.IMAGE:
            if element.attributes.get("src", "").strip():
                style = self.stylesheet.resolve(tag, parent_style)
            else:
                # Still an image for segmentation, but without the image rule
                logger.debug("<img> without src keeps the unstyled rule")
                style = self.stylesheet.resolve(BlockTag.OTHER, parent_style)
            return BlockNode(tag=tag, attributes=attributes, style=style, source_tag=element.tag)

        style = self.stylesheet.resolve(tag, parent_style)
        children, runs = self._normalize_content(element.children, style)
        node = BlockNode(
            tag=tag,
            children=children,
            runs=runs,
            attributes=attributes,
            style=style,
            source_tag=element.tag,
        )
        if node.is_empty_paragraph and style.margin_bottom:
            # Empty paragraphs must not add phantom vertical space
            node = replace(node, style=style.with_margin_bottom(0.0))
        return node

    def _normalize_content(
        self,
        items: Sequence[Union[RawElement, str]],
        style: StyleRule,
        force_blocks: bool = False,
    ) -> Tuple[Tuple[BlockNode, ...], Tuple[TextRun, ...]]:
        flat = list(self._flatten(items, False, False))
        has_blocks = force_blocks or any(
            isinstance(item, RawElement) and item.is_block for item, _, _ in flat
        )
        if not has_blocks:
            return (), self._runs_from(flat)

        children: List[BlockNode] = []
        pending: List[FlatItem] = []
        for item, bold, italic in flat:
            if isinstance(item, RawElement) and item.is_block:
                self._flush_anonymous(pending, style, children)
                children.append(self._normalize_element(item, style))
            else:
                pending.append((item, bold, italic))
        self._flush_anonymous(pending, style, children)
        return tuple(children), ()

    def _flatten(self, items: Sequence[Union[RawElement, str]], bold: bool, italic: bool) -> Iterator[FlatItem]:
        """Yield children, opening inline wrappers that contain block descendants."""
        for item in items:
            if isinstance(item, RawElement) and not item.is_block and _contains_block(item):
                yield from self._flatten(
                    item.children,
                    bold or item.tag in BOLD_TAGS,
                    italic or item.tag in ITALIC_TAGS,
                )
            else:
                yield item, bold, italic

    def _flush_anonymous(self, pending: List[FlatItem], style: StyleRule, children: List[BlockNode]) -> None:
        """Wrap loose inline content between blocks in an anonymous block."""
        if not pending:
            return
        runs = self._runs_from(pending)
        pending.clear()
        if not any(run.is_break or run.text.strip() for run in runs):
            return
        children.append(
            BlockNode(
                tag=BlockTag.OTHER,
                runs=runs,
                style=self.stylesheet.resolve(BlockTag.OTHER, style),
            )
        )

    def _runs_from(self, items: Sequence[FlatItem]) -> Tuple[TextRun, ...]:
        runs: List[TextRun] = []
        for item, bold, italic in items:
            _collect_runs(item, bold, italic, runs)
        return _tidy_runs(runs)

    @staticmethod
    def _clean_attributes(element: RawElement) -> Tuple[Tuple[str, str], ...]:
        return tuple(
            (name, value)
            for name, value in element.attributes.items()
            if name not in PRESENTATION_ATTRIBUTES
        )


def _contains_block(element: RawElement) -> bool:
    return any(child.is_block or _contains_block(child) for child in element.iter_elements())


def _collect_runs(item: Union[RawElement, str], bold: bool, italic: bool, out: List[TextRun]) -> None:
    if isinstance(item, str):
        text = _WHITESPACE_RE.sub(" ", item)
        if text:
            out.append(TextRun(text, bold, italic))
        return
    if item.tag == "br":
        out.append(TextRun("\n"))
        return
    bold = bold or item.tag in BOLD_TAGS
    italic = italic or item.tag in ITALIC_TAGS
    for child in item.children:
        _collect_runs(child, bold, italic, out)


def _tidy_runs(runs: List[TextRun]) -> Tuple[TextRun, ...]:
    """Merge same-format neighbours and drop whitespace HTML would not render."""
    merged: List[TextRun] = []
    for run in runs:
        if merged and not run.is_break and not merged[-1].is_break:
            previous = merged[-1]
            text = run.text
            if previous.text.endswith(" ") and text.startswith(" "):
                text = text[1:]
            if previous.bold == run.bold and previous.italic == run.italic:
                merged[-1] = TextRun(previous.text + text, run.bold, run.italic)
                continue
            run = TextRun(text, run.bold, run.italic)
        merged.append(run)

    tidy: List[TextRun] = []
    for index, run in enumerate(merged):
        if run.is_break:
            tidy.append(run)
            continue
        text = run.text
        if index == 0 or merged[index - 1].is_break:
            text = text.lstrip(" ")
        if index == len(merged) - 1 or merged[index + 1].is_break:
            text = text.rstrip(" ")
        if text:
            tidy.append(TextRun(text, run.bold, run.italic))
    return tuple(tidy)


def normalize(content: Union[str, RawElement, None], stylesheet: StyleSheet = LEGAL_STYLESHEET) -> BlockNode:
    """Normalize content with the given stylesheet."""
    return StyleNormalizer(stylesheet).normalize(content)
