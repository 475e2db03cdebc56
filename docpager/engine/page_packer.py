"""
Page packer - greedy single-pass assignment of measured blocks to pages.

Blocks are atomic and keep document order: a block goes on the current page
unless the page already holds something and the block would push it past
the capacity, in which case the page is closed and the block opens the next
one. A block taller than the capacity therefore always lands on a page of
its own (forced overflow) and packing still terminates.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..models.block import BlockNode, BlockTag, TextRun
from ..models.page import MeasuredBlock, Page
from ..styles.defaults import LEGAL_STYLESHEET, StyleSheet
from .page_config import PLACEHOLDER_TEXT

logger = logging.getLogger(__name__)


def placeholder_block(text: str = PLACEHOLDER_TEXT, stylesheet: StyleSheet = LEGAL_STYLESHEET) -> BlockNode:
    """Synthetic paragraph shown on the page of an empty document."""
    return BlockNode(
        tag=BlockTag.PARAGRAPH,
        runs=(TextRun(text),),
        style=stylesheet.resolve(BlockTag.PARAGRAPH),
        source_tag="p",
    )


class PagePacker:
    """Groups measured blocks into pages bounded by ``capacity`` (px)."""

    def __init__(self, capacity: float, placeholder: Optional[BlockNode] = None):
        if capacity <= 0:
            raise ValueError(f"Page capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.placeholder = placeholder if placeholder is not None else placeholder_block()

    def pack(self, measured: Sequence[MeasuredBlock]) -> List[Page]:
        """
        Pack blocks into pages.

        Args:
            measured: Blocks in document order with their occupied heights

        Returns:
            Pages numbered from 1; a single placeholder page for empty input
        """
        pages: List[Page] = []
        current: List[MeasuredBlock] = []
        current_height = 0.0

        for item in measured:
            if current and current_height + item.height > self.capacity:
                pages.append(Page(number=len(pages) + 1, measured=tuple(current)))
                current = [item]
                current_height = item.height
            else:
                current.append(item)
                current_height += item.height

        if current:
            pages.append(Page(number=len(pages) + 1, measured=tuple(current)))

        if not pages:
            pages.append(self.placeholder_page())

        for page in pages:
            if len(page) == 1 and page.is_overflowing(self.capacity):
                logger.debug(
                    "Page %d: single block of %.1fpx exceeds capacity %.1fpx",
                    page.number, page.height, self.capacity,
                )
        return pages

    def placeholder_page(self) -> Page:
        return Page(number=1, measured=(MeasuredBlock(self.placeholder, 0.0),), is_placeholder=True)
