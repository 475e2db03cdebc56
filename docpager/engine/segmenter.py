"""Block segmenter - picks the top-level blocks that take part in pagination."""

from __future__ import annotations

import logging
from typing import List

from ..models.block import BlockNode

logger = logging.getLogger(__name__)


def is_content_bearing(node: BlockNode) -> bool:
    """
    An image always qualifies; otherwise the node or one of its descendants
    must be an image or carry non-whitespace text.
    """
    return node.has_content


class BlockSegmenter:
    """Extracts the ordered list of content-bearing top-level blocks."""

    def segment(self, root: BlockNode) -> List[BlockNode]:
        blocks = [child for child in root.children if is_content_bearing(child)]
        skipped = len(root.children) - len(blocks)
        if skipped:
            logger.debug("Segmenter skipped %d empty top-level node(s)", skipped)
        return blocks


def segment_blocks(root: BlockNode) -> List[BlockNode]:
    return BlockSegmenter().segment(root)
