"""Data model: styles, blocks and pages."""

from .style import StyleRule
from .block import BlockNode, BlockTag, TextRun
from .page import MeasuredBlock, Page, PaginationResult

__all__ = [
    "StyleRule",
    "BlockNode",
    "BlockTag",
    "TextRun",
    "MeasuredBlock",
    "Page",
    "PaginationResult",
]
