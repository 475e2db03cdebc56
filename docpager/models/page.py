"""Pages produced by the page packer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .block import BlockNode


@dataclass(frozen=True, slots=True)
class MeasuredBlock:
    """A block and its occupied height (box height plus vertical margins) in px."""

    block: BlockNode
    height: float


@dataclass(frozen=True, slots=True)
class Page:
    number: int
    measured: Tuple[MeasuredBlock, ...]
    is_placeholder: bool = False

    @property
    def blocks(self) -> Tuple[BlockNode, ...]:
        return tuple(item.block for item in self.measured)

    @property
    def height(self) -> float:
        return sum(item.height for item in self.measured)

    def is_overflowing(self, capacity: float) -> bool:
        """True when the page is taller than ``capacity``; the packer only allows this for a lone block."""
        return self.height > capacity

    def __len__(self) -> int:
        return len(self.measured)


@dataclass(frozen=True, slots=True)
class PaginationResult:
    """Everything the rendering sink receives after one pass."""

    pages: Tuple[Page, ...]
    word_count: int
    capacity: float

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def page_label(self) -> str:
        return "1 page" if self.page_count == 1 else f"{self.page_count} pages"

    @property
    def blocks(self) -> Tuple[BlockNode, ...]:
        """All packed blocks in page order; the placeholder is not a document block."""
        return tuple(block for page in self.pages if not page.is_placeholder for block in page.blocks)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page_count": self.page_count,
            "word_count": self.word_count,
            "capacity": self.capacity,
            "pages": [
                {
                    "number": page.number,
                    "placeholder": page.is_placeholder,
                    "height": round(page.height, 2),
                    "blocks": [
                        {
                            "tag": item.block.tag.value,
                            "height": round(item.height, 2),
                            "text": item.block.text.strip()[:80],
                        }
                        for item in page.measured
                    ],
                }
                for page in self.pages
            ],
        }
