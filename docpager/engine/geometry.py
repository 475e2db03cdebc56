"""Geometry primitives and the fixed page geometry used for pagination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..utils.units import inches_to_px

PAGE_WIDTH_INCHES = 8.5
PAGE_HEIGHT_INCHES = 11.0
MARGIN_INCHES = 1.0

PAGE_WIDTH_PX = inches_to_px(PAGE_WIDTH_INCHES)
PAGE_HEIGHT_PX = inches_to_px(PAGE_HEIGHT_INCHES)
MARGIN_PX = inches_to_px(MARGIN_INCHES)
CONTENT_WIDTH_PX = PAGE_WIDTH_PX - 2 * MARGIN_PX
CONTENT_HEIGHT_PX = PAGE_HEIGHT_PX - 2 * MARGIN_PX


@dataclass(slots=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_tuple(cls, value: Iterable[float]) -> "Size":
        width, height = value
        return cls(float(width), float(height))


@dataclass(slots=True)
class Margins:
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Margins":
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size and margins in CSS px; derives the content area."""

    page_size: Size
    margins: Margins

    def __post_init__(self) -> None:
        if self.content_width <= 0:
            raise ValueError(
                f"Margins leave no content width (page width={self.page_size.width}, "
                f"left={self.margins.left}, right={self.margins.right})"
            )
        if self.content_height <= 0:
            raise ValueError(
                f"Margins leave no content height (page height={self.page_size.height}, "
                f"top={self.margins.top}, bottom={self.margins.bottom})"
            )

    @property
    def content_width(self) -> float:
        return self.page_size.width - self.margins.horizontal

    @property
    def content_height(self) -> float:
        """Per-page height budget used by the page packer."""
        return self.page_size.height - self.margins.vertical

    @classmethod
    def letter(cls) -> "PageGeometry":
        """US Letter (8.5in x 11in) with 1in margins: 816 x 1056 px, 864 px of content."""
        return cls(Size(PAGE_WIDTH_PX, PAGE_HEIGHT_PX), Margins.uniform(MARGIN_PX))

    @classmethod
    def from_px(cls, width: float, height: float, margin: float) -> "PageGeometry":
        return cls(Size(float(width), float(height)), Margins.uniform(float(margin)))
