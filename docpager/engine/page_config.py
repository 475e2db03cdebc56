"""Explicit pagination configuration passed to the controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..styles.defaults import LEGAL_STYLESHEET, StyleSheet
from .geometry import PageGeometry

PLACEHOLDER_TEXT = "Start typing your document..."


@dataclass(frozen=True)
class PaginationConfig:
    """
    Configuration for one controller.

    Attributes:
        geometry: Page size and margins (content area derives from them)
        stylesheet: Canonical tag -> style table
        placeholder_text: Text of the synthetic paragraph on the empty-document page
        validate: Check layout invariants after each pass and log violations
    """

    geometry: PageGeometry = field(default_factory=PageGeometry.letter)
    stylesheet: StyleSheet = LEGAL_STYLESHEET
    placeholder_text: str = PLACEHOLDER_TEXT
    validate: bool = False

    @property
    def content_width(self) -> float:
        return self.geometry.content_width

    @property
    def capacity(self) -> float:
        return self.geometry.content_height
