"""

TextMetricsEngine - text width and line height for block measurement.

Uses ReportLab font metrics. Widths come back in the unit the font size is
given in, so passing sizes in CSS px yields px widths.

"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from reportlab.pdfbase import pdfmetrics

from ..models.style import StyleRule
from .fonts import resolve_font_variant

logger = logging.getLogger(__name__)


class TextMetricsEngine:
    """

    Engine for calculating text metrics.

    Word widths are cached per (text, font, size); the cache lives as long as
    the engine, which the measurement surface scopes to a single pass.

    """

    def __init__(self):
        self._width_cache: Dict[Tuple[str, str, float], float] = {}

    def font_name(self, style: StyleRule, bold: bool = False, italic: bool = False) -> str:
        """

        Gets the ReportLab font name for a style and run formatting.

        Args:
        style: Resolved block style
        bold: Run is bold (on top of the block's own weight)
        italic: Run is italic (on top of the block's own style)

        Returns:
        Font name registered in ReportLab

        """
        return resolve_font_variant(style.font_family, bold or style.is_bold, italic or style.is_italic)

    def string_width(self, text: str, font_name: str, font_size: float) -> float:
        """Width of ``text`` set in ``font_name`` at ``font_size``."""
        if not text:
            return 0.0
        key = (text, font_name, font_size)
        width = self._width_cache.get(key)
        if width is None:
            width = pdfmetrics.stringWidth(text, font_name, font_size)
            self._width_cache[key] = width
        return width

    def measure_text(self, text: str, style: StyleRule, bold: bool = False, italic: bool = False) -> float:
        """Width of a single unbroken line of text in px."""
        return self.string_width(text, self.font_name(style, bold, italic), style.font_size_px)

    def get_line_height(self, style: StyleRule) -> float:
        """

        Height of one line box.

        Args:
        style: Resolved block style

        Returns:
        Line height in px (font size times the line-height multiplier)

        """
        return style.line_height_px

    def clear(self) -> None:
        self._width_cache.clear()
