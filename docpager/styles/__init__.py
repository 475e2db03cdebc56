"""Canonical stylesheet and the style normalizer."""

from .defaults import LEGAL_BASE_STYLE, LEGAL_RULES, LEGAL_STYLESHEET, StyleSheet
from .style_normalizer import PRESENTATION_ATTRIBUTES, StyleNormalizer, normalize

__all__ = [
    "LEGAL_BASE_STYLE",
    "LEGAL_RULES",
    "LEGAL_STYLESHEET",
    "StyleSheet",
    "PRESENTATION_ATTRIBUTES",
    "StyleNormalizer",
    "normalize",
]
