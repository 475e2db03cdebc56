"""Utility helpers for docpager."""

from .logger import LOG_LEVELS, configure_logging
from .units import CSS_DPI, PT_TO_PX, inches_to_px, parse_length, pt_to_px, px_to_pt

__all__ = [
    "LOG_LEVELS",
    "configure_logging",
    "CSS_DPI",
    "PT_TO_PX",
    "inches_to_px",
    "parse_length",
    "pt_to_px",
    "px_to_pt",
]
