"""
Unit conversions for page geometry.

All layout happens in CSS pixels at the 96 px/in reference scale; the
stylesheet is authored in points.
"""

from typing import Optional, Union
import re

CSS_DPI = 96.0
POINTS_PER_INCH = 72.0
PT_TO_PX = CSS_DPI / POINTS_PER_INCH

_LENGTH_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px|pt|in)?\s*$", re.IGNORECASE)


def pt_to_px(value: Optional[float]) -> float:
    if value is None:
        return 0.0
    return float(value) * PT_TO_PX


def px_to_pt(value: Optional[float]) -> float:
    if value is None:
        return 0.0
    return float(value) / PT_TO_PX


def inches_to_px(value: Optional[float], dpi: float = CSS_DPI) -> float:
    if value is None:
        return 0.0
    return float(value) * dpi


def parse_length(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse an HTML length attribute ("300", "300px", "12pt", "2in") into px.

    Returns None for missing, relative (``%``) or unparseable values.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value) if value > 0 else None
    match = _LENGTH_RE.match(value)
    if not match:
        return None
    number = float(match.group(1))
    if number <= 0:
        return None
    unit = (match.group(2) or "px").lower()
    if unit == "pt":
        return pt_to_px(number)
    if unit == "in":
        return inches_to_px(number)
    return number
