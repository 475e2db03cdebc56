"""Map CSS font-family lists onto the ReportLab standard font faces."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = "Times"

FONT_FALLBACKS: Dict[str, str] = {
    "times new roman": "Times",
    "times": "Times",
    "times-roman": "Times",
    "cambria": "Times",
    "georgia": "Times",
    "garamond": "Times",
    "serif": "Times",
    "helvetica": "Helvetica",
    "arial": "Helvetica",
    "arial mt": "Helvetica",
    "calibri": "Helvetica",
    "verdana": "Helvetica",
    "tahoma": "Helvetica",
    "segoe ui": "Helvetica",
    "trebuchet ms": "Helvetica",
    "sans-serif": "Helvetica",
    "courier new": "Courier",
    "courier": "Courier",
    "consolas": "Courier",
    "lucida console": "Courier",
    "monospace": "Courier",
}

# family -> (regular, bold, italic, bold italic)
FONT_VARIANTS: Dict[str, Tuple[str, str, str, str]] = {
    "Times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}


def resolve_family(font_family: Optional[str]) -> str:
    """Pick the first known family from a CSS ``font-family`` list."""
    if not font_family:
        return DEFAULT_FAMILY
    for candidate in font_family.split(","):
        cleaned = candidate.strip().strip("'\"").lower()
        if cleaned in FONT_FALLBACKS:
            return FONT_FALLBACKS[cleaned]
    logger.debug("No metrics for font-family %r, using %s", font_family, DEFAULT_FAMILY)
    return DEFAULT_FAMILY


def resolve_font_variant(font_family: Optional[str], bold: bool, italic: bool) -> str:
    """ReportLab font name for a CSS family list and weight/style flags."""
    regular, bold_face, italic_face, bold_italic = FONT_VARIANTS[resolve_family(font_family)]
    if bold and italic:
        return bold_italic
    if bold:
        return bold_face
    if italic:
        return italic_face
    return regular
