"""
Canonical presentation attributes attached to a block.

Lengths are authored in points (as in the stylesheet) and exposed in CSS
pixels for measurement.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

from ..utils.units import pt_to_px

INHERITED_PROPERTIES = (
    "font_family",
    "font_size",
    "font_weight",
    "font_style",
    "line_height",
    "text_align",
    "color",
)

DEFAULT_FONT_SIZE_PT = 12.0
DEFAULT_LINE_HEIGHT = 1.5


@dataclass(frozen=True, slots=True)
class StyleRule:
    """Presentation of one tag. ``None`` means "inherit from the parent"."""

    font_family: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    line_height: Optional[float] = None
    text_align: Optional[str] = None
    color: Optional[str] = None
    margin_top: float = 0.0
    margin_bottom: float = 0.0
    padding_left: float = 0.0
    # Fraction of the containing width (images only)
    max_width: Optional[float] = None

    def inherit(self, parent: Optional["StyleRule"]) -> "StyleRule":
        """Return a copy with unset inheritable properties taken from ``parent``."""
        if parent is None:
            return self
        inherited: Dict[str, Any] = {}
        for name in INHERITED_PROPERTIES:
            if getattr(self, name) is None and getattr(parent, name) is not None:
                inherited[name] = getattr(parent, name)
        return replace(self, **inherited) if inherited else self

    def with_margin_bottom(self, value: float) -> "StyleRule":
        return replace(self, margin_bottom=value)

    @property
    def is_bold(self) -> bool:
        return (self.font_weight or "normal") in ("bold", "bolder", "700", "800", "900")

    @property
    def is_italic(self) -> bool:
        return (self.font_style or "normal") in ("italic", "oblique")

    @property
    def font_size_px(self) -> float:
        return pt_to_px(self.font_size if self.font_size is not None else DEFAULT_FONT_SIZE_PT)

    @property
    def line_height_px(self) -> float:
        multiplier = self.line_height if self.line_height is not None else DEFAULT_LINE_HEIGHT
        return self.font_size_px * multiplier

    @property
    def margin_top_px(self) -> float:
        return pt_to_px(self.margin_top)

    @property
    def margin_bottom_px(self) -> float:
        return pt_to_px(self.margin_bottom)

    @property
    def padding_left_px(self) -> float:
        return pt_to_px(self.padding_left)

    def to_css(self) -> str:
        """Serialize as an inline CSS declaration list."""
        declarations = []
        if self.font_family:
            declarations.append(f"font-family: {self.font_family}")
        if self.font_size is not None:
            declarations.append(f"font-size: {self.font_size:g}pt")
        if self.font_weight:
            declarations.append(f"font-weight: {self.font_weight}")
        if self.font_style:
            declarations.append(f"font-style: {self.font_style}")
        if self.line_height is not None:
            declarations.append(f"line-height: {self.line_height:g}")
        if self.text_align:
            declarations.append(f"text-align: {self.text_align}")
        if self.color:
            declarations.append(f"color: {self.color}")
        declarations.append(f"margin: {self.margin_top:g}pt 0 {self.margin_bottom:g}pt 0")
        if self.padding_left:
            declarations.append(f"padding-left: {self.padding_left:g}pt")
        if self.max_width is not None:
            declarations.append(f"max-width: {self.max_width * 100:g}%")
            declarations.append("height: auto")
            declarations.append("display: block")
        return "; ".join(declarations)

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StyleRule":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
