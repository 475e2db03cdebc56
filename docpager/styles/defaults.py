"""
Canonical stylesheet applied to every pagination pass.

The table is process-wide and not user-editable; author-supplied presentation
never reaches the measurement step.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..exceptions import StyleError
from ..models.block import BlockTag
from ..models.style import StyleRule

logger = logging.getLogger(__name__)

LEGAL_FONT_FAMILY = "'Times New Roman', Times, serif"

LEGAL_BASE_STYLE = StyleRule(
    font_family=LEGAL_FONT_FAMILY,
    font_size=12.0,
    font_weight="normal",
    font_style="normal",
    line_height=1.5,
    text_align="left",
    color="#000000",
)

LEGAL_RULES: Dict[BlockTag, StyleRule] = {
    BlockTag.HEADING1: StyleRule(
        font_size=18.0,
        font_weight="bold",
        line_height=1.3,
        text_align="center",
        margin_top=24.0,
        margin_bottom=16.0,
    ),
    BlockTag.HEADING2: StyleRule(
        font_size=14.0,
        font_weight="bold",
        line_height=1.3,
        margin_top=20.0,
        margin_bottom=12.0,
    ),
    BlockTag.PARAGRAPH: StyleRule(
        line_height=2.0,
        text_align="justify",
        margin_top=0.0,
        margin_bottom=12.0,
    ),
    BlockTag.UNORDERED_LIST: StyleRule(margin_top=12.0, margin_bottom=12.0, padding_left=36.0),
    BlockTag.ORDERED_LIST: StyleRule(margin_top=12.0, margin_bottom=12.0, padding_left=36.0),
    BlockTag.LIST_ITEM: StyleRule(line_height=2.0, margin_top=6.0, margin_bottom=6.0),
    BlockTag.IMAGE: StyleRule(margin_top=12.0, margin_bottom=12.0, max_width=1.0),
    BlockTag.OTHER: StyleRule(),
}


class StyleSheet:
    """
    Immutable mapping from block tag to its canonical ``StyleRule``.

    Resolution applies CSS-like inheritance: font, line height, alignment and
    color flow from the parent; margins and padding never do.
    """

    def __init__(self, base: StyleRule, rules: Mapping[BlockTag, StyleRule], name: str = "custom"):
        self._validate(base, "base")
        for tag, rule in rules.items():
            self._validate(rule, tag.value)
        self.name = name
        self.base = base
        self._rules: Mapping[BlockTag, StyleRule] = MappingProxyType(dict(rules))
        logger.debug("StyleSheet %s initialized with %d rules", name, len(self._rules))

    @staticmethod
    def _validate(rule: StyleRule, label: str) -> None:
        if rule.font_size is not None and rule.font_size <= 0:
            raise StyleError(f"Invalid font size in rule '{label}'", str(rule.font_size))
        if rule.line_height is not None and rule.line_height <= 0:
            raise StyleError(f"Invalid line height in rule '{label}'", str(rule.line_height))
        if rule.margin_top < 0 or rule.margin_bottom < 0 or rule.padding_left < 0:
            raise StyleError(f"Negative spacing in rule '{label}'")
        if rule.max_width is not None and not 0 < rule.max_width <= 1:
            raise StyleError(f"max_width must be a fraction in (0, 1] in rule '{label}'", str(rule.max_width))

    def rule_for(self, tag: BlockTag) -> StyleRule:
        """Raw rule for a tag; tags without a rule get the unstyled ``OTHER`` default."""
        return self._rules.get(tag) or self._rules.get(BlockTag.OTHER) or StyleRule()

    def resolve(self, tag: BlockTag, parent: Optional[StyleRule] = None) -> StyleRule:
        """Rule for ``tag`` with inherited properties filled from ``parent`` (or the base)."""
        return self.rule_for(tag).inherit(parent if parent is not None else self.base)

    def __contains__(self, tag: object) -> bool:
        return tag in self._rules

    def __repr__(self) -> str:
        return f"StyleSheet(name={self.name!r}, rules={len(self._rules)})"


LEGAL_STYLESHEET = StyleSheet(LEGAL_BASE_STYLE, LEGAL_RULES, name="legal")
