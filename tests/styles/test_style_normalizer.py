"""
Tests for the canonical stylesheet and the style normalizer.
"""

import pytest

from docpager.exceptions import StyleError
from docpager.models.block import BlockTag, TextRun
from docpager.models.style import StyleRule
from docpager.parser.html_parser import parse_html
from docpager.styles.defaults import LEGAL_FONT_FAMILY, LEGAL_STYLESHEET, StyleSheet
from docpager.styles.style_normalizer import StyleNormalizer, normalize


class TestStyleSheet:
    """Test cases for the legal stylesheet."""

    def test_paragraph_rule(self):
        style = LEGAL_STYLESHEET.resolve(BlockTag.PARAGRAPH)

        assert style.font_family == LEGAL_FONT_FAMILY
        assert style.font_size == 12.0
        assert style.line_height == 2.0
        assert style.text_align == "justify"
        assert style.margin_top == 0.0
        assert style.margin_bottom == 12.0
        assert style.margin_bottom_px == pytest.approx(16.0)

    def test_heading_rules(self):
        h1 = LEGAL_STYLESHEET.resolve(BlockTag.HEADING1)
        h2 = LEGAL_STYLESHEET.resolve(BlockTag.HEADING2)

        assert (h1.font_size, h1.line_height, h1.text_align) == (18.0, 1.3, "center")
        assert (h1.margin_top, h1.margin_bottom) == (24.0, 16.0)
        assert h1.is_bold and h2.is_bold
        assert (h2.font_size, h2.margin_top, h2.margin_bottom) == (14.0, 20.0, 12.0)

    def test_margins_are_not_inherited(self):
        ul = LEGAL_STYLESHEET.resolve(BlockTag.UNORDERED_LIST)
        li = LEGAL_STYLESHEET.resolve(BlockTag.LIST_ITEM, ul)

        assert ul.padding_left == 36.0
        assert li.padding_left == 0.0
        assert (li.margin_top, li.margin_bottom) == (6.0, 6.0)
        assert li.font_family == LEGAL_FONT_FAMILY

    def test_inherited_text_properties(self):
        h1 = LEGAL_STYLESHEET.resolve(BlockTag.HEADING1)
        inner = LEGAL_STYLESHEET.resolve(BlockTag.OTHER, h1)

        assert inner.font_size == 18.0
        assert inner.text_align == "center"
        assert inner.margin_top == 0.0

    def test_unknown_tag_uses_unstyled_rule(self):
        assert LEGAL_STYLESHEET.rule_for(BlockTag.OTHER) == StyleRule()
        assert BlockTag.IMAGE in LEGAL_STYLESHEET

    def test_invalid_rules(self):
        with pytest.raises(StyleError):
            StyleSheet(StyleRule(), {BlockTag.PARAGRAPH: StyleRule(font_size=-1)})
        with pytest.raises(StyleError):
            StyleSheet(StyleRule(), {BlockTag.PARAGRAPH: StyleRule(margin_top=-2)})
        with pytest.raises(StyleError):
            StyleSheet(StyleRule(), {BlockTag.IMAGE: StyleRule(max_width=1.5)})

    def test_to_css(self):
        css = LEGAL_STYLESHEET.resolve(BlockTag.PARAGRAPH).to_css()

        assert "font-size: 12pt" in css
        assert "line-height: 2" in css
        assert "margin: 0pt 0 12pt 0" in css

    def test_dict_round_trip(self):
        style = LEGAL_STYLESHEET.resolve(BlockTag.IMAGE)
        assert StyleRule.from_dict(style.to_dict()) == style


class TestStyleNormalizer:
    """Test cases for StyleNormalizer."""

    def test_author_presentation_is_dropped(self):
        root = normalize('<p style="font-size: 40px" class="huge" align="center" id="intro">Hi</p>')
        [paragraph] = root.children

        assert paragraph.attributes == (("id", "intro"),)
        assert paragraph.style == LEGAL_STYLESHEET.resolve(BlockTag.PARAGRAPH, LEGAL_STYLESHEET.base)

    def test_same_tag_same_style(self):
        root = normalize('<p class="a">One</p><p style="color: red">Two</p>')
        first, second = root.children

        assert first.style == second.style

    def test_empty_paragraph_loses_bottom_margin(self):
        root = normalize("<p></p><p>Text</p>")
        empty, full = root.children

        assert empty.is_empty_paragraph
        assert empty.style.margin_bottom == 0.0
        assert full.style.margin_bottom == 12.0

    def test_inline_formatting_becomes_runs(self):
        root = normalize("<p>Plain <strong>bold <em>both</em></strong> end</p>")
        [paragraph] = root.children

        assert paragraph.runs == (
            TextRun("Plain "),
            TextRun("bold ", bold=True),
            TextRun("both", bold=True, italic=True),
            TextRun(" end"),
        )

    def test_whitespace_collapsed(self):
        [paragraph] = normalize("<p>  Hello \n   world  </p>").children

        assert paragraph.runs == (TextRun("Hello world"),)

    def test_line_breaks(self):
        [paragraph] = normalize("<p>A<br>B</p>").children

        assert [run.text for run in paragraph.runs] == ["A", "\n", "B"]

    def test_loose_text_gets_anonymous_block(self):
        root = normalize("Just text")

        [block] = root.children
        assert block.tag is BlockTag.OTHER
        assert block.text == "Just text"

    def test_mixed_container_content(self):
        [div] = normalize("<div>Intro<p>Para</p>Outro</div>").children

        assert [child.tag for child in div.children] == [BlockTag.OTHER, BlockTag.PARAGRAPH, BlockTag.OTHER]
        assert div.text == "IntroParaOutro"

    def test_inline_wrapper_around_blocks_is_opened(self):
        root = normalize("<span><p>First</p><p>Second</p></span>")

        assert [child.tag for child in root.children] == [BlockTag.PARAGRAPH, BlockTag.PARAGRAPH]

    def test_image_without_src_keeps_image_tag(self):
        [block] = normalize('<img alt="x">').children

        assert block.tag is BlockTag.IMAGE
        assert block.has_image
        assert block.style.margin_top == 0.0
        assert block.style.max_width is None

    def test_unknown_tags(self):
        [block] = normalize("<h3>Sub</h3>").children

        assert block.tag is BlockTag.OTHER
        assert block.source_tag == "h3"
        assert block.style.margin_bottom == 0.0

    def test_list_structure(self):
        [ol] = normalize("<ol><li>One</li><li>Two</li></ol>").children

        assert ol.tag is BlockTag.ORDERED_LIST
        assert [child.tag for child in ol.children] == [BlockTag.LIST_ITEM, BlockTag.LIST_ITEM]
        assert ol.children[0].style.line_height == 2.0

    def test_input_tree_not_modified(self):
        raw = parse_html('<p style="color: red">Text</p>')

        StyleNormalizer().normalize(raw)

        assert raw.children[0].attributes == {"style": "color: red"}

    def test_idempotent(self, sample_html):
        assert normalize(sample_html) == normalize(sample_html)

    def test_empty_input(self):
        assert normalize("").children == ()
        assert normalize(None).children == ()
