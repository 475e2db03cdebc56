"""
HTML exporter for paginated documents.

Renders the page list as same-order panels at the literal page geometry.
Preview decorations (page number, page-break badge) carry the
``page-decoration`` class and are hidden for print; print mode leaves them
out entirely. Every block is written with its canonical inline style so the
output looks the same wherever it is opened.
"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..engine.geometry import PageGeometry
from ..models.block import BlockNode, BlockTag, TextRun
from ..models.page import Page, PaginationResult
from ..styles.defaults import LEGAL_STYLESHEET, StyleSheet

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"^[a-z][a-z0-9]*$")


class HTMLPageExporter:
    """
    Exports a ``PaginationResult`` to a standalone HTML document.

    Handles page panels, canonical block styling and print CSS.
    """

    def __init__(self, geometry: Optional[PageGeometry] = None,
                 stylesheet: StyleSheet = LEGAL_STYLESHEET,
                 decorations: bool = True, title: str = "Document"):
        """
        Initialize HTML exporter.

        Args:
            geometry: Page geometry (US Letter with 1in margins by default)
            stylesheet: Stylesheet whose base style is applied to the page content
            decorations: Include page numbers and page-break badges (preview mode)
            title: Document title
        """
        self.geometry = geometry or PageGeometry.letter()
        self.stylesheet = stylesheet
        self.decorations = decorations
        self.title = title

    def export(self, result: PaginationResult, output_path: Union[str, Path]) -> bool:
        """
        Export pages to an HTML file.

        Args:
            result: Pagination result
            output_path: Output file path

        Returns:
            True if export successful, False otherwise
        """
        try:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(result), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to export pages to HTML: {e}")
            return False

        logger.info(f"Exported {result.page_label} to HTML: {output_path}")
        return True

    def render(self, result: PaginationResult) -> str:
        """Full HTML document with all pages."""
        panels = "\n".join(
            self.render_page(page, is_last=index == result.page_count - 1)
            for index, page in enumerate(result.pages)
        )
        return (
            "<!DOCTYPE html>\n"
            "<html>\n<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{html.escape(self.title)}</title>\n"
            f"<style>\n{self._generate_css()}\n</style>\n"
            "</head>\n<body>\n"
            f'<main class="pages" data-page-count="{result.page_count}" data-word-count="{result.word_count}">\n'
            f"{panels}\n"
            "</main>\n</body>\n</html>\n"
        )

    def render_page(self, page: Page, is_last: bool = True) -> str:
        blocks = "\n".join(self.render_block(block) for block in page.blocks)
        parts = [
            f'<section class="page{" placeholder" if page.is_placeholder else ""}" data-page="{page.number}">',
            f'<div class="page-content">\n{blocks}\n</div>',
        ]
        if self.decorations:
            parts.append(f'<div class="page-decoration page-number">Page {page.number}</div>')
            if not is_last:
                parts.append('<div class="page-decoration page-break">Page Break</div>')
        parts.append("</section>")
        return "\n".join(parts)

    def render_block(self, block: BlockNode) -> str:
        """Serialize a block with its canonical style inlined."""
        tag_name = self._tag_name(block)
        attributes = self._render_attributes(block)

        if block.tag is BlockTag.IMAGE:
            return f"<img{attributes}>"

        if block.children:
            inner = "".join(self.render_block(child) for child in block.children)
        else:
            inner = "".join(_render_run(run) for run in block.runs)
        return f"<{tag_name}{attributes}>{inner}</{tag_name}>"

    @staticmethod
    def _tag_name(block: BlockNode) -> str:
        if block.tag is not BlockTag.OTHER:
            return block.tag.html_name
        source = (block.source_tag or "").lower()
        if source in ("img", "body") or not _TAG_NAME_RE.match(source):
            return "div"
        return source

    @staticmethod
    def _render_attributes(block: BlockNode) -> str:
        parts: List[str] = []
        for name, value in block.attributes:
            if not _TAG_NAME_RE.match(name.replace("-", "")):
                continue
            parts.append(f' {name}="{html.escape(value, quote=True)}"')
        parts.append(f' style="{html.escape(block.style.to_css(), quote=True)}"')
        return "".join(parts)

    def _generate_css(self) -> str:
        geometry = self.geometry
        base = self.stylesheet.base
        return f"""
body {{ margin: 0; background: #f3f4f6; }}
.pages {{ display: flex; flex-direction: column; align-items: center; padding: 32px 0; }}
.page {{
  position: relative;
  width: {geometry.page_size.width:g}px;
  height: {geometry.page_size.height:g}px;
  padding: {geometry.margins.top:g}px {geometry.margins.right:g}px {geometry.margins.bottom:g}px {geometry.margins.left:g}px;
  box-sizing: border-box;
  overflow: hidden;
  background: #ffffff;
  border: 1px solid #d1d5db;
  box-shadow: 0 4px 12px rgba(0, 0, 0, 0.12);
  margin-bottom: 32px;
  page-break-after: always;
}}
.page-content {{ {base.to_css()}; height: 100%; }}
.page-content p:last-child {{ margin-bottom: 0 !important; }}
.page-decoration {{ position: absolute; font: 11px monospace; color: #9ca3af; pointer-events: none; }}
.page-number {{ bottom: 16px; right: 24px; }}
.page-break {{ bottom: -24px; left: 0; right: 0; text-align: center; color: #1d4ed8; }}
@page {{ size: letter; margin: 0; }}
@media print {{
  body {{ background: #ffffff; }}
  .pages {{ padding: 0; }}
  .page-decoration {{ display: none !important; }}
  .page {{ box-shadow: none !important; border: none !important; margin: 0 !important; }}
}}""".strip()


def _render_run(run: TextRun) -> str:
    if run.is_break:
        return "<br/>"
    text = html.escape(run.text, quote=False)
    if run.italic:
        text = f"<em>{text}</em>"
    if run.bold:
        text = f"<strong>{text}</strong>"
    return text


def render_pages_html(result: PaginationResult, print_mode: bool = False,
                      geometry: Optional[PageGeometry] = None) -> str:
    """Render pages for preview (with decorations) or print (without)."""
    return HTMLPageExporter(geometry=geometry, decorations=not print_mode).render(result)
