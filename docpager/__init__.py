"""
docpager - live pagination engine for rich-text editors.

Turns the editor's HTML into fixed-size pages that match print output:
content is re-styled with a canonical stylesheet, split into top-level
blocks, measured at the page content width and packed greedily onto pages.

Quick Start:
    from docpager import HtmlDocument, PaginationController, CollectingSink

    document = HtmlDocument("<h1>Agreement</h1><p>The parties agree...</p>")
    sink = CollectingSink()
    PaginationController(document, sink).attach()

    result = sink.latest
    print(result.page_label, result.word_count)
"""

from .version import __version__, __version_info__

from .exceptions import (
    DocPagerError,
    LayoutError,
    MeasurementError,
    MeasurementUnavailableError,
    ParsingError,
    RenderingError,
    StyleError,
)

from .document import FileDocument, HtmlDocument
from .engine import (
    DelegatingMeasurementOracle,
    LayoutValidator,
    MeasurementOracle,
    MetricsMeasurementOracle,
    PageGeometry,
    PagePacker,
    PaginationConfig,
    PaginationController,
    count_words,
)
from .export import CollectingSink, HTMLPageExporter, HtmlPageSink, render_pages_html
from .models import BlockNode, BlockTag, MeasuredBlock, Page, PaginationResult, StyleRule, TextRun
from .parser import extract_text, parse_html
from .styles import LEGAL_STYLESHEET, StyleNormalizer, StyleSheet, normalize

__all__ = [
    "__version__",
    "__version_info__",
    "DocPagerError",
    "LayoutError",
    "MeasurementError",
    "MeasurementUnavailableError",
    "ParsingError",
    "RenderingError",
    "StyleError",
    "FileDocument",
    "HtmlDocument",
    "DelegatingMeasurementOracle",
    "LayoutValidator",
    "MeasurementOracle",
    "MetricsMeasurementOracle",
    "PageGeometry",
    "PagePacker",
    "PaginationConfig",
    "PaginationController",
    "count_words",
    "CollectingSink",
    "HTMLPageExporter",
    "HtmlPageSink",
    "render_pages_html",
    "BlockNode",
    "BlockTag",
    "MeasuredBlock",
    "Page",
    "PaginationResult",
    "StyleRule",
    "TextRun",
    "extract_text",
    "parse_html",
    "LEGAL_STYLESHEET",
    "StyleNormalizer",
    "StyleSheet",
    "normalize",
]
