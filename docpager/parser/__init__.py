"""Parsing of the editor's HTML serialization."""

from .html_parser import HTMLContentParser, RawElement, extract_text, parse_html

__all__ = ["HTMLContentParser", "RawElement", "extract_text", "parse_html"]
