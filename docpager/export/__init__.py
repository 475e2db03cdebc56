"""Rendering of paginated output."""

from .html_exporter import HTMLPageExporter, render_pages_html
from .sinks import CollectingSink, HtmlPageSink

__all__ = ["HTMLPageExporter", "render_pages_html", "CollectingSink", "HtmlPageSink"]
