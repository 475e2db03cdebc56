"""Rendering sinks: the display side of the controller contract."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..exceptions import RenderingError
from ..models.page import PaginationResult
from .html_exporter import HTMLPageExporter

logger = logging.getLogger(__name__)


class CollectingSink:
    """Keeps every published result; useful for embedding and tests."""

    def __init__(self) -> None:
        self.results: List[PaginationResult] = []

    def publish(self, result: PaginationResult) -> None:
        self.results.append(result)

    @property
    def latest(self) -> Optional[PaginationResult]:
        return self.results[-1] if self.results else None

    def __len__(self) -> int:
        return len(self.results)


class HtmlPageSink:
    """Renders each result to HTML, optionally writing it to a file."""

    def __init__(self, exporter: Optional[HTMLPageExporter] = None,
                 output_path: Optional[Union[str, Path]] = None):
        self.exporter = exporter or HTMLPageExporter()
        self.output_path = Path(output_path) if output_path else None
        self.html: Optional[str] = None
        self.result: Optional[PaginationResult] = None

    def publish(self, result: PaginationResult) -> None:
        rendered = self.exporter.render(result)
        if self.output_path is not None:
            try:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self.output_path.write_text(rendered, encoding="utf-8")
            except OSError as exc:
                raise RenderingError(f"Cannot write pages to {self.output_path}", str(exc)) from exc
            logger.info("Wrote %s (%d words) to %s", result.page_label, result.word_count, self.output_path)
        self.html = rendered
        self.result = result
