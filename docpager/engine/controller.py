"""
Pagination controller - owns the recompute lifecycle.

Every document-change notification triggers one full synchronous pass::

    content -> StyleNormalizer -> BlockSegmenter -> MeasurementOracle (per block)
            -> PagePacker -> RenderingSink.publish(PaginationResult)

Nothing is carried over between passes except the last published result,
which stays on display when a pass fails.

Example:
    from docpager import HtmlDocument, PaginationController, CollectingSink

    document = HtmlDocument("<h1>Title</h1><p>Body text</p>")
    sink = CollectingSink()
    controller = PaginationController(document, sink)
    controller.attach()                 # initial pass
    document.set_html("<p>Edited</p>")  # triggers another pass
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from ..exceptions import MeasurementError
from ..models.block import BlockNode
from ..models.page import PaginationResult
from ..parser.html_parser import extract_text
from ..styles.style_normalizer import StyleNormalizer
from .interfaces import DocumentContent, DocumentSource, RenderingSink, Unsubscribe
from .layout_validator import LayoutValidator
from .measurement import MeasurementOracle, MetricsMeasurementOracle
from .page_config import PaginationConfig
from .page_packer import PagePacker, placeholder_block
from .segmenter import BlockSegmenter

logger = logging.getLogger(__name__)

_WHITESPACE_RUN_RE = re.compile(r"\s+")


def count_words(text: Optional[str]) -> int:
    """Number of non-empty tokens after splitting on whitespace runs."""
    if not text:
        return 0
    return sum(1 for token in _WHITESPACE_RUN_RE.split(text.strip()) if token)


class ControllerState(str, Enum):
    IDLE = "idle"
    COMPUTING = "computing"


class PaginationController:
    """
    Re-paginates the document on every change and publishes the pages.

    A change notification that arrives while a pass is running (for example
    from inside the sink) does not start a nested pass; it schedules exactly
    one follow-up pass that runs as soon as the current one finishes.
    """

    def __init__(
        self,
        source: DocumentSource,
        sink: RenderingSink,
        oracle: Optional[MeasurementOracle] = None,
        config: Optional[PaginationConfig] = None,
    ):
        self.source = source
        self.sink = sink
        self.oracle = oracle if oracle is not None else MetricsMeasurementOracle()
        self.config = config if config is not None else PaginationConfig()

        self.normalizer = StyleNormalizer(self.config.stylesheet)
        self.segmenter = BlockSegmenter()
        self.packer = PagePacker(
            self.config.capacity,
            placeholder=placeholder_block(self.config.placeholder_text, self.config.stylesheet),
        )

        self.state = ControllerState.IDLE
        self.last_result: Optional[PaginationResult] = None
        self.passes_completed = 0
        self.passes_failed = 0
        self._rerun_requested = False
        self._unsubscribe: Optional[Unsubscribe] = None

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------
    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> bool:
        """Subscribe to document changes and run the initial pass."""
        if self._unsubscribe is None:
            self._unsubscribe = self.source.subscribe(self.on_document_change)
            logger.debug("Controller attached to %r", self.source)
        return self.on_document_change()

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("Controller detached from %r", self.source)

    # ------------------------------------------------------------------
    # Recompute lifecycle
    # ------------------------------------------------------------------
    def on_document_change(self) -> bool:
        """
        Handle one change notification.

        Returns:
            True if a result was published (by this call or by the follow-up
            passes it ran); False if the pass failed or was deferred
        """
        if self.state is ControllerState.COMPUTING:
            logger.debug("Change during a pass; follow-up pass scheduled")
            self._rerun_requested = True
            return False

        published = False
        while True:
            self._rerun_requested = False
            self.state = ControllerState.COMPUTING
            try:
                published = self._run_pass()
            finally:
                self.state = ControllerState.IDLE
            if not self._rerun_requested:
                return published

    def _run_pass(self) -> bool:
        try:
            result, _ = self.paginate(self.source.get_content(), text=self.source.get_text())
            self.sink.publish(result)
        except MeasurementError as exc:
            self.passes_failed += 1
            logger.warning("Pagination pass aborted, keeping previous pages: %s", exc)
            return False
        except Exception:
            self.passes_failed += 1
            logger.exception("Pagination pass failed, keeping previous pages")
            return False

        self.last_result = result
        self.passes_completed += 1
        return True

    def paginate(
        self, content: DocumentContent, text: Optional[str] = None
    ) -> Tuple[PaginationResult, List[BlockNode]]:
        """
        Run one full pass over a content snapshot without publishing it.

        Args:
            content: HTML or parsed element tree
            text: Plain text for the word count (derived from ``content`` when omitted)

        Returns:
            (result, segmented blocks)

        Raises:
            MeasurementUnavailableError: the measurement surface could not be created
        """
        root = self.normalizer.normalize(content)
        blocks = self.segmenter.segment(root)

        with self.oracle.open_surface(self.config.content_width) as surface:
            measured = surface.measure_all(blocks)

        pages = self.packer.pack(measured)
        word_count = count_words(text if text is not None else extract_text(content))
        result = PaginationResult(pages=tuple(pages), word_count=word_count, capacity=self.config.capacity)

        logger.debug(
            "Pass: %d blocks -> %s, %d words", len(blocks), result.page_label, word_count
        )

        if self.config.validate:
            is_valid, errors, warnings = LayoutValidator(result, blocks).validate()
            for warning in warnings:
                logger.debug("Layout warning: %s", warning)
            if not is_valid:
                logger.error("Layout invariants violated: %s", "; ".join(errors))

        return result, blocks
