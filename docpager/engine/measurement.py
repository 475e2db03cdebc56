"""
Measurement oracle - occupied height of a block at a fixed content width.

The oracle is the single layout-engine dependent step of a pagination pass.
It is exposed through a narrow interface so the embedded metrics backend
can be swapped for a host layout engine (e.g. a browser) without touching
the rest of the pipeline.

Measurement happens on a ``MeasurementSurface`` acquired for one pass and
released when the pass ends::

    with oracle.open_surface(content_width) as surface:
        heights = [surface.measure(block) for block in blocks]
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import MeasurementError, MeasurementUnavailableError
from ..models.block import BlockNode, BlockTag
from ..models.page import MeasuredBlock
from .image_metrics import ImageMetrics
from .line_breaker import LineBreaker
from .text_metrics import TextMetricsEngine

logger = logging.getLogger(__name__)

MeasureFunction = Callable[[BlockNode, float], float]


class MeasurementSurface(ABC):
    """Scratch measurement context owned by one pagination pass."""

    def __init__(self, content_width: float):
        self.content_width = content_width
        self.closed = False

    def measure(self, block: BlockNode) -> float:
        """Occupied height of ``block``: box height plus its top and bottom margins."""
        if self.closed:
            raise MeasurementError("Measurement surface already released")
        return self._measure(block)

    def measure_all(self, blocks: Iterable[BlockNode]) -> List[MeasuredBlock]:
        return [MeasuredBlock(block=block, height=self.measure(block)) for block in blocks]

    @abstractmethod
    def _measure(self, block: BlockNode) -> float:
        ...

    def _release(self) -> None:
        """Free backend resources; called exactly once."""

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._release()

    def __enter__(self) -> "MeasurementSurface":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


class MeasurementOracle(ABC):
    """Capability ``measure(block, content_width) -> height``."""

    name = "oracle"

    @abstractmethod
    def open_surface(self, content_width: float) -> MeasurementSurface:
        """
        Acquire a measurement surface.

        Raises:
            MeasurementUnavailableError: the surface cannot be created
        """

    def measure(self, block: BlockNode, content_width: float) -> float:
        with self.open_surface(content_width) as surface:
            return surface.measure(block)

    def measure_all(self, blocks: Sequence[BlockNode], content_width: float) -> List[MeasuredBlock]:
        with self.open_surface(content_width) as surface:
            return surface.measure_all(blocks)


@dataclass(slots=True)
class BoxLayout:
    """Border-box height plus the margins that stick out of it after collapsing."""

    height: float
    margin_top: float
    margin_bottom: float


class MetricsSurface(MeasurementSurface):
    """
    Embedded layout backend.

    Text is wrapped with ReportLab font metrics, images use their intrinsic
    size scaled to the available width, and containers stack their children
    with CSS vertical margin collapsing.
    """

    def __init__(self, content_width: float, text_metrics: TextMetricsEngine, image_metrics: ImageMetrics):
        super().__init__(content_width)
        self.text_metrics = text_metrics
        self.image_metrics = image_metrics
        self.line_breaker = LineBreaker(text_metrics)

    def _measure(self, block: BlockNode) -> float:
        box = self.layout(block, self.content_width)
        # Own margins only: margins collapsed in from children are not counted
        return block.style.margin_top_px + box.height + block.style.margin_bottom_px

    def layout(self, block: BlockNode, width: float) -> BoxLayout:
        style = block.style
        margin_top = style.margin_top_px
        margin_bottom = style.margin_bottom_px

        if block.tag is BlockTag.IMAGE:
            return BoxLayout(self._image_height(block, width), margin_top, margin_bottom)

        if block.children:
            inner_width = max(width - style.padding_left_px, 0.0)
            height, leading, trailing = self._stack(block.children, inner_width)
            if height == 0:
                merged = max(margin_top, margin_bottom, leading, trailing)
                return BoxLayout(0.0, merged, merged)
            return BoxLayout(height, max(margin_top, leading), max(margin_bottom, trailing))

        if block.runs:
            lines = self.line_breaker.break_runs(block.runs, width, style)
            return BoxLayout(len(lines) * self.text_metrics.get_line_height(style), margin_top, margin_bottom)

        return BoxLayout(0.0, margin_top, margin_bottom)

    def _stack(self, children: Sequence[BlockNode], width: float) -> Tuple[float, float, float]:
        """
        Stack children vertically.

        Returns:
            (height, leading margin, trailing margin) where the leading and
            trailing margins collapse through the parent's top and bottom edges
        """
        height = 0.0
        leading = 0.0
        pending = 0.0
        seen_content = False

        for child in children:
            box = self.layout(child, width)
            if box.height == 0:
                # Empty boxes let adjoining margins collapse through them
                pending = max(pending, box.margin_top, box.margin_bottom)
                continue
            if seen_content:
                height += max(pending, box.margin_top)
            else:
                leading = max(pending, box.margin_top)
                seen_content = True
            height += box.height
            pending = box.margin_bottom

        if not seen_content:
            return 0.0, pending, pending
        return height, leading, pending

    def _image_height(self, block: BlockNode, width: float) -> float:
        size = self.image_metrics.rendered_size(block, width)
        if size is not None:
            return size[1]
        alt = (block.get_attribute("alt") or "").strip()
        if not alt:
            logger.debug("Image with unknown size and no alt text measured as 0px")
            return 0.0
        lines = self.line_breaker.break_text(alt, width, block.style)
        return len(lines) * self.text_metrics.get_line_height(block.style)

    def _release(self) -> None:
        self.text_metrics.clear()
        self.image_metrics.clear()


class MetricsMeasurementOracle(MeasurementOracle):
    """Oracle backed by ReportLab font metrics and Pillow image headers."""

    name = "metrics"

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Args:
            base_dir: Directory relative image paths are resolved against
        """
        self.base_dir = base_dir

    def open_surface(self, content_width: float) -> MeasurementSurface:
        if not content_width or content_width <= 0 or math.isnan(content_width):
            raise MeasurementUnavailableError(
                "Cannot create measurement surface", f"content width {content_width!r}"
            )
        return MetricsSurface(content_width, TextMetricsEngine(), ImageMetrics(self.base_dir))


class _DelegatingSurface(MeasurementSurface):
    def __init__(self, content_width: float, measure_fn: MeasureFunction):
        super().__init__(content_width)
        self.measure_fn = measure_fn

    def _measure(self, block: BlockNode) -> float:
        height = float(self.measure_fn(block, self.content_width))
        if math.isnan(height) or height < 0:
            raise MeasurementError("Host layout returned an invalid height", repr(height))
        return height


class DelegatingMeasurementOracle(MeasurementOracle):
    """
    Oracle that hands measurement to a host layout pass.

    ``measure_fn(block, content_width)`` must return the block's occupied
    height (box height plus vertical margins). Without a callable the
    surface is unavailable.
    """

    name = "host"

    def __init__(self, measure_fn: Optional[MeasureFunction]):
        self.measure_fn = measure_fn

    def open_surface(self, content_width: float) -> MeasurementSurface:
        if self.measure_fn is None:
            raise MeasurementUnavailableError("Host layout pass is not available")
        return _DelegatingSurface(content_width, self.measure_fn)
