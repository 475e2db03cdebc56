"""Pagination engine: measurement, packing and the recompute controller."""

from .controller import ControllerState, PaginationController, count_words
from .geometry import (
    CONTENT_HEIGHT_PX,
    CONTENT_WIDTH_PX,
    MARGIN_PX,
    PAGE_HEIGHT_PX,
    PAGE_WIDTH_PX,
    Margins,
    PageGeometry,
    Size,
)
from .interfaces import DocumentSource, RenderingSink
from .layout_validator import LayoutValidator
from .measurement import (
    DelegatingMeasurementOracle,
    MeasurementOracle,
    MeasurementSurface,
    MetricsMeasurementOracle,
)
from .page_config import PLACEHOLDER_TEXT, PaginationConfig
from .page_packer import PagePacker, placeholder_block
from .segmenter import BlockSegmenter, is_content_bearing, segment_blocks

__all__ = [
    "ControllerState",
    "PaginationController",
    "count_words",
    "CONTENT_HEIGHT_PX",
    "CONTENT_WIDTH_PX",
    "MARGIN_PX",
    "PAGE_HEIGHT_PX",
    "PAGE_WIDTH_PX",
    "Margins",
    "PageGeometry",
    "Size",
    "DocumentSource",
    "RenderingSink",
    "LayoutValidator",
    "DelegatingMeasurementOracle",
    "MeasurementOracle",
    "MeasurementSurface",
    "MetricsMeasurementOracle",
    "PLACEHOLDER_TEXT",
    "PaginationConfig",
    "PagePacker",
    "placeholder_block",
    "BlockSegmenter",
    "is_content_bearing",
    "segment_blocks",
]
