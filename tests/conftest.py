"""
Pytest configuration for docpager
"""

import base64
import io
import logging
import struct
import sys
import zlib
from pathlib import Path

import pytest
from PIL import Image

from docpager.engine.measurement import DelegatingMeasurementOracle
from docpager.models.block import BlockNode, BlockTag, TextRun
from docpager.models.page import MeasuredBlock


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    # Cleanup after test
    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def make_png_bytes(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 200, 200)).save(buffer, format="PNG")
    return buffer.getvalue()


def make_png_header(width: int, height: int) -> bytes:
    """PNG with a valid IHDR for the given size and no pixel data."""
    def chunk(kind: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(kind + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IDAT", b"") + chunk(b"IEND", b"")


def make_data_uri(width: int, height: int) -> str:
    return "data:image/png;base64," + base64.b64encode(make_png_bytes(width, height)).decode("ascii")


@pytest.fixture
def png_data_uri():
    """Factory for PNG data URIs of a given pixel size."""
    return make_data_uri


@pytest.fixture
def make_block():
    """Factory for simple text blocks."""
    def _make(text: str = "Block", tag: BlockTag = BlockTag.PARAGRAPH) -> BlockNode:
        return BlockNode(tag=tag, runs=(TextRun(text),), source_tag=tag.html_name)
    return _make


@pytest.fixture
def measured():
    """Factory turning (label, height) pairs into measured blocks."""
    def _measured(*items):
        return [
            MeasuredBlock(BlockNode(tag=BlockTag.PARAGRAPH, runs=(TextRun(label),)), float(height))
            for label, height in items
        ]
    return _measured


@pytest.fixture
def fixed_height_oracle():
    """
    Oracle that reads each block's height from a ``data-height`` attribute
    (default 100px), standing in for a host layout pass.
    """
    calls = []

    def measure(block: BlockNode, content_width: float) -> float:
        calls.append((block, content_width))
        return float(block.get_attribute("data-height", "100"))

    oracle = DelegatingMeasurementOracle(measure)
    oracle.calls = calls
    return oracle


@pytest.fixture
def sample_html():
    """Small legal document with headings, a list and formatted text."""
    return (
        "<h1>Services Agreement</h1>"
        "<p>This agreement is made between <strong>Acme Corp</strong> and the Client.</p>"
        "<h2>1. Scope</h2>"
        "<ul><li>Drafting</li><li>Review</li></ul>"
        "<p><em>Signed</em> on the date below.</p>"
    )


@pytest.fixture
def png_bytes():
    """Factory for encoded PNG images of a given pixel size."""
    return make_png_bytes


@pytest.fixture
def oversized_png_uri():
    """Data URI of a 20000x10000 PNG header, past Pillow's decompression bomb limit."""
    return "data:image/png;base64," + base64.b64encode(make_png_header(20000, 10000)).decode("ascii")
