"""Tests for unit conversion and logging helpers."""

import io
import logging

import pytest
from rich.console import Console

from docpager.engine.page_packer import PagePacker
from docpager.models.page import PaginationResult
from docpager.utils.logger import configure_logging
from docpager.utils.rich_logger import build_summary_table, print_pagination_summary
from docpager.utils.units import inches_to_px, parse_length, pt_to_px, px_to_pt


class TestUnits:
    """Test cases for unit conversion."""

    def test_points_and_inches(self):
        assert pt_to_px(12) == pytest.approx(16)
        assert px_to_pt(16) == pytest.approx(12)
        assert inches_to_px(8.5) == 816
        assert pt_to_px(None) == 0.0

    @pytest.mark.parametrize("value, expected", [
        ("300", 300.0),
        ("300px", 300.0),
        (" 12pt ", 16.0),
        ("2in", 192.0),
        (150, 150.0),
    ])
    def test_parse_length(self, value, expected):
        assert parse_length(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [None, "50%", "auto", "", "0", "-4", 0])
    def test_parse_length_rejects(self, value):
        assert parse_length(value) is None


class TestLogging:
    """Test cases for logging configuration."""

    def test_configure_logging_level(self):
        configure_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "docpager.log"

        configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("docpager.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
        for handler in logging.getLogger().handlers:
            handler.close()


class TestRichSummary:
    """Test cases for the rich pagination summary."""

    @pytest.fixture
    def result(self, measured):
        pages = PagePacker(864).pack(measured(("A", 500), ("B", 500), ("C", 1000)))
        return PaginationResult(pages=tuple(pages), word_count=3, capacity=864)

    def test_table_has_row_per_page(self, result):
        table = build_summary_table(result)

        assert table.row_count == 3
        assert "3 pages" in table.title

    def test_print_summary(self, result):
        buffer = io.StringIO()

        print_pagination_summary(result, console=Console(file=buffer, width=120), title="contract")

        output = buffer.getvalue()
        assert "contract" in output
        assert "3 words" in output
