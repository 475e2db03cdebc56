"""
Rich console output for docpager.

Colorful logging through ``RichHandler`` and summary tables for the CLI.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..models.page import PaginationResult


def setup_rich_logging(level: str = "INFO", console: Optional[Console] = None) -> Console:
    """
    Route the root logger through a rich handler.

    Args:
        level: Log level
        console: Console to log to (stderr console by default)

    Returns:
        The console used by the handler
    """
    console = console or Console(stderr=True)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)
    return console


def build_summary_table(result: PaginationResult, title: str = "Pagination") -> Table:
    """Per-page table: page number, block count, used height and fill ratio."""
    table = Table(title=f"{title} - {result.page_label}, {result.word_count} words")
    table.add_column("Page", style="cyan", justify="right")
    table.add_column("Blocks", justify="right")
    table.add_column("Height (px)", style="magenta", justify="right")
    table.add_column("Fill", justify="right")

    for page in result.pages:
        fill = page.height / result.capacity if result.capacity else 0.0
        style = "red" if page.is_overflowing(result.capacity) else None
        table.add_row(
            str(page.number),
            "placeholder" if page.is_placeholder else str(len(page.measured)),
            f"{page.height:.1f}",
            f"{fill:.0%}",
            style=style,
        )
    return table


def print_pagination_summary(result: PaginationResult, console: Optional[Console] = None,
                             title: str = "Pagination") -> None:
    """Print the summary table for a pagination result."""
    (console or Console()).print(build_summary_table(result, title=title))
