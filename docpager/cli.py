"""
Command-line interface for docpager.

Usage:
    docpager paginate input.html --output pages.html
    docpager paginate input.html --print --output print.html
    docpager paginate input.html --json
    docpager info input.html
    docpager watch input.html --output pages.html
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from rich.console import Console


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from .utils.logger import LOG_LEVELS

    parser = argparse.ArgumentParser(
        prog="docpager",
        description="docpager - live pagination of rich-text documents onto fixed-size pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docpager paginate contract.html --output pages.html
  docpager paginate contract.html --print --output print.html
  docpager paginate contract.html --json
  docpager info contract.html
  docpager watch contract.html --output pages.html
  docpager version
        """,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging with rich output"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level when not verbose (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this rotating file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Paginate command
    paginate_parser = subparsers.add_parser("paginate", help="Paginate an HTML document")
    paginate_parser.add_argument("input", help="Input HTML file")
    paginate_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .pages.html or .pages.json)"
    )
    paginate_parser.add_argument(
        "--json",
        action="store_true",
        help="Write the page summary as JSON instead of paged HTML"
    )
    paginate_parser.add_argument(
        "--print",
        dest="print_mode",
        action="store_true",
        help="Print mode: omit page numbers and page-break badges"
    )

    # Info command
    info_parser = subparsers.add_parser("info", help="Show page and word counts")
    info_parser.add_argument("input", help="Input HTML file")
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    # Watch command
    watch_parser = subparsers.add_parser("watch", help="Re-paginate whenever the file changes")
    watch_parser.add_argument("input", help="Input HTML file")
    watch_parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output HTML file, rewritten after every change"
    )
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=0.5,
        help="Polling interval in seconds (default: 0.5)"
    )
    watch_parser.add_argument(
        "--print",
        dest="print_mode",
        action="store_true",
        help="Print mode: omit page numbers and page-break badges"
    )

    # Version command
    subparsers.add_parser("version", help="Show version information")

    return parser


def _build_config(args):
    from .engine.page_config import PaginationConfig

    # Page geometry is fixed; --verbose also checks every result
    return PaginationConfig(validate=args.verbose)


def _load_document(input_path: Path):
    from .document import FileDocument

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return None
    return FileDocument(input_path)


def cmd_paginate(args):
    """Handle paginate command."""
    from .engine.controller import PaginationController
    from .engine.measurement import MetricsMeasurementOracle
    from .export import CollectingSink, HTMLPageExporter

    input_path = Path(args.input)
    document = _load_document(input_path)
    if document is None:
        return 1

    config = _build_config(args)

    sink = CollectingSink()
    controller = PaginationController(
        document, sink, oracle=MetricsMeasurementOracle(base_dir=input_path.parent), config=config
    )
    print(f"📄 Paginating: {input_path}")
    if not controller.attach():
        print("Error: Pagination failed", file=sys.stderr)
        return 1
    result = sink.latest

    if args.json:
        output_path = Path(args.output) if args.output else input_path.with_suffix(".pages.json")
        output_path.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    else:
        output_path = Path(args.output) if args.output else input_path.with_suffix(".pages.html")
        exporter = HTMLPageExporter(
            geometry=config.geometry,
            stylesheet=config.stylesheet,
            decorations=not args.print_mode,
            title=input_path.stem,
        )
        if not exporter.export(result, output_path):
            print(f"Error: Cannot write {output_path}", file=sys.stderr)
            return 1

    print(f"✅ Saved: {output_path}")
    print(f"   {result.page_label}, {result.word_count} words")
    return 0


def cmd_info(args):
    """Handle info command."""
    from .engine.controller import PaginationController
    from .engine.measurement import MetricsMeasurementOracle
    from .export import CollectingSink
    from .utils.rich_logger import print_pagination_summary

    input_path = Path(args.input)
    document = _load_document(input_path)
    if document is None:
        return 1

    config = _build_config(args)

    sink = CollectingSink()
    controller = PaginationController(
        document, sink, oracle=MetricsMeasurementOracle(base_dir=input_path.parent), config=config
    )
    if not controller.attach():
        print("Error: Pagination failed", file=sys.stderr)
        return 1
    result = sink.latest

    if args.json:
        info = {
            "file": str(input_path),
            "size_bytes": input_path.stat().st_size,
            **result.to_dict(),
        }
        print(json.dumps(info, indent=2, ensure_ascii=False))
    else:
        print_pagination_summary(result, console=Console(), title=input_path.name)

    return 0


def cmd_watch(args):
    """Handle watch command."""
    from .engine.controller import PaginationController
    from .engine.measurement import MetricsMeasurementOracle
    from .exceptions import DocPagerError
    from .export import HTMLPageExporter, HtmlPageSink

    input_path = Path(args.input)
    document = _load_document(input_path)
    if document is None:
        return 1

    config = _build_config(args)

    exporter = HTMLPageExporter(
        geometry=config.geometry,
        stylesheet=config.stylesheet,
        decorations=not args.print_mode,
        title=input_path.stem,
    )
    sink = HtmlPageSink(exporter=exporter, output_path=args.output)
    controller = PaginationController(
        document, sink, oracle=MetricsMeasurementOracle(base_dir=input_path.parent), config=config
    )

    print(f"👀 Watching: {input_path} (Ctrl+C to stop)")
    controller.attach()
    try:
        while True:
            time.sleep(args.interval)
            try:
                changed = document.poll()
            except DocPagerError as e:
                print(f"Error: {e}", file=sys.stderr)
                continue
            if changed and sink.result is not None:
                print(f"🔄 {sink.result.page_label}, {sink.result.word_count} words")
    except KeyboardInterrupt:
        print("Stopped")
    finally:
        controller.detach()

    return 0


def cmd_version(args=None):
    """Handle version command."""
    from .version import __version__
    print(f"docpager v{__version__}")
    print("Live pagination engine for rich-text editors")
    return 0


def main(argv=None):
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        from .utils.rich_logger import setup_rich_logging
        setup_rich_logging("DEBUG")
        if args.log_file:
            from .utils.logger import add_file_handler
            add_file_handler(logging.getLogger(), args.log_file, "DEBUG")
    else:
        from .utils.logger import configure_logging
        configure_logging(args.log_level, log_file=args.log_file)

    if args.command == "paginate":
        return cmd_paginate(args)
    elif args.command == "info":
        return cmd_info(args)
    elif args.command == "watch":
        return cmd_watch(args)
    elif args.command == "version":
        return cmd_version(args)

    # No command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
