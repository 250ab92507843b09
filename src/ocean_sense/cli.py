"""
Command-line interface for Ocean Sense.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import math
import sys
from pathlib import Path

from ocean_sense import __version__
from ocean_sense.analysis import aggregate_by_year, correlate, pearson_r
from ocean_sense.config import get_settings
from ocean_sense.flows.build import SITE_DIR, build_all, load_board, load_registry
from ocean_sense.flows.fetch import fetch_all
from ocean_sense.renderers.export_csv import build_export_csv
from ocean_sense.schemas import Feed, FilterState
from ocean_sense.services import assistant


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    settings = get_settings()
    parser.add_argument("--species", default=settings.default_species, help="Scientific name")
    parser.add_argument("--category", default=settings.default_category, help="Registry category")
    parser.add_argument("--season", default=settings.default_season, help="Cyclone season")
    parser.add_argument(
        "--years",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        default=None,
        help="Inclusive year range (default: unbounded)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ocean-sense",
        description="Fisheries, cyclone and ocean-parameter explorer for the North Indian Ocean",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - fetch data and build site
    subparsers.add_parser("refresh", help="Fetch data and build site")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    # 'export' command - filtered CSV from cached feeds
    export_parser = subparsers.add_parser("export", help="Export filtered records as CSV")
    _add_filter_arguments(export_parser)
    export_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )

    # 'correlate' command - cyclones vs fisheries per year
    correlate_parser = subparsers.add_parser(
        "correlate", help="Align cyclone counts with fisheries records per year"
    )
    _add_filter_arguments(correlate_parser)

    # 'ask' command - assistant passthrough
    ask_parser = subparsers.add_parser("ask", help="Ask the Neritic assistant a question")
    ask_parser.add_argument("question", nargs="+", help="Question text")

    return parser


def _filter_from_args(args: argparse.Namespace) -> FilterState:
    return FilterState(
        species=args.species,
        category=args.category,
        season=args.season,
        year_range=tuple(args.years) if args.years else None,
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Fisheries source: {settings.fisheries_source}")
    print(f"Cyclone tracks: {settings.cyclone_tracks_url or 'not configured'}")
    print(f"Ocean parameters: {settings.ocean_parameters_url or 'not configured'}")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    settings = get_settings()
    region = settings.region
    print(f"Fetching feeds for region {region.as_wkt()}...")
    fetch_all()

    print("Building site...")
    build_all()

    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    if not SITE_DIR.exists():
        print("No site directory found. Run 'ocean-sense refresh' first.", file=sys.stderr)
        return 1

    handler = http.server.SimpleHTTPRequestHandler
    handler.directory = str(SITE_DIR)  # type: ignore[attr-defined]

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Handle the 'export' command: write filtered records as CSV."""
    board = load_board()
    text = build_export_csv(board.records(), _filter_from_args(args), load_registry())

    if args.output is None:
        sys.stdout.write(text)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text, encoding="utf-8")
    print(f"Export written: {args.output}")
    return 0


def cmd_correlate(args: argparse.Namespace) -> int:
    """Handle the 'correlate' command: print aligned samples and Pearson r."""
    state = _filter_from_args(args)
    board = load_board()

    driver = aggregate_by_year(board.records(Feed.CYCLONE_SEASONS), state)
    if not driver:
        print("No cyclone data for this filter. Run 'ocean-sense refresh' first.", file=sys.stderr)
        return 1

    response = aggregate_by_year(board.records(Feed.FISHERIES), state, load_registry())
    samples = correlate(driver, response, state.year_range)

    print("year,cyclones,fisheries")
    for sample in samples:
        print(f"{sample.year},{sample.x:g},{sample.y:g}")

    r = pearson_r(samples)
    print(f"Pearson r: {'n/a' if math.isnan(r) else f'{r:.3f}'} ({len(samples)} years)")
    return 0


def cmd_ask(args: argparse.Namespace) -> int:
    """Handle the 'ask' command: forward a question to the assistant."""
    result = assistant.ask(" ".join(args.question))
    print(result.reply)
    return 0 if result.ok else 1


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if getattr(args, "debug", False):
        print(f"Debug mode enabled. Settings: {get_settings()}")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
        "export": cmd_export,
        "correlate": cmd_correlate,
        "ask": cmd_ask,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
