#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for the File Catalog tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import (DEFAULT_CATALOG_FILE, DEFAULT_SEARCH_MIN_LENGTH, DEFAULT_SEARCH_MODE,
                     MAX_RESULTS, SEARCH_MODES)
from .commands.duplicates import cmd_duplicates
from .commands.scan import cmd_scan_dirs
from .commands.search import cmd_file_search, cmd_term_search
from .commands.stats import cmd_show_stats
from .database.manager import CatalogStore
from .errors import CatalogError
from .jsonio import enable_json_logging, error
from .utils.console import Console


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="file-catalog",
        description="Catalog files under directory roots and find duplicates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Catalog two trees
  %(prog)s --catalog files.csv scan-dir /mnt/photos /mnt/backup

  # Substring search on name terms, exact search
  %(prog)s --catalog files.csv ts holiday 2019
  %(prog)s --catalog files.csv ts --mode fast holiday

  # Files named like a given file
  %(prog)s --catalog files.csv fs /mnt/photos/holiday-2019-beach.jpg

  # Review duplicates interactively
  %(prog)s --catalog files.csv duplicates --search-min-length 10
        """
    )

    parser.add_argument("--catalog", default=DEFAULT_CATALOG_FILE,
                        help=f"Catalog CSV file (default: {DEFAULT_CATALOG_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _add_scan_parser(subparsers)
    _add_search_parsers(subparsers)
    _add_duplicates_parser(subparsers)
    _add_stats_parser(subparsers)

    return parser


def _add_scan_parser(subparsers):
    scan_parser = subparsers.add_parser("scan-dir", help="Scan directories and store them in the catalog")
    scan_parser.add_argument("roots", nargs="+", metavar="ROOT",
                             help="Directory to scan")
    scan_parser.add_argument("--no-progress", action="store_true",
                             help="Do not show a progress bar while hashing")
    scan_parser.add_argument("--json", action="store_true", help="Output as JSON")


def _add_search_parsers(subparsers):
    term_parser = subparsers.add_parser("term-search", aliases=["ts"],
                                        help="Search records by name terms")
    term_parser.add_argument("terms", nargs="+", metavar="TERM", help="Search term")

    file_parser = subparsers.add_parser("file-search", aliases=["fs"],
                                        help="Search records named like a file")
    file_parser.add_argument("file", help="File whose name terms are searched for")

    for search_parser in (term_parser, file_parser):
        search_parser.add_argument("--mode", choices=SEARCH_MODES, default=DEFAULT_SEARCH_MODE,
                                   help="Find only exact search terms (fast) "
                                        "or search by contains (slow, default)")
        search_parser.add_argument("--limit", type=positive_int, default=MAX_RESULTS,
                                   help=f"Maximum results to show (default: {MAX_RESULTS})")
        search_parser.add_argument("--json", action="store_true", help="Output as JSON")


def _add_duplicates_parser(subparsers):
    dup_parser = subparsers.add_parser("duplicates", aliases=["d"],
                                       help="Review duplicate candidates and delete files")
    dup_parser.add_argument("--search-min-length", type=int, default=DEFAULT_SEARCH_MIN_LENGTH,
                            help="Shortest shared search term that makes a candidate group "
                                 f"(default: {DEFAULT_SEARCH_MIN_LENGTH})")


def _add_stats_parser(subparsers):
    stats_parser = subparsers.add_parser("stats", aliases=["s"], help="Show catalog statistics")
    stats_parser.add_argument("--search-min-length", type=int, default=DEFAULT_SEARCH_MIN_LENGTH,
                              help="Shortest search term counted in the length distribution "
                                   f"(default: {DEFAULT_SEARCH_MIN_LENGTH})")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")


COMMAND_ALIASES = {"ts": "term-search", "fs": "file-search", "d": "duplicates", "s": "stats"}


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    command = COMMAND_ALIASES.get(args.command, args.command)
    as_json = getattr(args, 'json', False)

    if as_json:
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)

    catalog_path = Path(args.catalog)
    logging.info("Using catalog: %s", catalog_path)

    # Human-readable lines go to stderr when stdout carries JSON.
    console = Console(out=sys.stderr) if as_json else Console()
    show_progress = (command == "scan-dir" and not as_json
                     and not args.no_progress and sys.stderr.isatty())
    store = CatalogStore(catalog_path, console=console, show_progress=show_progress)

    try:
        if command == "scan-dir":
            logging.info("Scanning %d root(s).", len(args.roots))
            return cmd_scan_dirs(store, args.roots, as_json)

        elif command == "term-search":
            logging.info("Searching terms %s (mode=%s)", args.terms, args.mode)
            return cmd_term_search(store, args.terms, args.mode, args.limit, as_json)

        elif command == "file-search":
            logging.info("Searching terms of %s (mode=%s)", args.file, args.mode)
            return cmd_file_search(store, args.file, args.mode, args.limit, as_json)

        elif command == "duplicates":
            logging.info("Reviewing duplicates (search min length=%d)", args.search_min_length)
            return cmd_duplicates(store, args.search_min_length)

        elif command == "stats":
            logging.info("Showing catalog stats (search min length=%d)", args.search_min_length)
            return cmd_show_stats(store, args.search_min_length, as_json)

    except KeyboardInterrupt:
        if as_json:
            return error(command, "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    except CatalogError as e:
        if as_json:
            debug_info = {"exception_type": type(e).__name__} if args.verbose else None
            return error(command, str(e), debug=debug_info, code=1)
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        return 1

    parser.error(f"unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
