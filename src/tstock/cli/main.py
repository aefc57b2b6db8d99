#!/usr/bin/env python3
"""
Print a quote table for every security in a watchlist file.

    tstock watchlist.json

Exit status is 1 when the file is missing or unreadable or the configuration is
invalid, 0 otherwise, even if some quotes could not be fetched.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from tstock.cli.table import render_table
from tstock.cli.watchlist import WatchlistError, load_watchlist
from tstock.config.state import get_config
from tstock.infrastructure.observability import get_cli_logger, setup_logging
from tstock.ingestion.service import run_quotes

EXIT_OK = 0
EXIT_USAGE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tstock", description="Show Hexun quotes for a watchlist"
    )
    parser.add_argument("filename", nargs="?", help="JSON watchlist file")
    parser.add_argument(
        "--config-dir", default=None, help="Directory with hexun.yaml/logging.yaml"
    )
    parser.add_argument("--log-level", default=None, help="Override log level")
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON on stderr"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.filename:
        print("Usage: tstock [filename]")
        return EXIT_USAGE

    path = Path(args.filename)
    if not path.is_file():
        print(f"File {args.filename} do not exist, please check your input!")
        return EXIT_USAGE

    try:
        settings = get_config(args.config_dir)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(
        level=args.log_level or settings.logging.level,
        json_logs=args.json_logs or settings.logging.json_logs,
        include_timestamp=settings.logging.include_timestamp,
    )
    log = get_cli_logger(watchlist=str(path))

    try:
        securities = load_watchlist(path)
    except WatchlistError as e:
        log.error("watchlist_rejected", error=str(e))
        print(f"Cannot load {args.filename}: {e}", file=sys.stderr)
        return EXIT_USAGE

    log.info("watchlist_loaded", securities=len(securities))
    results = run_quotes(securities, settings.hexun.to_value_object())

    for line in render_table(results):
        print(line)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
