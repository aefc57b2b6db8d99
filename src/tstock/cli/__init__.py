"""Command-line surface: watchlist loading, table rendering, entrypoint."""

from .table import format_header, format_row, render_table
from .watchlist import WatchlistError, load_watchlist, parse_watchlist

__all__ = [
    "format_header",
    "format_row",
    "render_table",
    "WatchlistError",
    "load_watchlist",
    "parse_watchlist",
]
