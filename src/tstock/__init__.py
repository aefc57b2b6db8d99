"""
Quote monitor for a personal watchlist of securities.
Fetches near-real-time quotes from Hexun and prints a fixed-width table.

Modules:
- ingestion: Request building, transport, parsing and concurrent fan-out
- shared: Security and quote models, market enums
- infrastructure: Logging
- config: YAML + environment configuration
- cli: Watchlist loading, table rendering, command-line entrypoint
"""

__version__ = "0.1.0"
