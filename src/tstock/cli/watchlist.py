"""Watchlist file decoding."""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tstock.shared.models.securities import Security

_WATCHLIST = TypeAdapter(list[Security])


class WatchlistError(Exception):
    """Watchlist file could not be read or decoded."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def parse_watchlist(content: str | bytes) -> list[Security]:
    """Decode a JSON array of ``{"name": ..., "code": {"type": ..., "code": ...}}``."""
    try:
        return _WATCHLIST.validate_json(content)
    except ValidationError as e:
        raise WatchlistError(
            f"Invalid watchlist: {e.error_count()} error(s)\n{e}"
        ) from e


def load_watchlist(path: str | Path) -> list[Security]:
    """Read and decode a watchlist file, preserving entry order."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise WatchlistError(f"Cannot read {path}: {e}", path=path) from e

    try:
        return parse_watchlist(content)
    except WatchlistError as e:
        e.path = path
        raise
