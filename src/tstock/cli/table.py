"""Fixed-width quote table."""

from collections.abc import Iterable

from tstock.shared.models.securities import QuoteResult

COLUMNS = ("Name", "Price", "Open", "Low", "High", "UpDown", "UpDownRate")
MISSING = "_"

_TEXT_ROW = "|%-20s|%10s|%10s|%10s|%10s|%10s|%10s|"
_QUOTE_ROW = "|%-20s|%10.2f|%10.2f|%10.2f|%10.2f|%10.2f|%10.2f%%|"


def format_header() -> str:
    return _TEXT_ROW % COLUMNS


def format_row(result: QuoteResult) -> str:
    """One table line; every numeric column shows ``_`` when data is missing."""
    name = result.security.name
    data = result.data
    if data is None:
        return _TEXT_ROW % ((name,) + (MISSING,) * (len(COLUMNS) - 1))
    return _QUOTE_ROW % (
        name,
        data.price,
        data.open,
        data.low,
        data.high,
        data.change_absolute,
        data.change_rate_percent,
    )


def render_table(results: Iterable[QuoteResult]) -> list[str]:
    return [format_header()] + [format_row(result) for result in results]
