"""
Tests for the fixed-width quote table.
"""

from tstock.cli.table import format_header, format_row, render_table
from tstock.shared.models import QuoteData, QuoteResult


def _data(**overrides):
    values = dict(
        price=12.34,
        open=12.0,
        high=12.5,
        low=11.8,
        change_absolute=0.34,
        change_rate_percent=2.91,
        turnover_ratio=15.2,
    )
    values.update(overrides)
    return QuoteData(**values)


def test_header():
    assert format_header() == (
        "|Name                |     Price|      Open|       Low|      High"
        "|    UpDown|UpDownRate|"
    )


def test_row_with_data_puts_low_before_high(watchlist):
    row = format_row(QuoteResult(security=watchlist[1], data=_data()))

    assert row == (
        "|SPD Bank            |     12.34|     12.00|     11.80|     12.50"
        "|      0.34|      2.91%|"
    )


def test_row_without_data(watchlist):
    row = format_row(QuoteResult(security=watchlist[0], failure_reason="transport_error"))

    assert row == (
        "|Ping An Bank        |         _|         _|         _|         _"
        "|         _|         _|"
    )


def test_negative_change(watchlist):
    row = format_row(
        QuoteResult(
            security=watchlist[2],
            data=_data(change_absolute=-0.5, change_rate_percent=-3.456),
        )
    )

    assert row.endswith("|     -0.50|     -3.46%|")


def test_render_table_keeps_order(watchlist):
    results = [QuoteResult(security=s) for s in watchlist]

    lines = render_table(results)

    assert lines[0] == format_header()
    assert [line.split("|")[1].strip() for line in lines[1:]] == [
        s.name for s in watchlist
    ]
