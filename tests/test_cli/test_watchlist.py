"""
Tests for watchlist decoding.
"""

import json

import pytest

from tstock.cli.watchlist import WatchlistError, load_watchlist, parse_watchlist
from tstock.shared.models import Market


def test_parse_all_markets_in_order():
    content = json.dumps(
        [
            {"name": "Ping An Bank", "code": {"type": "SZ", "code": "000001"}},
            {"name": "SPD Bank", "code": {"type": "SH", "code": "600000"}},
            {"name": "Tencent", "code": {"type": "HK", "code": "00700"}},
            {"name": "Apple", "code": {"type": "NSDQ", "code": "AAPL"}},
        ]
    )

    securities = parse_watchlist(content)

    assert [s.name for s in securities] == ["Ping An Bank", "SPD Bank", "Tencent", "Apple"]
    assert [s.code.market for s in securities] == [
        Market.SHENZHEN,
        Market.SHANGHAI,
        Market.HONG_KONG,
        Market.NASDAQ,
    ]
    assert securities[2].code.code == "00700"


def test_empty_array():
    assert parse_watchlist("[]") == []


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"name": "A"}',
        '[{"name": "A", "code": {"type": "NYSE", "code": "IBM"}}]',
        '[{"name": "A", "code": {"code": "600000"}}]',
        '[{"code": {"type": "SH", "code": "600000"}}]',
    ],
    ids=["not-json", "not-array", "unknown-market", "missing-type", "missing-name"],
)
def test_invalid_content_raises(content):
    with pytest.raises(WatchlistError):
        parse_watchlist(content)


def test_load_watchlist_from_file(tmp_path):
    path = tmp_path / "watch.json"
    path.write_text(
        '[{"name": "恒生银行", "code": {"type": "HK", "code": "00011"}}]',
        encoding="utf-8",
    )

    securities = load_watchlist(path)

    assert securities[0].name == "恒生银行"


def test_load_watchlist_records_path(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[", encoding="utf-8")

    with pytest.raises(WatchlistError) as exc_info:
        load_watchlist(path)

    assert exc_info.value.path == path


def test_load_watchlist_missing_file(tmp_path):
    with pytest.raises(WatchlistError):
        load_watchlist(tmp_path / "absent.json")


def test_load_watchlist_accepts_utf8_bom(tmp_path):
    path = tmp_path / "watch.json"
    path.write_text(
        '\ufeff[{"name": "平安银行", "code": {"type": "SZ", "code": "000001"}}]',
        encoding="utf-8",
    )

    securities = load_watchlist(path)

    assert securities[0].name == "平安银行"
    assert securities[0].code.market is Market.SHENZHEN


def test_load_watchlist_undecodable_bytes(tmp_path):
    path = tmp_path / "watch.json"
    path.write_bytes(b'[{"name": "\xff\xfe"}]')

    with pytest.raises(WatchlistError) as exc_info:
        load_watchlist(path)

    assert exc_info.value.path == path
