"""
End-to-end tests through QuoteService with a stubbed transport.
"""

import pytest

from tstock.cli.watchlist import parse_watchlist
from tstock.ingestion.ports.http import HttpResponse
from tstock.ingestion.service import QuoteService


@pytest.mark.asyncio
async def test_single_shanghai_security_end_to_end(stub_client_factory):
    securities = parse_watchlist(
        '[{"name": "A", "code": {"type": "SH", "code": "600000"}}]'
    )
    body = "x:ABC1234,1200,1250,1180,34,291,520,87XXXXXXX"
    client = stub_client_factory(
        {"sse600000": HttpResponse(status_code=200, body=body)}
    )

    results = await QuoteService(http_client=client).fetch_quotes(securities)

    assert len(results) == 1
    assert results[0].security.name == "A"
    assert results[0].data is not None
    assert results[0].data.price == 1234 / 100.0


@pytest.mark.asyncio
async def test_injected_client_is_left_open(stub_client_factory, ok, watchlist):
    client = stub_client_factory({"": ok([100] * 7)})

    results = await QuoteService(http_client=client).fetch_quotes(watchlist)

    assert [r.security for r in results] == watchlist
    assert all(r.has_data for r in results)
    assert client.closed is False
