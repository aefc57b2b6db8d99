"""Shared fixtures: stub transport and envelope builder for Hexun tests."""

import asyncio
import logging

import pytest
import structlog

from tstock.ingestion.ports.http import HttpResponse, TransportError
from tstock.shared.models import Market, Security, SecurityIdentifier


def make_body(tokens, prefix="[[[", suffix=']]],"K"'):
    """Quotelist body whose second colon segment is prefix + tokens + suffix."""
    return 'c({"Data":' + prefix + ",".join(str(t) for t in tokens) + suffix + ":1});"


class StubHttpClient:
    """IHttpClient stub keyed by a substring of the requested URL.

    Routes map a URL fragment (e.g. ``"szse000001"``) to an HttpResponse, an
    exception instance to raise, or a (delay_seconds, response) tuple. The
    peak number of requests outstanding at once is kept in ``peak_in_flight``.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requested: list[str] = []
        self.closed = False
        self.in_flight = 0
        self.peak_in_flight = 0

    async def get(self, url: str) -> HttpResponse:
        self.requested.append(url)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            return await self._respond(url)
        finally:
            self.in_flight -= 1

    async def _respond(self, url: str) -> HttpResponse:
        for fragment, outcome in self.routes.items():
            if fragment in url:
                break
        else:
            return HttpResponse(status_code=404, body="", url=url)

        if isinstance(outcome, tuple):
            delay, outcome = outcome
            await asyncio.sleep(delay)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def stub_client_factory():
    return StubHttpClient


@pytest.fixture
def body_factory():
    return make_body


@pytest.fixture
def ok():
    def _ok(tokens, status=200):
        return HttpResponse(status_code=status, body=make_body(tokens))

    return _ok


@pytest.fixture
def transport_error():
    return TransportError("Connection refused", url="http://example.invalid")


@pytest.fixture
def watchlist():
    """One security per market, in a fixed order."""
    return [
        Security(name="Ping An Bank", code=SecurityIdentifier(type="SZ", code="000001")),
        Security(name="SPD Bank", code=SecurityIdentifier(type="SH", code="600000")),
        Security(name="Tencent", code=SecurityIdentifier(type="HK", code="00700")),
        Security(
            name="Apple", code=SecurityIdentifier(market=Market.NASDAQ, code="AAPL")
        ),
    ]


@pytest.fixture
def clean_logging():
    """Reset stdlib logging and structlog global state around a test."""
    original_handlers = logging.root.handlers[:]
    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()

    yield

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    logging.root.handlers = original_handlers
