"""
QuoteService: public entrypoint for fetching a watchlist.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from tstock.ingestion.adapters.hexun_plugin.fetcher import QuoteFetcher
from tstock.ingestion.config.value_objects import HexunConfig
from tstock.ingestion.connectors.aiohttp_client import AiohttpClient
from tstock.ingestion.orchestration.quote_orchestrator import FetchOrchestrator
from tstock.ingestion.ports.http import IHttpClient
from tstock.shared.models.securities import QuoteResult, Security


class QuoteService:
    """Composes transport, fetcher and orchestrator to serve one run.

    A client created here is closed after the run; an injected client is
    left open for its owner.
    """

    def __init__(
        self,
        config: HexunConfig | None = None,
        http_client: IHttpClient | None = None,
    ) -> None:
        self.config = config or HexunConfig()
        self.http_client = http_client

    async def fetch_quotes(self, securities: Sequence[Security]) -> list[QuoteResult]:
        if self.http_client is not None:
            return await self._run(self.http_client, securities)

        async with AiohttpClient() as client:
            return await self._run(client, securities)

    async def _run(
        self, client: IHttpClient, securities: Sequence[Security]
    ) -> list[QuoteResult]:
        orchestrator = FetchOrchestrator(QuoteFetcher(client, self.config))
        return await orchestrator.fetch_all(securities)


def run_quotes(
    securities: Sequence[Security], config: HexunConfig | None = None
) -> list[QuoteResult]:
    """Blocking helper: fetch all quotes on a fresh event loop."""
    return asyncio.run(QuoteService(config).fetch_quotes(securities))
