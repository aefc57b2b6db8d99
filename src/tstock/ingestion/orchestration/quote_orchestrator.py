"""
FetchOrchestrator fans a watchlist out to concurrent quote fetches and fans
the results back in, in input order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Protocol

from tstock.infrastructure.observability import get_ingestion_logger
from tstock.shared.models.securities import QuoteResult, Security


class Fetcher(Protocol):
    async def fetch(
        self, security: Security
    ) -> QuoteResult:  # pragma: no cover - structural
        ...


class FetchOrchestrator:
    """Runs one fetch task per security and waits for all of them.

    There is no concurrency limit: every security gets its own outstanding
    request. Nothing is cancelled when one fetch fails.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher
        self.log = get_ingestion_logger("fetch-orchestrator")

    async def fetch_all(self, securities: Sequence[Security]) -> list[QuoteResult]:
        """
        Fetch every security concurrently.

        Returns:
            One QuoteResult per input, ``results[i].security == securities[i]``
        """
        if not securities:
            return []

        self.log.info("fan_out_started", securities=len(securities))
        outcomes = await asyncio.gather(
            *(self.fetcher.fetch(security) for security in securities),
            return_exceptions=True,
        )

        results = [
            self._settle(security, outcome)
            for security, outcome in zip(securities, outcomes)
        ]
        self.log.info(
            "fan_in_completed",
            securities=len(results),
            with_data=sum(1 for r in results if r.has_data),
        )
        return results

    def _settle(
        self, security: Security, outcome: QuoteResult | BaseException
    ) -> QuoteResult:
        if isinstance(outcome, asyncio.CancelledError):
            raise outcome
        if isinstance(outcome, BaseException):
            # Fetchers are expected to absorb their own failures.
            self.log.error(
                "fetch_task_crashed",
                security=str(security.code),
                exc_info=outcome,
            )
            return QuoteResult(
                security=security,
                failure_reason=f"unexpected_error:{type(outcome).__name__}",
            )
        return outcome
