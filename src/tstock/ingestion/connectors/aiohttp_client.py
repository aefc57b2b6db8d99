"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind the IHttpClient abstraction. One ClientSession is shared
by every concurrent request of a run.
"""

import asyncio

import aiohttp

from tstock.ingestion.ports.http import HttpResponse, IHttpClient, TransportError


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp.

    Redirects are not followed: a 3xx is returned as-is to the caller.
    Timeouts are aiohttp's defaults.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None):
        """Initialize HTTP client.

        Args:
            session: Existing session to reuse. Sessions passed in are not
                closed by this client.
        """
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "AiohttpClient":
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def get(self, url: str) -> HttpResponse:
        """Execute GET request.

        Returns:
            HttpResponse with status, text body, headers

        Raises:
            TransportError: On connection errors and timeouts
        """
        session = await self._get_session()

        try:
            async with session.get(url, allow_redirects=False) as resp:
                body = await resp.text(errors="replace")
                return HttpResponse(
                    status_code=resp.status,
                    body=body,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out requesting {url}", url=url) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{type(e).__name__}: {e}", url=url) from e

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and self._owns_session:
            await self._session.close()
        self._session = None
