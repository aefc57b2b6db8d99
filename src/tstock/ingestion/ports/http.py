"""HTTP communication abstractions for quote providers.

Separates the HTTP transport from request building and payload parsing.
Allows stubbing the transport in tests.
"""

from dataclasses import dataclass, field
from typing import Protocol


class TransportError(Exception):
    """Request never produced a response (DNS, connect, read, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


@dataclass(frozen=True)
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    body: str  # Raw text: provider payloads are not JSON
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute HTTP requests and return responses.
    Does NOT handle:
    - Status code interpretation
    - Payload parsing
    - Retry logic
    """

    async def get(self, url: str) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL to request, query string included

        Raises:
            TransportError: On network or connection errors
        """
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...
