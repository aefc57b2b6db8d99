"""
Single-security quote fetch against Hexun.

Failure is isolated here: whatever goes wrong for one security becomes a
QuoteResult without data, never an exception.
"""

from tstock.infrastructure.observability import get_ingestion_logger
from tstock.ingestion.config.value_objects import HexunConfig
from tstock.ingestion.ports.http import IHttpClient, TransportError
from tstock.shared.models.securities import QuoteResult, Security

from .exceptions import HttpStatusError, QuoteParseError
from .parser import decode_quote
from .request_builder import build_url

# Anything from 300 up is a failure, redirects included.
SUCCESS_STATUS_LIMIT = 300


class QuoteFetcher:
    """Fetch and parse one Hexun quote per call.

    Dependencies injected (not instantiated):
    - http_client: Executes the GET request
    - config: Host, column list and callback constants
    """

    def __init__(self, http_client: IHttpClient, config: HexunConfig | None = None):
        self.http_client = http_client
        self.config = config or HexunConfig()
        self.log = get_ingestion_logger("hexun-fetcher", provider="hexun")

    async def fetch(self, security: Security) -> QuoteResult:
        """Build the URL, GET it once, parse the body. No retries."""
        url = build_url(security.code, self.config)
        log = self.log.bind(
            security=str(security.code), security_name=security.name
        )

        try:
            response = await self.http_client.get(url)
            if response.status_code >= SUCCESS_STATUS_LIMIT:
                raise HttpStatusError(response.status_code, url=url)
            data = decode_quote(response.body, security.code)
        except TransportError as e:
            log.warning(
                "quote_unavailable", reason="transport_error", error=str(e), url=url
            )
            return QuoteResult(security=security, failure_reason="transport_error")
        except HttpStatusError as e:
            reason = f"http_status_{e.status_code}"
            log.warning("quote_unavailable", reason=reason, url=url)
            return QuoteResult(security=security, failure_reason=reason)
        except QuoteParseError as e:
            log.warning(
                "quote_unavailable",
                reason=e.reason,
                detail=e.detail,
                body_length=len(response.body),
            )
            return QuoteResult(security=security, failure_reason=e.reason)

        log.debug("quote_fetched", price=data.price)
        return QuoteResult(security=security, data=data)
