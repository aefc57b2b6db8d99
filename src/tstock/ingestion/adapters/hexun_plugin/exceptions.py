"""
Hexun Exception Hierarchy

Specific exception types for the ways a single quote request can fail.
None of them escape the per-security fetch: the fetcher collapses each one
to a "no data" QuoteResult and logs the reason.
"""


class HexunError(Exception):
    """Base exception for all Hexun quote errors."""


class HttpStatusError(HexunError):
    """Response status was 300 or above (redirects are not followed)."""

    def __init__(self, status_code: int, url: str | None = None):
        super().__init__(f"HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class QuoteParseError(HexunError):
    """Response body does not match the quotelist envelope."""

    def __init__(self, reason: str, detail: str | None = None):
        message = reason if detail is None else f"{reason}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.detail = detail
