"""Hexun quotelist provider: URL building, envelope parsing, single fetch."""

from .exceptions import HexunError, HttpStatusError, QuoteParseError
from .fetcher import QuoteFetcher
from .markets import MARKET_PROFILES, MarketProfile, profile_for
from .parser import decode_quote, parse_quote, strip_envelope
from .request_builder import build_url, code_string, host_prefix, region

__all__ = [
    "HexunError",
    "HttpStatusError",
    "QuoteParseError",
    "QuoteFetcher",
    "MARKET_PROFILES",
    "MarketProfile",
    "profile_for",
    "decode_quote",
    "parse_quote",
    "strip_envelope",
    "build_url",
    "code_string",
    "host_prefix",
    "region",
]
