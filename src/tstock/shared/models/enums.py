"""
Shared enumerations for tstock.

Market is a closed set: every piece of market-dependent behaviour is keyed on
it through an exhaustive registry, never on raw strings.
"""

import enum


class Market(str, enum.Enum):
    """Exchange a security trades on. Values are the watchlist wire tags."""

    SHANGHAI = "SH"
    SHENZHEN = "SZ"
    HONG_KONG = "HK"
    NASDAQ = "NSDQ"
