"""
Per-market Hexun constants.

Every Market member must have exactly one profile; a missing entry fails at
import time rather than at the first request for that market.
"""

from dataclasses import dataclass
from types import MappingProxyType

from tstock.shared.models.enums import Market


@dataclass(frozen=True)
class MarketProfile:
    """How Hexun addresses one market."""

    code_prefix: str
    region: str
    host_prefix: str
    # Hexun sends fixed-point integers; divide by this to get currency units.
    price_unit: float


MARKET_PROFILES = MappingProxyType(
    {
        Market.SHANGHAI: MarketProfile(
            code_prefix="sse",
            region="a",
            host_prefix="webstock.quote",
            price_unit=100.0,
        ),
        Market.SHENZHEN: MarketProfile(
            code_prefix="szse",
            region="a",
            host_prefix="webstock.quote",
            price_unit=100.0,
        ),
        Market.HONG_KONG: MarketProfile(
            code_prefix="HKEX",
            region="hk",
            host_prefix="webhkstock.quote",
            price_unit=1000.0,
        ),
        Market.NASDAQ: MarketProfile(
            code_prefix="NASDAQ",
            region="usa",
            host_prefix="webusstock",
            price_unit=100.0,
        ),
    }
)

_missing = set(Market) - set(MARKET_PROFILES)
if _missing:
    raise RuntimeError(
        f"No Hexun profile for markets: {sorted(m.value for m in _missing)}"
    )


def profile_for(market: Market) -> MarketProfile:
    return MARKET_PROFILES[market]
