from .enums import Market
from .securities import QuoteData, QuoteResult, Security, SecurityIdentifier

__all__ = [
    "Market",
    "SecurityIdentifier",
    "Security",
    "QuoteData",
    "QuoteResult",
]
