"""Configuration value objects for dependency injection.

Components receive these frozen dataclasses instead of the global
ConfigState, so tests can build them directly.
"""

from dataclasses import dataclass

DEFAULT_BASE_HOST = "hermes.hexun.com"
DEFAULT_COLUMNS = "Price,Open,High,Low,UpDown,UpDownRate,PE2,ExchangeRatio"
DEFAULT_CALLBACK = "c"


@dataclass(frozen=True)
class HexunConfig:
    """Process-wide constants for Hexun quotelist requests."""

    base_host: str = DEFAULT_BASE_HOST
    column: str = DEFAULT_COLUMNS
    callback: str = DEFAULT_CALLBACK
