# tstock/shared/models/securities.py

from pydantic import BaseModel, ConfigDict, Field

from tstock.shared.models.enums import Market


class SecurityIdentifier(BaseModel):
    """
    Tagged identifier: market designator plus an opaque market-local code.

    JSON form matches the watchlist file: {"type": "SZ", "code": "000001"}.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    market: Market = Field(..., alias="type")
    code: str

    def __str__(self) -> str:
        return f"{self.market.value}:{self.code}"


class Security(BaseModel):
    """A display name paired with its identifier."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: SecurityIdentifier


class QuoteData(BaseModel):
    """Seven price fields, already normalized to currency units."""

    model_config = ConfigDict(frozen=True)

    price: float
    open: float
    high: float
    low: float
    change_absolute: float
    change_rate_percent: float
    turnover_ratio: float


class QuoteResult(BaseModel):
    """
    Outcome of fetching one security.

    ``data is None`` means "no data" whatever the cause (transport error,
    non-success status, unparseable payload). ``failure_reason`` keeps the
    cause for logs only and is left out of serialized output.
    """

    model_config = ConfigDict(frozen=True)

    security: Security
    data: QuoteData | None = Field(default=None)
    failure_reason: str | None = Field(default=None, exclude=True, repr=False)

    @property
    def has_data(self) -> bool:
        return self.data is not None
