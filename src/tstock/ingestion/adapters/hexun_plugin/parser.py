"""
Hexun quotelist payload parser.

The provider answers with a JSONP-like envelope. The numeric payload is the
second colon-delimited segment of the body, wrapped in a fixed three
character prefix and seven character suffix, for example:

    c({"Data":[[[1234,1200,1250,1180,34,291,1520,87]]],"K":1});
    segment:  [[[1234,1200,1250,1180,34,291,1520,87]]],"K"
    payload:     1234,1200,1250,1180,34,291,1520,87

The trim widths are fixed by the provider's framing, not derived from it.
If the envelope ever changes width every field shifts, so the widths are
kept as named constants and covered by tests.
"""

import math

from tstock.shared.models.securities import QuoteData, SecurityIdentifier

from .exceptions import QuoteParseError
from .markets import profile_for

SEGMENT_SEPARATOR = ":"
FIELD_SEPARATOR = ","
ENVELOPE_PREFIX_LEN = 3
ENVELOPE_SUFFIX_LEN = 7

QUOTE_FIELDS = (
    "price",
    "open",
    "high",
    "low",
    "change_absolute",
    "change_rate_percent",
    "turnover_ratio",
)


def strip_envelope(value: str) -> str:
    """Drop the fixed envelope prefix and suffix around the numeric list.

    Raises:
        QuoteParseError: if the segment is shorter than the envelope itself
    """
    if len(value) < ENVELOPE_PREFIX_LEN + ENVELOPE_SUFFIX_LEN:
        raise QuoteParseError("envelope_too_short", f"{len(value)} chars")
    return value[ENVELOPE_PREFIX_LEN : len(value) - ENVELOPE_SUFFIX_LEN]


def _to_number(token: str) -> float:
    try:
        number = float(token)
    except ValueError as e:
        raise QuoteParseError("non_numeric_field", repr(token)) from e
    if not math.isfinite(number):
        raise QuoteParseError("non_finite_field", repr(token))
    return number


def decode_quote(text: str, identifier: SecurityIdentifier) -> QuoteData:
    """
    Decode a quotelist body into QuoteData.

    Every comma-separated token must be numeric; the first seven map
    positionally onto QUOTE_FIELDS after dividing by the market's unit.

    Raises:
        QuoteParseError: describing the first shape violation found
    """
    segments = text.split(SEGMENT_SEPARATOR)
    if len(segments) < 2:
        raise QuoteParseError("missing_separator")

    tokens = strip_envelope(segments[1]).split(FIELD_SEPARATOR)
    if len(tokens) < len(QUOTE_FIELDS):
        raise QuoteParseError(
            "too_few_fields", f"{len(tokens)} < {len(QUOTE_FIELDS)}"
        )

    unit = profile_for(identifier.market).price_unit
    values = [_to_number(token) / unit for token in tokens]

    return QuoteData(**dict(zip(QUOTE_FIELDS, values)))


def parse_quote(text: str, identifier: SecurityIdentifier) -> QuoteData | None:
    """Decode a quotelist body, returning None when it cannot be parsed."""
    try:
        return decode_quote(text, identifier)
    except QuoteParseError:
        return None
