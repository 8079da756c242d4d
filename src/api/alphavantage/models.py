"""
Alpha Vantage Models - Pydantic models for the CURRENCY_EXCHANGE_RATE payload
and the normalized exchange-rate envelope.
"""

import math
import re
from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from contracts.errors import ParseError
from contracts.models import ApiResult, ResponseEnvelope
from utils.pydantic_tools import BaseModelWithMethods

REALTIME_RATE_KEY = "Realtime Currency Exchange Rate"

# Leading decimal number, the same prefix a browser parseFloat() accepts
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class AlphaVantageRate(BaseModelWithMethods):
    """The numbered fields inside "Realtime Currency Exchange Rate"."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    from_currency_code: str | None = Field(default=None, alias="1. From_Currency Code")
    from_currency_name: str | None = Field(default=None, alias="2. From_Currency Name")
    to_currency_code: str | None = Field(default=None, alias="3. To_Currency Code")
    to_currency_name: str | None = Field(default=None, alias="4. To_Currency Name")
    exchange_rate: str | None = Field(default=None, alias="5. Exchange Rate")
    last_refreshed: str | None = Field(default=None, alias="6. Last Refreshed")
    time_zone: str | None = Field(default=None, alias="7. Time Zone")
    bid_price: str | None = Field(default=None, alias="8. Bid Price")
    ask_price: str | None = Field(default=None, alias="9. Ask Price")

    @field_validator("exchange_rate", mode="before")
    @classmethod
    def drop_non_scalar_rate(cls, value):
        """Objects and lists cannot be parsed later; the rate degrades to null."""
        if isinstance(value, (dict, list, bool)):
            return None
        return value


class AlphaVantageExchangeResponse(BaseModelWithMethods):
    """
    Top-level Alpha Vantage reply.

    Quota and key problems come back as HTTP 200 with one of the message
    fields set and no rate object.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    realtime_rate: AlphaVantageRate | None = Field(default=None, alias=REALTIME_RATE_KEY)
    error_message: str | None = Field(default=None, alias="Error Message")
    note: str | None = Field(default=None, alias="Note")
    information: str | None = Field(default=None, alias="Information")

    @property
    def provider_message(self) -> str | None:
        return self.error_message or self.note or self.information


class ExchangeRates(BaseModelWithMethods):
    model_config = ConfigDict(populate_by_name=True)

    USD: float | None = None


class ExchangeRateEnvelope(ResponseEnvelope):
    success: Literal[True] = True
    timestamp: int
    rates: ExchangeRates


def parse_exchange_rate(raw: str | None) -> ApiResult[float]:
    """
    Parse the textual rate using its leading decimal number.

    Returns a ParseError result for missing, non-numeric or non-finite input.
    """
    if raw is None:
        return ApiResult.failure(ParseError("Exchange rate field is missing"))

    match = _LEADING_FLOAT.match(str(raw))
    if not match:
        return ApiResult.failure(ParseError(f"Exchange rate is not a number: {raw!r}"))

    value = float(match.group(1))
    if not math.isfinite(value):
        return ApiResult.failure(ParseError(f"Exchange rate is not finite: {raw!r}"))
    return ApiResult.success(value)
