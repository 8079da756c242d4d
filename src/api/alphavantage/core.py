"""
Alpha Vantage Core Service - Fetches the USD to BRL rate.
Handles the outbound call, payload validation and rate parsing.
"""

from pydantic import ValidationError

from adapters.config import ProxyConfig
from api.alphavantage.models import (
    AlphaVantageExchangeResponse,
    ExchangeRates,
    parse_exchange_rate,
)
from contracts.errors import ConfigurationError, UpstreamError
from contracts.models import ApiResult
from utils.base_api_client import BaseAPIClient
from utils.get_logger import get_logger

logger = get_logger(__name__)

FROM_CURRENCY = "USD"
TO_CURRENCY = "BRL"

MISSING_KEY_DETAILS = "API key não configurada"
MISSING_RATE_DETAILS = "Erro ao obter cotações"


class AlphaVantageService(BaseAPIClient):
    """Exchange-rate service for the fixed USD to BRL pair."""

    def __init__(self, config: ProxyConfig):
        super().__init__(timeout=config.request_timeout)
        self.config = config

    def build_params(self, api_key: str) -> dict[str, str]:
        return {
            "function": "CURRENCY_EXCHANGE_RATE",
            "from_currency": FROM_CURRENCY,
            "to_currency": TO_CURRENCY,
            "apikey": api_key,
        }

    async def get_exchange_rates(self) -> ApiResult[ExchangeRates]:
        """
        Fetch and normalize the current USD to BRL rate.

        Returns:
            ApiResult with ExchangeRates on success. A rate that does not parse
            still succeeds, with USD set to None.
        """
        api_key = self.config.exchange_api_key
        if not api_key:
            return ApiResult.failure(ConfigurationError(MISSING_KEY_DETAILS))

        result = await self._make_request(
            self.config.alphavantage_base_url, params=self.build_params(api_key)
        )
        if not result.ok:
            return ApiResult.failure(result.error)

        try:
            payload = AlphaVantageExchangeResponse.model_validate(result.value)
        except ValidationError as e:
            logger.warning(f"Unexpected Alpha Vantage payload shape: {e.error_count()} errors")
            return ApiResult.failure(UpstreamError(MISSING_RATE_DETAILS, body=result.value))

        if payload.realtime_rate is None:
            return ApiResult.failure(
                UpstreamError(MISSING_RATE_DETAILS, body=payload.provider_message or result.value)
            )

        parsed = parse_exchange_rate(payload.realtime_rate.exchange_rate)
        if not parsed.ok:
            logger.warning(f"Degrading USD rate to null: {parsed.details}")

        return ApiResult.success(ExchangeRates(USD=parsed.value))
