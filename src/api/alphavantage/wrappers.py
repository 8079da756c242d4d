"""
Alpha Vantage Async Wrappers - Turn service results into response envelopes.
"""

import time

from adapters.config import ProxyConfig
from api.alphavantage.core import AlphaVantageService
from api.alphavantage.models import ExchangeRateEnvelope
from contracts.models import ErrorEnvelope
from utils.get_logger import get_logger

logger = get_logger(__name__)

ERROR_MESSAGE = "Erro ao buscar cotações de câmbio"


def now_millis() -> int:
    return int(time.time() * 1000)


class AlphaVantageWrapper:
    def __init__(self, config: ProxyConfig):
        self.service = AlphaVantageService(config)

    async def get_exchange_rates(self) -> ExchangeRateEnvelope | ErrorEnvelope:
        """
        Async wrapper function to get the USD to BRL rate.

        Returns:
            ExchangeRateEnvelope (status 200) or ErrorEnvelope (status 500).
        """
        try:
            result = await self.service.get_exchange_rates()
        except Exception as e:
            logger.error(f"Erro ao buscar cotações: {e}")
            return ErrorEnvelope.from_exception(ERROR_MESSAGE, e)

        if not result.ok or result.value is None:
            logger.error(f"Erro ao buscar cotações: {result.diagnostic}")
            return ErrorEnvelope.from_result(ERROR_MESSAGE, result)

        return ExchangeRateEnvelope(timestamp=now_millis(), rates=result.value)
