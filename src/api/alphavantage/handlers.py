"""
Exchange-rate Firebase Functions handler.
Handlers only run the CORS gate and serialize what the wrapper returns.
"""

import logging

from firebase_functions import https_fn

from adapters.config import ProxyConfig
from api.alphavantage.wrappers import AlphaVantageWrapper
from utils.cors import handle_cors
from utils.http_responses import json_response

logger = logging.getLogger(__name__)


class ExchangeRateHandler:
    """HTTP handler for /getExchangeRates."""

    def __init__(self, config: ProxyConfig):
        self.wrapper = AlphaVantageWrapper(config)
        logger.info("ExchangeRateHandler initialized")

    async def get_exchange_rates(self, req: https_fn.Request) -> https_fn.Response:
        """
        Get the current USD to BRL exchange rate.

        Accepts GET and POST without parameters; OPTIONS is answered by the
        CORS gate.

        Returns:
            200 {success, timestamp, rates: {USD}} or 500 {success, error, details}
        """
        headers, preflight = handle_cors(req)
        if preflight is not None:
            return preflight

        envelope = await self.wrapper.get_exchange_rates()
        return json_response(envelope, headers)
