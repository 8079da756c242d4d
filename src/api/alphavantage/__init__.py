"""
Alpha Vantage Package - USD to BRL exchange rate proxy.

This package provides:
- AlphaVantageService: outbound call, payload validation and rate parsing
- AlphaVantageWrapper: translation of service results into response envelopes
- ExchangeRateHandler: Firebase Functions handler for /getExchangeRates
"""

from api.alphavantage.core import AlphaVantageService
from api.alphavantage.handlers import ExchangeRateHandler
from api.alphavantage.models import (
    AlphaVantageExchangeResponse,
    AlphaVantageRate,
    ExchangeRateEnvelope,
    ExchangeRates,
    parse_exchange_rate,
)
from api.alphavantage.wrappers import AlphaVantageWrapper

__all__ = [
    # Services
    "AlphaVantageService",
    # Wrappers
    "AlphaVantageWrapper",
    # Handlers
    "ExchangeRateHandler",
    # Models
    "AlphaVantageExchangeResponse",
    "AlphaVantageRate",
    "ExchangeRateEnvelope",
    "ExchangeRates",
    "parse_exchange_rate",
]
