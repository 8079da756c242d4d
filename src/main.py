"""
Firebase Cloud Functions entrypoints.

getExchangeRates: USD to BRL rate from Alpha Vantage
getNews:          NewsAPI top headlines
"""

from functools import lru_cache

from firebase_functions import https_fn

from adapters.config import EXCHANGE_API_KEY, NEWS_API_KEY, get_config
from api.alphavantage.handlers import ExchangeRateHandler
from api.news.handlers import NewsHandler
from utils.async_runner import run_async
from utils.setup_logging import setup_cloud_logging

setup_cloud_logging()


@lru_cache(maxsize=1)
def exchange_rate_handler() -> ExchangeRateHandler:
    return ExchangeRateHandler(get_config())


@lru_cache(maxsize=1)
def news_handler() -> NewsHandler:
    return NewsHandler(get_config())


@https_fn.on_request(secrets=[EXCHANGE_API_KEY.name])
def getExchangeRates(req: https_fn.Request) -> https_fn.Response:  # noqa: N802
    return run_async(exchange_rate_handler().get_exchange_rates(req))


@https_fn.on_request(secrets=[NEWS_API_KEY.name])
def getNews(req: https_fn.Request) -> https_fn.Response:  # noqa: N802
    return run_async(news_handler().get_news(req))
