"""
News Async Wrappers - Turn service results into response envelopes.
"""

from adapters.config import ProxyConfig
from api.news.core import NewsService
from api.news.models import NewsEnvelope, NewsQuery
from contracts.models import ErrorEnvelope
from utils.get_logger import get_logger

logger = get_logger(__name__)

ERROR_MESSAGE = "Erro ao buscar notícias"


class NewsWrapper:
    def __init__(self, config: ProxyConfig):
        self.service = NewsService(config)

    async def get_news(self, query: NewsQuery) -> NewsEnvelope | ErrorEnvelope:
        """
        Async wrapper function to get top headlines.

        Returns:
            NewsEnvelope (status 200) or ErrorEnvelope (status 500).
        """
        try:
            result = await self.service.get_top_headlines(query)
        except Exception as e:
            logger.error(f"{ERROR_MESSAGE}: {e}")
            return ErrorEnvelope.from_exception(ERROR_MESSAGE, e)

        if not result.ok or result.value is None:
            logger.error(f"{ERROR_MESSAGE}: {result.diagnostic}")
            return ErrorEnvelope.from_result(ERROR_MESSAGE, result)

        logger.info(f"Returning {len(result.value.articles)} articles")
        return result.value
