"""
News Core Service - Base service for NewsAPI top-headlines.
Handles the outbound call, status validation and article normalization.
"""

from pydantic import ValidationError

from adapters.config import ProxyConfig
from api.news.models import (
    NewsApiArticle,
    NewsApiTopHeadlinesResponse,
    NewsArticle,
    NewsEnvelope,
    NewsQuery,
)
from contracts.errors import ConfigurationError, UpstreamError
from contracts.models import ApiResult
from utils.base_api_client import BaseAPIClient
from utils.get_logger import get_logger

logger = get_logger(__name__)

MISSING_KEY_DETAILS = "News API key não configurada"
UPSTREAM_FAILURE_DETAILS = "Erro ao buscar notícias"


class NewsService(BaseAPIClient):
    """
    Core news service for NewsAPI operations.
    """

    def __init__(self, config: ProxyConfig):
        super().__init__(timeout=config.request_timeout)
        self.config = config

    @property
    def top_headlines_url(self) -> str:
        return f"{self.config.newsapi_base_url.rstrip('/')}/top-headlines"

    async def get_top_headlines(self, query: NewsQuery) -> ApiResult[NewsEnvelope]:
        """
        Fetch top headlines and normalize the articles.

        Args:
            query: Category, country and page size for the request

        Returns:
            ApiResult with a NewsEnvelope on success, otherwise the error.
        """
        api_key = self.config.news_api_key
        if not api_key:
            return ApiResult.failure(ConfigurationError(MISSING_KEY_DETAILS))

        logger.info(
            f"Fetching top headlines: category={query.category}, country={query.country}, "
            f"pageSize={query.page_size}"
        )
        result = await self._make_request(self.top_headlines_url, params=query.to_params(api_key))
        if not result.ok:
            return ApiResult.failure(result.error)

        try:
            payload = NewsApiTopHeadlinesResponse.model_validate(result.value)
        except ValidationError as e:
            logger.warning(f"Unexpected NewsAPI payload shape: {e.error_count()} errors")
            return ApiResult.failure(UpstreamError(UPSTREAM_FAILURE_DETAILS, body=result.value))

        if payload.status != "ok":
            return ApiResult.failure(
                UpstreamError(UPSTREAM_FAILURE_DETAILS, body=payload.provider_message or result.value)
            )

        articles = [self._process_article_item(item) for item in payload.articles or []]
        return ApiResult.success(
            NewsEnvelope(
                total_results=payload.total_results or len(articles),
                articles=articles,
            )
        )

    def _process_article_item(self, article: NewsApiArticle) -> NewsArticle:
        return NewsArticle.from_upstream(article)
