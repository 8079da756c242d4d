"""
News Service Package - NewsAPI top-headlines proxy.

This package provides:
- NewsService: Core service class for NewsAPI operations
- NewsWrapper: translation of service results into response envelopes
- NewsHandler: Firebase Functions handler for /getNews
- Models: Pydantic models for the upstream and normalized shapes
"""

from api.news.core import NewsService
from api.news.handlers import NewsHandler
from api.news.models import (
    NewsApiArticle,
    NewsApiTopHeadlinesResponse,
    NewsArticle,
    NewsEnvelope,
    NewsQuery,
    NewsSource,
)
from api.news.wrappers import NewsWrapper

__all__ = [
    # Services
    "NewsService",
    # Wrappers
    "NewsWrapper",
    # Handlers
    "NewsHandler",
    # Models
    "NewsApiArticle",
    "NewsApiTopHeadlinesResponse",
    "NewsArticle",
    "NewsEnvelope",
    "NewsQuery",
    "NewsSource",
]
