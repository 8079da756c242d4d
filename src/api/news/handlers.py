"""
News-focused Firebase Functions handler.
Handles the /getNews top-headlines endpoint.
"""

import logging

from firebase_functions import https_fn

from adapters.config import ProxyConfig
from api.news.models import NewsQuery
from api.news.wrappers import NewsWrapper
from utils.cors import handle_cors
from utils.http_responses import json_response

# Configure logging
logger = logging.getLogger(__name__)


class NewsHandler:
    """HTTP handler for /getNews."""

    def __init__(self, config: ProxyConfig):
        self.wrapper = NewsWrapper(config)
        logger.info("NewsHandler initialized")

    async def get_news(self, req: https_fn.Request) -> https_fn.Response:
        """
        Get top headlines.

        Query Parameters:
        - category: NewsAPI category (default: business)
        - country: 2-letter country code (default: br)
        - pageSize: Number of articles (default: 10; invalid values use the default)

        Returns:
            200 {success, totalResults, articles} or 500 {success, error, details}
        """
        headers, preflight = handle_cors(req)
        if preflight is not None:
            return preflight

        query = NewsQuery.from_args(req.args)
        envelope = await self.wrapper.get_news(query)
        return json_response(envelope, headers)
