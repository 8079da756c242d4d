"""
Shared fixtures for News service tests.
Payloads follow the NewsAPI /v2/top-headlines response format.
"""

import re

import pytest

NEWSAPI_URL = re.compile(r"^https://newsapi\.org/v2/top-headlines(\?.*)?$")


@pytest.fixture
def newsapi_url():
    return NEWSAPI_URL


@pytest.fixture
def mock_article_data():
    """Mock article data for testing."""
    return {
        "source": {"id": "globo", "name": "Globo"},
        "author": "Redação",
        "title": "Ibovespa fecha em alta",
        "description": "Índice sobe puxado por bancos",
        "url": "https://example.com/ibovespa",
        "urlToImage": "https://example.com/ibovespa.jpg",
        "publishedAt": "2024-01-15T10:30:00Z",
        "content": "Conteúdo...",
    }


@pytest.fixture
def mock_headlines_payload(mock_article_data):
    """A successful two-article reply."""
    return {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            mock_article_data,
            {
                "source": {"id": None, "name": "ESPN"},
                "author": None,
                "title": "Final do campeonato",
                "description": None,
                "url": "https://example.com/final",
                "urlToImage": None,
                "publishedAt": "2024-01-15T09:00:00Z",
                "content": None,
            },
        ],
    }


@pytest.fixture
def mock_error_payload():
    """NewsAPI failure shape."""
    return {
        "status": "error",
        "code": "apiKeyInvalid",
        "message": "Your API key is invalid or incorrect.",
    }
