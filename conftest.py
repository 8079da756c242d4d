"""
Shared fixtures for the proxy function tests.
"""

from unittest.mock import MagicMock

import pytest
from firebase_functions import https_fn

from adapters.config import ProxyConfig

TEST_EXCHANGE_API_KEY = "test_exchange_key_12345"
TEST_NEWS_API_KEY = "test_newsapi_key_12345"


@pytest.fixture
def proxy_config() -> ProxyConfig:
    """Configuration with both credentials present."""
    return ProxyConfig(
        exchange_api_key=TEST_EXCHANGE_API_KEY,
        news_api_key=TEST_NEWS_API_KEY,
        request_timeout=5.0,
    )


@pytest.fixture
def empty_config() -> ProxyConfig:
    """Configuration with no credentials at all."""
    return ProxyConfig(request_timeout=5.0)


@pytest.fixture
def mock_request():
    """Create a mock Firebase Functions Request object."""

    def _create_mock_request(method: str = "GET", args: dict[str, str] | None = None):
        mock_req = MagicMock(spec=https_fn.Request)
        mock_req.method = method
        mock_req.args = dict(args or {})
        return mock_req

    return _create_mock_request
