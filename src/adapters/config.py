"""
Process configuration for the proxy functions.

Provider credentials are Firebase secrets. Outside the Functions runtime
(tests, local scripts) they fall back to environment variables, which
load_env() can populate from a dotenv file.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from firebase_functions.params import SecretParam
from pydantic import ConfigDict

from utils.get_logger import get_logger
from utils.pydantic_tools import BaseModelWithMethods

logger = get_logger(__name__)

EXCHANGE_API_KEY = SecretParam("EXCHANGE_API_KEY")
NEWS_API_KEY = SecretParam("NEWS_API_KEY")

ALPHAVANTAGE_BASE_URL = "https://www.alphavantage.co/query"
NEWSAPI_BASE_URL = "https://newsapi.org/v2"
DEFAULT_REQUEST_TIMEOUT = 30.0


def load_env():
    """Load environment variables from env file.

    Defaults to config/local.env for local development.
    Set ENV_FILE environment variable to override.
    """
    env = os.getenv("ENV_FILE", "config/local.env")
    load_dotenv(env)


def read_secret(param: SecretParam) -> str | None:
    """Resolve a secret from Firebase, falling back to the environment."""
    value = None
    try:
        value = param.value
    except Exception as e:
        logger.warning(f"SecretParam {param.name} unavailable ({e}), using environment")
    return value or os.getenv(param.name) or None


def _read_timeout() -> float:
    raw = os.getenv("PROXY_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid PROXY_REQUEST_TIMEOUT={raw!r}")
        return DEFAULT_REQUEST_TIMEOUT


class ProxyConfig(BaseModelWithMethods):
    """Read-only settings shared by both handlers. Missing keys are allowed."""

    model_config = ConfigDict(frozen=True)

    exchange_api_key: str | None = None
    news_api_key: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    alphavantage_base_url: str = ALPHAVANTAGE_BASE_URL
    newsapi_base_url: str = NEWSAPI_BASE_URL

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        config = cls(
            exchange_api_key=read_secret(EXCHANGE_API_KEY),
            news_api_key=read_secret(NEWS_API_KEY),
            request_timeout=_read_timeout(),
        )
        logger.info(
            "ProxyConfig loaded (exchange key: %s, news key: %s, timeout: %ss)",
            "set" if config.exchange_api_key else "missing",
            "set" if config.news_api_key else "missing",
            config.request_timeout,
        )
        return config


@lru_cache(maxsize=1)
def get_config() -> ProxyConfig:
    """Build the process-wide configuration on first use."""
    load_env()
    return ProxyConfig.from_env()
