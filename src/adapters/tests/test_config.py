"""
Unit tests for process configuration.
"""

import pytest
from pydantic import ValidationError

from adapters import config as config_module
from adapters.config import (
    DEFAULT_REQUEST_TIMEOUT,
    EXCHANGE_API_KEY,
    NEWS_API_KEY,
    ProxyConfig,
    get_config,
    read_secret,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("EXCHANGE_API_KEY", "NEWS_API_KEY", "PROXY_REQUEST_TIMEOUT", "FUNCTIONS_CONTROL_API"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENV_FILE", "/nonexistent/local.env")
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()


def test_from_env_reads_secrets(clean_env):
    clean_env.setenv("EXCHANGE_API_KEY", "av-key")
    clean_env.setenv("NEWS_API_KEY", "news-key")
    clean_env.setenv("PROXY_REQUEST_TIMEOUT", "12.5")

    config = ProxyConfig.from_env()

    assert config.exchange_api_key == "av-key"
    assert config.news_api_key == "news-key"
    assert config.request_timeout == 12.5


def test_missing_keys_are_not_a_startup_failure(clean_env):
    config = ProxyConfig.from_env()

    assert config.exchange_api_key is None
    assert config.news_api_key is None
    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT


def test_invalid_timeout_uses_default(clean_env):
    clean_env.setenv("PROXY_REQUEST_TIMEOUT", "soon")

    assert ProxyConfig.from_env().request_timeout == DEFAULT_REQUEST_TIMEOUT


def test_empty_secret_is_none(clean_env):
    clean_env.setenv("NEWS_API_KEY", "")

    assert read_secret(NEWS_API_KEY) is None


def test_secret_param_failure_falls_back_to_env(clean_env):
    class BrokenParam:
        name = "EXCHANGE_API_KEY"

        @property
        def value(self):
            raise RuntimeError("not available during deployment")

    clean_env.setenv("EXCHANGE_API_KEY", "from-env")

    assert read_secret(BrokenParam()) == "from-env"
    assert EXCHANGE_API_KEY.name == "EXCHANGE_API_KEY"


def test_config_is_frozen():
    config = ProxyConfig(news_api_key="a")

    with pytest.raises(ValidationError):
        config.news_api_key = "b"


def test_get_config_loads_once(clean_env):
    calls = []
    clean_env.setattr(config_module, "load_env", lambda: calls.append(1))

    first = get_config()
    second = get_config()

    assert first is second
    assert len(calls) == 1
