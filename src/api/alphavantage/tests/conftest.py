"""
Shared fixtures for Alpha Vantage tests.
Payloads mirror what CURRENCY_EXCHANGE_RATE returns for USD to BRL.
"""

import re

import pytest

ALPHAVANTAGE_URL = re.compile(r"^https://www\.alphavantage\.co/query(\?.*)?$")


@pytest.fixture
def alphavantage_url():
    return ALPHAVANTAGE_URL


@pytest.fixture
def mock_rate_payload():
    """A realistic successful reply."""
    return {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "USD",
            "2. From_Currency Name": "United States Dollar",
            "3. To_Currency Code": "BRL",
            "4. To_Currency Name": "Brazilian Real",
            "5. Exchange Rate": "5.23000000",
            "6. Last Refreshed": "2024-01-15 10:30:01",
            "7. Time Zone": "UTC",
            "8. Bid Price": "5.22990000",
            "9. Ask Price": "5.23010000",
        }
    }


@pytest.fixture
def mock_quota_payload():
    """Alpha Vantage answers quota exhaustion with HTTP 200 and a note."""
    return {
        "Information": "Thank you for using Alpha Vantage! Our standard API rate limit is "
        "25 requests per day."
    }
