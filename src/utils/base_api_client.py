"""
Base API Client - Shared request handling for the provider services.

Every outbound call is a single GET: no retry, no cache, no rate limiting.
The outcome is returned as an ApiResult so callers never see transport
exceptions.
"""

import asyncio
import json
from typing import Any

import aiohttp

from contracts.errors import NetworkError, UpstreamError
from contracts.models import ApiResult
from utils.get_logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "market-feed-proxy/1.0"


class BaseAPIClient:
    """
    Base class for provider services.
    Holds the request timeout and performs the one outbound call per request.
    """

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    async def _make_request(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResult[Any]:
        """
        Make one async GET request and decode the JSON body.

        Args:
            url: URL to request
            params: Query parameters; values are percent-encoded by the client
            headers: Extra HTTP headers

        Returns:
            ApiResult holding the decoded JSON, or an UpstreamError for a
            non-2xx status or undecodable body, or a NetworkError when no
            response was received.
        """
        request_headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if headers:
            request_headers.update(headers)
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with (
                aiohttp.ClientSession(timeout=timeout) as session,
                session.get(url, params=params, headers=request_headers) as response,
            ):
                text = await response.text()
                body = _decode_body(text)

                if response.status < 200 or response.status >= 300:
                    return ApiResult.failure(
                        UpstreamError(
                            f"Request failed with status code {response.status}",
                            body=body,
                            status=response.status,
                        )
                    )

                if body is None or isinstance(body, str):
                    return ApiResult.failure(
                        UpstreamError(
                            "Upstream returned a non-JSON body",
                            body=text[:500] or None,
                            status=response.status,
                        )
                    )

                return ApiResult.success(body)

        except (TimeoutError, asyncio.TimeoutError):
            return ApiResult.failure(NetworkError(f"Request timed out after {self.timeout}s"))
        except aiohttp.ClientError as e:
            return ApiResult.failure(NetworkError(str(e) or type(e).__name__))


def _decode_body(text: str) -> Any:
    """JSON-decode a response body; return the raw text when it is not JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
