"""
Error taxonomy shared by the provider packages.

Services return these inside an ApiResult rather than raising them; the
wrappers turn a failed result into an ErrorEnvelope.
"""

from typing import Any


class ProxyError(Exception):
    """Base class; `details` is the diagnostic string sent to the caller."""

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details


class ConfigurationError(ProxyError):
    """A provider credential is missing from the process configuration."""


class UpstreamError(ProxyError):
    """The provider answered, but with a failure status or an unexpected shape."""

    def __init__(self, details: str, body: Any = None, status: int | None = None):
        super().__init__(details)
        self.body = body
        self.status = status


class NetworkError(ProxyError):
    """The outbound call failed before a response was received."""


class ParseError(ProxyError):
    """A single field could not be parsed. Degrades the field, never the request."""
