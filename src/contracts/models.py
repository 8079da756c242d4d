from typing import Any, Generic, Literal, TypeVar

from pydantic import ConfigDict, Field

from contracts.errors import ProxyError, UpstreamError
from utils.pydantic_tools import BaseModelWithMethods

"""
Contract between the provider services, the wrappers and the browser client.

Services hand back ApiResult values; wrappers translate them into one of the
envelopes below, which the handlers serialize as-is.
"""

T = TypeVar("T")


class ApiResult(BaseModelWithMethods, Generic[T]):
    """Outcome of an outbound call or a parse step: a value or an error."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T | None = None
    error: ProxyError | None = None

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ProxyError) -> "ApiResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def details(self) -> str:
        return self.error.details if self.error is not None else ""

    @property
    def diagnostic(self) -> Any:
        """Most specific thing to log: the upstream body when there is one."""
        if isinstance(self.error, UpstreamError) and self.error.body is not None:
            return self.error.body
        return self.details


class ResponseEnvelope(BaseModelWithMethods):
    """Uniform wrapper every endpoint replies with."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    # HTTP status for the handler; never part of the JSON body
    status_code: int = Field(default=200, exclude=True)


class ErrorEnvelope(ResponseEnvelope):
    success: Literal[False] = False
    error: str
    details: str
    status_code: int = Field(default=500, exclude=True)

    @classmethod
    def from_result(cls, message: str, result: ApiResult[Any]) -> "ErrorEnvelope":
        return cls(error=message, details=result.details or message)

    @classmethod
    def from_exception(cls, message: str, exc: BaseException) -> "ErrorEnvelope":
        return cls(error=message, details=str(exc) or type(exc).__name__)
