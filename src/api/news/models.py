"""
News Models - Pydantic models for NewsAPI top-headlines data structures
and the normalized article envelope.
"""

import re
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from contracts.models import ResponseEnvelope
from utils.pydantic_tools import BaseModelWithMethods

DEFAULT_CATEGORY = "business"
DEFAULT_COUNTRY = "br"
DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ============================================================================
# Upstream Models
# Shapes returned by NewsAPI; every field is optional and validated on receipt
# ============================================================================


def _scalar_or_none(value: Any) -> Any:
    """Keep strings and numbers (coerced to str by the model); anything else is null."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return None
    return value


class NewsSource(BaseModelWithMethods):
    """Model for news source information."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str | None = None
    name: str | None = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def scalar_fields(cls, value):
        return _scalar_or_none(value)


class NewsApiArticle(BaseModelWithMethods):
    """Model for a raw NewsAPI article. Odd field values degrade to null."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    source: NewsSource | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    content: str | None = None

    @field_validator("source", mode="before")
    @classmethod
    def source_must_be_object(cls, value):
        return value if isinstance(value, Mapping) else None

    @field_validator(
        "author",
        "title",
        "description",
        "url",
        "url_to_image",
        "published_at",
        "content",
        mode="before",
    )
    @classmethod
    def scalar_fields(cls, value):
        return _scalar_or_none(value)


class NewsApiTopHeadlinesResponse(BaseModelWithMethods):
    """
    Model for the top-headlines reply.

    Failures carry status "error" plus `code` and `message` instead of articles.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    status: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: list[NewsApiArticle] | None = None
    code: str | None = None
    message: str | None = None

    @field_validator("total_results", mode="before")
    @classmethod
    def count_or_none(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @property
    def provider_message(self) -> str | None:
        if self.code and self.message:
            return f"{self.code}: {self.message}"
        return self.message or self.code


# ============================================================================
# Normalized Models
# What the browser client receives
# ============================================================================


class NewsArticle(BaseModelWithMethods):
    """Normalized article; every field is present and possibly null."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    source: str | None = None

    @classmethod
    def from_upstream(cls, article: NewsApiArticle) -> "NewsArticle":
        """Flatten a NewsAPI article; empty strings become null."""
        source_name = article.source.name if article.source is not None else None
        return cls(
            title=article.title or None,
            description=article.description or None,
            url=article.url or None,
            url_to_image=article.url_to_image or None,
            published_at=article.published_at or None,
            source=source_name or None,
        )


class NewsEnvelope(ResponseEnvelope):
    success: Literal[True] = True
    total_results: int = Field(alias="totalResults")
    articles: list[NewsArticle] = Field(default_factory=list)


# ============================================================================
# Request Models
# ============================================================================


def parse_page_size(raw: Any, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Leading-integer parse of pageSize; anything unusable becomes `default`."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default


class NewsQuery(BaseModelWithMethods):
    """Query parameters for /getNews, with lenient defaults."""

    category: str = DEFAULT_CATEGORY
    country: str = DEFAULT_COUNTRY
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_args(cls, args: Mapping[str, Any] | None) -> "NewsQuery":
        args = args or {}
        return cls(
            category=args.get("category") or DEFAULT_CATEGORY,
            country=args.get("country") or DEFAULT_COUNTRY,
            page_size=parse_page_size(args.get("pageSize")),
        )

    def to_params(self, api_key: str) -> dict[str, str]:
        return {
            "category": self.category,
            "country": self.country,
            "pageSize": str(self.page_size),
            "apiKey": api_key,
        }
