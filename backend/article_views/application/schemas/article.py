"""Pydantic DTOs (Data Transfer Objects) for the article endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from article_views.domain.entities import Pagination


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationSchema(_CamelModel):
    """Pagination envelope returned with every article listing."""

    limit: int
    offset: int
    current_count: int
    total_count: int
    has_more: bool
    next_offset: int

    @classmethod
    def from_domain(cls, pagination: Pagination) -> "PaginationSchema":
        return cls(**pagination.as_dict())


class ArticleViewResponse(_CamelModel):
    """A resolved (or degraded) article view."""

    uuid: str
    id: int | None = None
    title: str
    description: str = ""
    excerpt_title: str = ""
    excerpt_more: str = ""
    url: str | None = None
    template: str | None = None
    stage: str | None = None
    locale: str | None = None
    published: bool | None = None
    workflow_place: str | None = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    created: datetime | None = None
    changed: datetime | None = None
    content: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


class ArticleListResponse(_CamelModel):
    """AJAX listing payload: rendered HTML plus pagination."""

    success: bool = True
    html: str
    pagination: PaginationSchema
    articles_count: int


class ArticleListError(BaseModel):
    """Body returned when a listing request fails."""

    success: bool = False
    error: str


class ArticleCountResponse(BaseModel):
    count: int
