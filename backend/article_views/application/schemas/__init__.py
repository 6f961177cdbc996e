from .article import (
    ArticleCountResponse,
    ArticleListError,
    ArticleListResponse,
    ArticleViewResponse,
    PaginationSchema,
)

__all__ = [
    "ArticleCountResponse",
    "ArticleListError",
    "ArticleListResponse",
    "ArticleViewResponse",
    "PaginationSchema",
]
