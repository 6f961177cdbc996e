from .article_query_composer import ArticleQueryComposer
from .article_service import ArticleService
from .article_view_resolver import ArticleViewResolver

__all__ = [
    "ArticleQueryComposer",
    "ArticleService",
    "ArticleViewResolver",
]
