from .article import Article, ContentRevision, Stage
from .article_filter import ArticleCriteria, ArticleFilter, FilterOperator
from .article_view import ArticleView, DegradedArticle, ResolvedArticle
from .pagination import ArticlePage, Pagination
from .request_context import RequestContext, negotiate_locale

__all__ = [
    "Article",
    "ContentRevision",
    "Stage",
    "ArticleCriteria",
    "ArticleFilter",
    "FilterOperator",
    "ArticleView",
    "DegradedArticle",
    "ResolvedArticle",
    "ArticlePage",
    "Pagination",
    "RequestContext",
    "negotiate_locale",
]
