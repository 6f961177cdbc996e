from .article_repository import ArticleRepository
from .content_resolver import ContentResolver
from .site_resolver import SiteResolver

__all__ = [
    "ArticleRepository",
    "ContentResolver",
    "SiteResolver",
]
