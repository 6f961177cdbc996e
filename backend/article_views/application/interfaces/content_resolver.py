"""Port for the host content-resolution service."""

from abc import ABC, abstractmethod

from article_views.domain.entities import Article, ContentRevision, Stage


class ContentResolver(ABC):
    """Resolves the dimension view of an article for a locale and stage."""

    @abstractmethod
    async def resolve(self, article: Article, locale: str, stage: Stage) -> ContentRevision:
        """Return the merged revision; raise when the article cannot be resolved."""
        ...
