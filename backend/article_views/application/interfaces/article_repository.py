"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_views.domain.entities import Article, ArticleCriteria, Stage


class ArticleRepository(ABC):
    """Port for read access to articles — implemented in the infrastructure layer.

    Two query surfaces are exposed. ``find_by`` / ``count_by`` form the
    general filter API (templates, categories, tags) and are unpaginated.
    ``list_live`` / ``count_live`` are the native paginated queries, limited
    to locale, stage and site constraints.

    Returned articles carry their revisions; results are ordered newest
    created first, ties broken by descending id.
    """

    @abstractmethod
    async def find_one_by(self, criteria: ArticleCriteria) -> Article | None:
        """Return the first article matching ``criteria``, or None."""
        ...

    @abstractmethod
    async def find_by(self, criteria: ArticleCriteria) -> list[Article]:
        """Return every article matching ``criteria``."""
        ...

    @abstractmethod
    async def count_by(self, criteria: ArticleCriteria) -> int:
        """Count the articles matching ``criteria``."""
        ...

    @abstractmethod
    async def list_live(
        self,
        locale: str,
        stage: Stage,
        site_keys: list[str],
        limit: int,
        offset: int = 0,
    ) -> list[Article]:
        """Fetch one page of articles with a revision in (locale, stage).

        An empty ``site_keys`` applies no site constraint.
        """
        ...

    @abstractmethod
    async def count_live(self, locale: str, stage: Stage, site_keys: list[str]) -> int:
        """Count the articles ``list_live`` would page over."""
        ...
