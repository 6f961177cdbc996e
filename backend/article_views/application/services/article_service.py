"""Application service (use case) for loading article views."""

from collections.abc import Iterable, Mapping
from typing import Any

from article_views.application.services.article_query_composer import ArticleQueryComposer
from article_views.application.services.article_view_resolver import ArticleViewResolver
from article_views.domain.entities import ArticleFilter, ArticlePage, ArticleView
from article_views.domain.exceptions import EntityNotFoundError


class ArticleService:
    """Loads live articles and resolves them for presentation.

    Depends on the query composer and the view resolver (DI); owns no state
    beyond them, so one instance per request is the expected lifetime.
    """

    def __init__(self, composer: ArticleQueryComposer, view_resolver: ArticleViewResolver):
        self._composer = composer
        self._views = view_resolver

    async def get_article(self, uuid: str, locale: str | None = None) -> ArticleView:
        view = await self.load_by_uuid(uuid, locale)
        if view is None:
            raise EntityNotFoundError("Article", uuid)
        return view

    async def load_by_uuid(self, uuid: str, locale: str | None = None) -> ArticleView | None:
        locale = self._composer.resolve_locale(locale)
        article = await self._composer.find_by_identifier(uuid, locale)
        if article is None:
            return None
        return await self._views.resolve(article, locale)

    async def count_published(
        self,
        locale: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        return await self._composer.count_matching(locale, filters)

    async def load_recent(
        self,
        limit: int = 12,
        template_keys: Iterable[str] = (),
        locale: str | None = None,
        ignore_site: bool = False,
        category_keys: Iterable[str] = (),
        tag_names: Iterable[str] = (),
        site_keys: Iterable[str] = (),
    ) -> list[ArticleView]:
        """Newest live articles, resolved. Always starts at offset 0."""
        locale = self._composer.resolve_locale(locale)
        request = ArticleFilter(
            locale=locale,
            limit=limit,
            offset=0,
            template_keys=tuple(template_keys),
            category_keys=tuple(category_keys),
            tag_names=tuple(tag_names),
            site_keys=tuple(site_keys),
            ignore_site=ignore_site,
        )
        articles = await self._composer.find_recent(request)
        return await self._views.resolve_many(articles, locale)

    async def load_recent_paginated(
        self,
        limit: int = 12,
        offset: int = 0,
        template_keys: Iterable[str] = (),
        locale: str | None = None,
        ignore_site: bool = False,
        category_keys: Iterable[str] = (),
        tag_names: Iterable[str] = (),
        site_keys: Iterable[str] = (),
    ) -> ArticlePage:
        """One page of resolved articles with its pagination envelope.

        With template, category or tag filters the page is cut in memory
        from the full matching set.
        """
        locale = self._composer.resolve_locale(locale)
        request = ArticleFilter(
            locale=locale,
            limit=limit,
            offset=offset,
            template_keys=tuple(template_keys),
            category_keys=tuple(category_keys),
            tag_names=tuple(tag_names),
            site_keys=tuple(site_keys),
            ignore_site=ignore_site,
        )
        articles, pagination = await self._composer.find_recent_paginated(request)
        views = await self._views.resolve_many(articles, locale)

        return ArticlePage(
            articles=views,
            pagination=pagination,
            debug={
                "total_articles_found": pagination.total_count,
                "requested_offset": offset,
                "requested_limit": limit,
                "site_filtering": not ignore_site,
                "site_keys": list(request.site_keys),
            },
        )
