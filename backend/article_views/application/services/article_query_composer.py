"""Article query composition — turns a listing request into repository calls.

Two strategies serve a listing:

* native — no template/category/tag filter requested. One paginated query
  constrained on locale, stage and site; pagination happens in the
  storage engine.
* fallback — any dimension filter requested. The repository filter API
  returns the full matching set, which is re-filtered by site and sliced
  in memory. Cost grows with the size of the matching set, so callers
  must not assume constant-time pagination for filtered listings.
"""

import logging
from collections.abc import Mapping
from typing import Any

from article_views.application.interfaces import ArticleRepository, SiteResolver
from article_views.domain.entities import (
    Article,
    ArticleCriteria,
    ArticleFilter,
    Pagination,
    RequestContext,
    Stage,
)
from article_views.infrastructure.logging.query_logger import QueryLogger, QueryStage

logger = logging.getLogger(__name__)
qlog = QueryLogger("ArticleQueryComposer")


class ArticleQueryComposer:
    """Builds ordered, optionally paginated article result sets.

    Every query is pinned to the live stage. Locale defaults to the request
    context's locale; site filtering defaults to the site serving the
    current request.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        site_resolver: SiteResolver | None = None,
        context: RequestContext | None = None,
    ):
        self._repository = repository
        self._site_resolver = site_resolver
        self._context = context

    # ── Locale & site policy ─────────────────────────────────────────

    def resolve_locale(self, locale: str | None = None) -> str:
        if locale:
            return locale
        if self._context is not None and self._context.locale:
            return self._context.locale
        raise ValueError("No locale given and no request context to default from")

    def sites_to_filter(self, request: ArticleFilter) -> list[str]:
        """Effective site keys for ``request``; empty means no site constraint."""
        if request.ignore_site:
            return []
        if request.site_keys:
            return list(request.site_keys)
        if (
            self._site_resolver is None
            or self._context is None
            or not self._context.scheme_and_host
        ):
            return []

        try:
            site_key = self._site_resolver.find_site_key(
                self._context.scheme_and_host,
                self._context.environment,
            )
        except Exception as exc:
            logger.debug("Site resolution failed, not filtering by site: %s", exc)
            return []

        qlog.step(QueryStage.SITE, "Resolved current site", url=self._context.scheme_and_host, site=site_key)
        return [site_key] if site_key else []

    # ── Single article ───────────────────────────────────────────────

    async def find_by_identifier(self, uuid: str, locale: str | None = None) -> Article | None:
        """Return the article with ``uuid`` if it has a live revision in ``locale``."""
        criteria = ArticleCriteria(uuid=uuid, locale=self.resolve_locale(locale), stage=Stage.LIVE)
        return await self._repository.find_one_by(criteria)

    # ── Counting ─────────────────────────────────────────────────────

    async def count_matching(
        self,
        locale: str | None = None,
        extra_filters: Mapping[str, Any] | ArticleCriteria | None = None,
    ) -> int:
        """Count live articles in ``locale``, narrowed by caller-supplied filters."""
        criteria = ArticleCriteria(locale=self.resolve_locale(locale), stage=Stage.LIVE)
        if extra_filters:
            if not isinstance(extra_filters, ArticleCriteria):
                extra_filters = ArticleCriteria.from_mapping(extra_filters)
            criteria = criteria.merged(extra_filters)
        return await self._repository.count_by(criteria)

    async def count_recent(self, request: ArticleFilter) -> int:
        """Total number of articles ``request`` pages over."""
        request = request.with_locale(self.resolve_locale(request.locale))
        site_keys = self.sites_to_filter(request)

        if not request.has_dimension_filters:
            with qlog.timed(QueryStage.NATIVE, "Counting live articles", locale=request.locale, sites=site_keys):
                return await self._repository.count_live(request.locale, request.stage, site_keys)

        criteria = request.to_criteria()
        if not site_keys:
            with qlog.timed(QueryStage.FALLBACK, "Counting via filter API", locale=request.locale):
                return await self._repository.count_by(criteria)

        with qlog.timed(QueryStage.FALLBACK, "Counting via filter API + site re-filter", sites=site_keys):
            articles = await self._repository.find_by(criteria)
            return sum(1 for a in articles if a.is_assigned_to(site_keys, request.locale, request.stage))

    # ── Listings ─────────────────────────────────────────────────────

    async def find_recent(self, request: ArticleFilter) -> list[Article]:
        """Newest live articles, at most ``request.limit``, starting at ``request.offset``.

        Dimension filters switch to the in-memory fallback (see module docs).
        """
        request = request.with_locale(self.resolve_locale(request.locale))
        site_keys = self.sites_to_filter(request)

        if request.limit == 0:
            return []

        if not request.has_dimension_filters:
            with qlog.timed(
                QueryStage.NATIVE,
                "Listing live articles",
                locale=request.locale,
                limit=request.limit,
                offset=request.offset,
                sites=site_keys,
            ):
                return await self._repository.list_live(
                    request.locale,
                    request.stage,
                    site_keys,
                    request.limit,
                    request.offset,
                )

        with qlog.timed(
            QueryStage.FALLBACK,
            "Listing via filter API",
            templates=list(request.template_keys),
            categories=list(request.category_keys),
            tags=list(request.tag_names),
            sites=site_keys,
        ):
            articles = await self._repository.find_by(request.to_criteria())
            if site_keys:
                articles = [a for a in articles if a.is_assigned_to(site_keys, request.locale, request.stage)]
            return articles[request.offset : request.offset + request.limit]

    async def find_recent_paginated(self, request: ArticleFilter) -> tuple[list[Article], Pagination]:
        """One page of articles plus its envelope, computed from a separate count."""
        total = await self.count_recent(request)
        articles = await self.find_recent(request)
        pagination = Pagination(
            limit=request.limit,
            offset=request.offset,
            current_count=len(articles),
            total_count=total,
        )
        return articles, pagination
