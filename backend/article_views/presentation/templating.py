"""Jinja2 integration — environment setup and the article template functions.

Templates call the functions below directly, e.g.::

    {% set page = article_load_recent_paginated(limit=6, tag_names=["news"]) %}
    {% for article in page.articles %}{{ article.title }}{% endfor %}

The environment runs in async mode, so the coroutine results are awaited
by Jinja itself. Functions are bound per request (they carry the request's
ArticleService) and passed as render context, never as environment globals.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from article_views.application.services import ArticleService
from article_views.config import get_settings
from article_views.domain.entities import ArticlePage, ArticleView

logger = logging.getLogger(__name__)


def create_template_environment(templates_dir: str) -> Environment:
    """Create the async Jinja2 environment for article templates."""
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
        enable_async=True,
    )


@lru_cache
def get_template_environment() -> Environment:
    """Cached environment — FastAPI dependency for endpoints that render HTML."""
    return create_template_environment(get_settings().templates_dir)


class ArticleTemplateFunctions:
    """Template-callable article loaders bound to one request's service."""

    def __init__(self, service: ArticleService, page_size: int = 12):
        self._service = service
        self._page_size = page_size

    async def load_by_uuid(self, uuid: str, locale: str | None = None) -> ArticleView | None:
        return await self._service.load_by_uuid(uuid, locale)

    async def count_published(
        self,
        locale: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> int:
        return await self._service.count_published(locale, filters)

    async def load_recent(
        self,
        limit: int | None = None,
        template_keys: Iterable[str] = (),
        locale: str | None = None,
        ignore_site: bool = False,
        category_keys: Iterable[str] = (),
        tag_names: Iterable[str] = (),
        site_keys: Iterable[str] = (),
    ) -> list[ArticleView]:
        return await self._service.load_recent(
            limit=self._page_size if limit is None else limit,
            template_keys=template_keys,
            locale=locale,
            ignore_site=ignore_site,
            category_keys=category_keys,
            tag_names=tag_names,
            site_keys=site_keys,
        )

    async def load_recent_paginated(
        self,
        limit: int | None = None,
        offset: int = 0,
        template_keys: Iterable[str] = (),
        locale: str | None = None,
        ignore_site: bool = False,
        category_keys: Iterable[str] = (),
        tag_names: Iterable[str] = (),
        site_keys: Iterable[str] = (),
    ) -> ArticlePage:
        return await self._service.load_recent_paginated(
            limit=self._page_size if limit is None else limit,
            offset=offset,
            template_keys=template_keys,
            locale=locale,
            ignore_site=ignore_site,
            category_keys=category_keys,
            tag_names=tag_names,
            site_keys=site_keys,
        )

    def as_globals(self) -> dict[str, Callable[..., Any]]:
        """Template names → bound functions, ready to merge into a render context."""
        return {
            "article_load_by_uuid": self.load_by_uuid,
            "article_count_published": self.count_published,
            "article_load_recent": self.load_recent,
            "article_load_recent_paginated": self.load_recent_paginated,
        }


async def render_article_list(env: Environment, page: ArticlePage) -> str:
    """Render the listing partial used by the AJAX endpoint."""
    template = env.get_template("articles/_list.html")
    return await template.render_async(
        articles=page.articles,
        pagination=page.pagination,
    )
