"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from article_views.config import get_settings
from article_views.application.interfaces import SiteResolver
from article_views.application.services import (
    ArticleQueryComposer,
    ArticleService,
    ArticleViewResolver,
)
from article_views.domain.entities import RequestContext, negotiate_locale
from article_views.infrastructure.content.revision_content_resolver import RevisionContentResolver
from article_views.infrastructure.database.session import get_db_session
from article_views.infrastructure.database.repositories import SQLAlchemyArticleRepository
from article_views.infrastructure.sites.configured_site_resolver import ConfiguredSiteResolver


def get_request_context(request: Request) -> RequestContext:
    """Locale, base URL and environment of the current request."""
    settings = get_settings()
    locale = negotiate_locale(
        request.headers.get("accept-language"),
        settings.supported_locales,
        settings.default_locale,
    )
    return RequestContext(
        locale=locale,
        scheme_and_host=f"{request.url.scheme}://{request.url.netloc}",
        environment=settings.app_env,
    )


def get_site_resolver() -> SiteResolver:
    """Provides the site resolver built from the configured site table."""
    return ConfiguredSiteResolver(get_settings().sites)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
    context: RequestContext = Depends(get_request_context),
    site_resolver: SiteResolver = Depends(get_site_resolver),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService bound to this request's session and context."""
    repository = SQLAlchemyArticleRepository(session)
    composer = ArticleQueryComposer(repository, site_resolver, context)
    view_resolver = ArticleViewResolver(RevisionContentResolver(), context)
    yield ArticleService(composer, view_resolver)
