"""Shared fixtures — a small mixed-site, mixed-locale article set."""

import pytest

from article_views.application.services import (
    ArticleQueryComposer,
    ArticleService,
    ArticleViewResolver,
)
from article_views.domain.entities import ContentRevision, RequestContext, Stage
from article_views.infrastructure.content.revision_content_resolver import RevisionContentResolver

from fakes import FakeArticleRepository, FakeSiteResolver, make_article


@pytest.fixture
def request_context() -> RequestContext:
    return RequestContext(locale="en", scheme_and_host="https://blog.example.com", environment="test")


@pytest.fixture
def site_resolver() -> FakeSiteResolver:
    return FakeSiteResolver({"https://blog.example.com": "blog", "https://shop.example.com": "shop"})


@pytest.fixture
def mixed_articles():
    """8 live 'en' articles (6 blog, 2 shop), plus a draft and a German one."""
    articles = [make_article(n, site="blog") for n in range(1, 7)]
    articles += [make_article(n, site="shop", tags=("news",)) for n in (7, 8)]
    articles[0].revisions.append(
        ContentRevision(locale="de", stage=Stage.LIVE, title="Artikel 1", main_site="blog")
    )
    articles.append(make_article(9, stage=Stage.DRAFT))
    articles.append(make_article(10, locale="de"))
    return articles


@pytest.fixture
def repository(mixed_articles) -> FakeArticleRepository:
    return FakeArticleRepository(mixed_articles)


@pytest.fixture
def composer(repository, site_resolver, request_context) -> ArticleQueryComposer:
    return ArticleQueryComposer(repository, site_resolver, request_context)


@pytest.fixture
def article_service(composer, request_context) -> ArticleService:
    return ArticleService(composer, ArticleViewResolver(RevisionContentResolver(), request_context))
