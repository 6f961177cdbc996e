"""Unit tests for ArticleViewResolver and the revision-backed content resolver."""

import pytest

from article_views.application.interfaces import ContentResolver
from article_views.application.services import ArticleViewResolver
from article_views.domain.entities import ContentRevision, RequestContext, Stage
from article_views.domain.exceptions import ContentResolutionError
from article_views.infrastructure.content.revision_content_resolver import RevisionContentResolver

from fakes import make_article


class FailingContentResolver(ContentResolver):
    async def resolve(self, article, locale, stage):
        raise RuntimeError("template 'legacy' is not registered")


@pytest.fixture
def resolver() -> ArticleViewResolver:
    return ArticleViewResolver(RevisionContentResolver(), RequestContext(locale="en"))


@pytest.mark.asyncio
async def test_resolves_live_revision(resolver):
    article = make_article(3, categories=("tech",), tags=("news", "ai"))

    view = await resolver.resolve(article)

    assert view.is_degraded is False
    assert view.uuid == article.uuid
    assert view.id == 3
    assert view.title == "Article 3"
    assert view.description == "Summary 3"
    assert view.url == "/articles/3"
    assert view.template == "default"
    assert view.stage == "live"
    assert view.locale == "en"
    assert view.published is True
    assert view.workflow_place == "published"
    assert view.categories == ["tech"]
    assert view.tags == ["news", "ai"]
    assert view.created == article.created
    assert view.content == {"url": "/articles/3", "body": "Body 3"}
    assert view.article is article
    assert view.revision.locale == "en"


@pytest.mark.asyncio
async def test_missing_title_and_excerpt_fall_back(resolver):
    article = make_article(1, title="")
    article.revisions[0].excerpt_description = None
    article.revisions[0].template_data = {}

    view = await resolver.resolve(article)

    assert view.title == "untitled"
    assert view.description == ""
    assert view.excerpt_more == ""
    assert view.url is None


@pytest.mark.asyncio
async def test_unlocalized_revision_fills_gaps():
    unlocalized = ContentRevision(
        locale=None,
        stage=Stage.LIVE,
        template_key="default",
        template_data={"url": "/shared", "hero": "image.png"},
        excerpt_more="Read more",
    )
    article = make_article(2, extra_revisions=(unlocalized,))
    article.revisions[0].template_data = {"url": "/en/article-2"}

    view = await ArticleViewResolver(RevisionContentResolver()).resolve(article, "en")

    assert view.excerpt_more == "Read more"
    assert view.url == "/en/article-2"
    assert view.content == {"url": "/en/article-2", "hero": "image.png"}


@pytest.mark.asyncio
async def test_revision_resolver_raises_for_missing_dimension():
    with pytest.raises(ContentResolutionError):
        await RevisionContentResolver().resolve(make_article(1), "fr", Stage.LIVE)


@pytest.mark.asyncio
async def test_failed_resolution_degrades_instead_of_raising():
    article = make_article(5)
    resolver = ArticleViewResolver(FailingContentResolver(), RequestContext(locale="en"))

    view = await resolver.resolve(article)

    assert view.is_degraded is True
    assert view.uuid == article.uuid
    assert view.id == 5
    assert article.uuid in view.title
    assert "legacy" in view.description
    assert view.url is None
    assert view.content == {}
    assert view.error == "template 'legacy' is not registered"
    assert view.as_dict()["_error"] == view.error


@pytest.mark.asyncio
async def test_unknown_locale_degrades(resolver):
    view = await resolver.resolve(make_article(4), "fr")

    assert view.is_degraded is True
    assert "fr" in view.error


@pytest.mark.asyncio
async def test_one_bad_article_does_not_break_the_batch(resolver):
    good, bad = make_article(1), make_article(2, locale="de")

    views = await resolver.resolve_many([good, bad])

    assert [v.is_degraded for v in views] == [False, True]
