"""Unit tests for ArticleQueryComposer — path selection, site policy, pagination."""

import pytest

from article_views.application.services import ArticleQueryComposer
from article_views.domain.entities import ArticleCriteria, ArticleFilter, RequestContext
from article_views.domain.exceptions import SiteResolutionError

from fakes import FakeArticleRepository, FakeSiteResolver, make_article


def _ids(articles) -> list[int]:
    return [a.id for a in articles]


# ── Path selection ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_no_dimension_filters_uses_native_query(composer, repository):
    articles = await composer.find_recent(ArticleFilter(limit=3))

    assert repository.calls == ["list_live"]
    assert _ids(articles) == [6, 5, 4]


@pytest.mark.asyncio
async def test_dimension_filters_use_filter_api(composer, repository):
    await composer.find_recent(ArticleFilter(limit=3, template_keys=("default",)))

    assert repository.calls == ["find_by"]


@pytest.mark.asyncio
async def test_native_and_fallback_paths_agree():
    articles = [make_article(n, site="blog" if n % 3 else "shop") for n in range(1, 16)]
    context = RequestContext(locale="en", scheme_and_host="https://blog.example.com")
    composer = ArticleQueryComposer(
        FakeArticleRepository(articles),
        FakeSiteResolver({"https://blog.example.com": "blog"}),
        context,
    )

    for offset in (0, 4, 8, 12):
        native = await composer.find_recent(ArticleFilter(limit=4, offset=offset))
        fallback = await composer.find_recent(
            ArticleFilter(limit=4, offset=offset, template_keys=("default",))
        )
        assert _ids(native) == _ids(fallback)
        assert len(native) <= 4

    assert await composer.count_recent(ArticleFilter()) == await composer.count_recent(
        ArticleFilter(template_keys=("default",))
    )


# ── Pagination ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_tag_filter_scenario_twenty_articles_five_news():
    articles = [make_article(n, tags=("news",) if n % 4 == 0 else ()) for n in range(1, 21)]
    composer = ArticleQueryComposer(FakeArticleRepository(articles), context=RequestContext(locale="en"))

    found, pagination = await composer.find_recent_paginated(
        ArticleFilter(limit=6, offset=0, tag_names=("news",))
    )

    assert len(found) == 5
    assert all("news" in a.revision_for("en").tags for a in found)
    assert pagination.total_count == 5
    assert pagination.has_more is False


@pytest.mark.asyncio
async def test_full_page_has_no_more():
    articles = [make_article(n) for n in range(1, 13)]
    composer = ArticleQueryComposer(FakeArticleRepository(articles), context=RequestContext(locale="en"))

    found, pagination = await composer.find_recent_paginated(ArticleFilter(limit=12, offset=0))

    assert len(found) == 12
    assert pagination.has_more is False
    assert pagination.next_offset == 12
    assert pagination.current_count == 12


@pytest.mark.asyncio
async def test_envelope_reports_more_pages(composer):
    found, pagination = await composer.find_recent_paginated(ArticleFilter(limit=4, offset=0))

    assert _ids(found) == [6, 5, 4, 3]
    assert pagination.total_count == 6
    assert pagination.has_more is True
    assert pagination.next_offset == 4


@pytest.mark.asyncio
async def test_offset_past_the_end_returns_empty_page(composer):
    found, pagination = await composer.find_recent_paginated(
        ArticleFilter(limit=4, offset=40, template_keys=("default",))
    )

    assert found == []
    assert pagination.current_count == 0
    assert pagination.has_more is False


@pytest.mark.asyncio
async def test_zero_limit_returns_nothing(composer, repository):
    assert await composer.find_recent(ArticleFilter(limit=0)) == []
    assert repository.calls == []


# ── Site policy ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_current_site_is_inferred_from_request(composer, site_resolver):
    articles = await composer.find_recent(ArticleFilter(limit=20))

    assert _ids(articles) == [6, 5, 4, 3, 2, 1]
    assert site_resolver.lookups == [("https://blog.example.com", "test")]


@pytest.mark.asyncio
async def test_explicit_site_keys_win_over_request_site(composer, site_resolver):
    articles = await composer.find_recent(ArticleFilter(limit=20, site_keys=("shop",)))

    assert _ids(articles) == [8, 7]
    assert all(a.revision_for("en").main_site == "shop" for a in articles)
    assert site_resolver.lookups == []


@pytest.mark.asyncio
async def test_ignore_site_returns_every_site(composer, site_resolver):
    articles = await composer.find_recent(ArticleFilter(limit=20, ignore_site=True, site_keys=("shop",)))

    assert _ids(articles) == [8, 7, 6, 5, 4, 3, 2, 1]
    assert site_resolver.lookups == []


@pytest.mark.asyncio
async def test_site_filter_reapplied_in_memory_on_fallback(composer):
    blog_news = await composer.find_recent(ArticleFilter(limit=20, tag_names=("news",)))
    shop_news = await composer.find_recent(
        ArticleFilter(limit=20, tag_names=("news",), site_keys=("shop",))
    )

    assert blog_news == []
    assert _ids(shop_news) == [8, 7]


@pytest.mark.asyncio
async def test_site_resolution_failure_means_no_site_constraint(repository, request_context):
    composer = ArticleQueryComposer(
        repository,
        FakeSiteResolver(error=SiteResolutionError("https://blog.example.com", "boom")),
        request_context,
    )

    articles = await composer.find_recent(ArticleFilter(limit=20))

    assert _ids(articles) == [8, 7, 6, 5, 4, 3, 2, 1]


@pytest.mark.asyncio
async def test_unknown_host_means_no_site_constraint(repository):
    composer = ArticleQueryComposer(
        repository,
        FakeSiteResolver({}),
        RequestContext(locale="en", scheme_and_host="https://elsewhere.example.com"),
    )

    assert await composer.count_recent(ArticleFilter()) == 8


# ── Counting ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_fallback_count_with_site_counts_in_memory(composer, repository):
    total = await composer.count_recent(ArticleFilter(tag_names=("news",), site_keys=("shop",)))

    assert total == 2
    assert repository.calls == ["find_by"]


@pytest.mark.asyncio
async def test_fallback_count_without_site_uses_count_api(composer, repository):
    total = await composer.count_recent(ArticleFilter(tag_names=("news",), ignore_site=True))

    assert total == 2
    assert repository.calls == ["count_by"]


@pytest.mark.asyncio
async def test_count_matching_is_consistent_with_listing(composer):
    total = await composer.count_matching()
    listed = await composer.find_recent(ArticleFilter(limit=total, ignore_site=True))

    assert total == 8
    assert total >= len(listed)


@pytest.mark.asyncio
async def test_count_matching_merges_extra_filters(composer):
    assert await composer.count_matching("en", {"tagNames": ["news"]}) == 2
    assert await composer.count_matching("en", ArticleCriteria(template_keys=("other",))) == 0
    assert await composer.count_matching("de") == 2


@pytest.mark.asyncio
async def test_count_matching_rejects_unknown_filters(composer):
    with pytest.raises(ValueError):
        await composer.count_matching("en", {"author": "someone"})


# ── Locale & identifier ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_find_by_identifier_defaults_to_request_locale(composer):
    article = await composer.find_by_identifier("00000000-0000-0000-0000-000000000003")

    assert article is not None
    assert article.id == 3


@pytest.mark.asyncio
async def test_find_by_identifier_ignores_drafts_and_other_locales(composer):
    assert await composer.find_by_identifier("00000000-0000-0000-0000-000000000009") is None
    assert await composer.find_by_identifier("00000000-0000-0000-0000-000000000010") is None
    assert await composer.find_by_identifier("00000000-0000-0000-0000-000000000010", "de") is not None


@pytest.mark.asyncio
async def test_missing_locale_without_context_is_an_error(repository):
    composer = ArticleQueryComposer(repository)

    with pytest.raises(ValueError):
        await composer.find_recent(ArticleFilter())


@pytest.mark.asyncio
async def test_equal_timestamps_break_ties_by_id():
    created = make_article(0).created
    articles = [make_article(n, created=created) for n in (3, 1, 2)]
    composer = ArticleQueryComposer(FakeArticleRepository(articles), context=RequestContext(locale="en"))

    native = await composer.find_recent(ArticleFilter(limit=3))
    fallback = await composer.find_recent(ArticleFilter(limit=3, template_keys=("default",)))

    assert _ids(native) == _ids(fallback) == [3, 2, 1]
