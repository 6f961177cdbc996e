"""Tests for the article endpoints and the server-rendered index page."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from article_views.infrastructure.dependencies import get_article_service
from article_views.main import app


class BrokenArticleService:
    async def load_recent_paginated(self, **kwargs):
        raise RuntimeError("database is unavailable")


@pytest_asyncio.fixture
async def client(article_service):
    app.dependency_overrides[get_article_service] = lambda: article_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_recent_returns_html_and_pagination(client):
    response = await client.get("/api/v1/articles/recent", params={"offset": 0, "limit": 4})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["articlesCount"] == 4
    assert data["pagination"] == {
        "limit": 4,
        "offset": 0,
        "currentCount": 4,
        "totalCount": 6,
        "hasMore": True,
        "nextOffset": 4,
    }
    assert 'href="/articles/6"' in data["html"]
    assert 'href="/articles/2"' not in data["html"]


@pytest.mark.asyncio
async def test_recent_last_page(client):
    response = await client.get("/api/v1/articles/recent", params={"offset": 4, "limit": 4})

    data = response.json()
    assert data["articlesCount"] == 2
    assert data["pagination"]["hasMore"] is False


@pytest.mark.asyncio
async def test_recent_filters_by_template_type(client):
    response = await client.get("/api/v1/articles/recent", params={"type": "event, gallery"})

    data = response.json()
    assert data["success"] is True
    assert data["articlesCount"] == 0
    assert data["pagination"]["totalCount"] == 0


@pytest.mark.asyncio
async def test_recent_rejects_negative_offset(client):
    response = await client.get("/api/v1/articles/recent", params={"offset": -1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_recent_failure_returns_structured_error():
    app.dependency_overrides[get_article_service] = lambda: BrokenArticleService()
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/articles/recent")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "database is unavailable"}


@pytest.mark.asyncio
async def test_count(client):
    response = await client.get("/api/v1/articles/count")

    assert response.status_code == 200
    assert response.json() == {"count": 8}


@pytest.mark.asyncio
async def test_get_article(client):
    response = await client.get("/api/v1/articles/00000000-0000-0000-0000-000000000001", params={"locale": "de"})

    assert response.status_code == 200
    data = response.json()
    assert data["uuid"] == "00000000-0000-0000-0000-000000000001"
    assert data["title"] == "Artikel 1"
    assert data["locale"] == "de"
    assert data["error"] is None


@pytest.mark.asyncio
async def test_get_article_not_found(client):
    response = await client.get("/api/v1/articles/does-not-exist")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_articles_page_renders_first_page(client):
    response = await client.get("/articles")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "8 published" in response.text
    assert 'href="/articles/6"' in response.text
    assert 'href="/articles/7"' not in response.text
