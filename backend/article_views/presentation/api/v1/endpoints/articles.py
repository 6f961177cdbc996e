"""Article read endpoints — AJAX listing, count and single-article lookup."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from jinja2 import Environment

from article_views.application.schemas import (
    ArticleCountResponse,
    ArticleListError,
    ArticleListResponse,
    ArticleViewResponse,
    PaginationSchema,
)
from article_views.application.services import ArticleService
from article_views.config import get_settings
from article_views.domain.exceptions import EntityNotFoundError
from article_views.infrastructure.dependencies import get_article_service
from article_views.presentation.templating import get_template_environment, render_article_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@router.get(
    "/recent",
    response_model=ArticleListResponse,
    responses={500: {"model": ArticleListError}},
)
async def load_recent_articles(
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=100),
    template_type: str | None = Query(None, alias="type", description="Comma-separated template keys"),
    locale: str | None = Query(None),
    service: ArticleService = Depends(get_article_service),
    templates: Environment = Depends(get_template_environment),
):
    """Render the next page of articles for infinite scrolling / "load more"."""
    try:
        page = await service.load_recent_paginated(
            limit=limit or get_settings().article_page_size,
            offset=offset,
            template_keys=_split_csv(template_type),
            locale=locale,
        )
        html = await render_article_list(templates, page)
    except Exception as e:
        logger.exception("Failed to load recent articles (offset=%s, limit=%s)", offset, limit)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ArticleListError(error=str(e)).model_dump(),
        )

    return ArticleListResponse(
        html=html,
        pagination=PaginationSchema.from_domain(page.pagination),
        articles_count=len(page.articles),
    )


@router.get("/count", response_model=ArticleCountResponse)
async def count_published_articles(
    locale: str | None = Query(None),
    service: ArticleService = Depends(get_article_service),
) -> ArticleCountResponse:
    """Count the live articles in a locale."""
    return ArticleCountResponse(count=await service.count_published(locale))


@router.get("/{uuid}", response_model=ArticleViewResponse)
async def get_article(
    uuid: str,
    locale: str | None = Query(None),
    service: ArticleService = Depends(get_article_service),
) -> ArticleViewResponse:
    """Retrieve one live article, resolved for the locale."""
    try:
        view = await service.get_article(uuid, locale)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleViewResponse.model_validate(view, from_attributes=True)
