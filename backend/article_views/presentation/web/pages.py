"""Server-rendered pages that use the article template functions."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from jinja2 import Environment

from article_views.application.services import ArticleService
from article_views.config import get_settings
from article_views.domain.entities import RequestContext
from article_views.infrastructure.dependencies import get_article_service, get_request_context
from article_views.presentation.templating import ArticleTemplateFunctions, get_template_environment

router = APIRouter(tags=["Pages"])


@router.get("/articles", response_class=HTMLResponse)
async def articles_page(
    tag: list[str] = Query(default=[]),
    category: list[str] = Query(default=[]),
    template: list[str] = Query(default=[]),
    service: ArticleService = Depends(get_article_service),
    context: RequestContext = Depends(get_request_context),
    templates: Environment = Depends(get_template_environment),
) -> HTMLResponse:
    """Render the article index page."""
    settings = get_settings()
    functions = ArticleTemplateFunctions(service, page_size=settings.article_page_size)
    html = await templates.get_template("articles/index.html").render_async(
        title="Articles",
        locale=context.locale,
        page_size=settings.article_page_size,
        tag_names=tag,
        category_keys=category,
        template_keys=template,
        **functions.as_globals(),
    )
    return HTMLResponse(html)
