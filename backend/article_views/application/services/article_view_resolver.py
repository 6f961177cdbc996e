"""Maps articles to display-ready views via the content-resolution port."""

from article_views.application.interfaces import ContentResolver
from article_views.domain.entities import (
    Article,
    ArticleView,
    DegradedArticle,
    RequestContext,
    ResolvedArticle,
    Stage,
)
from article_views.infrastructure.logging.query_logger import QueryLogger, QueryStage

qlog = QueryLogger("ArticleViewResolver")

UNTITLED = "untitled"


class ArticleViewResolver:
    """Resolves one article's live content for a locale.

    Never raises for a failed resolution: the article comes back as a
    ``DegradedArticle`` so a listing keeps rendering around it.
    """

    def __init__(self, content_resolver: ContentResolver, context: RequestContext | None = None):
        self._content_resolver = content_resolver
        self._context = context

    async def resolve(self, article: Article, locale: str | None = None) -> ArticleView:
        if not locale and self._context is not None:
            locale = self._context.locale

        try:
            revision = await self._content_resolver.resolve(article, locale, Stage.LIVE)
            template_data = dict(revision.template_data or {})
            return ResolvedArticle(
                uuid=article.uuid,
                id=article.id,
                title=revision.title or UNTITLED,
                description=revision.excerpt_description or "",
                excerpt_title=revision.excerpt_title or "",
                excerpt_more=revision.excerpt_more or "",
                url=template_data.get("url"),
                template=revision.template_key,
                stage=Stage(revision.stage).value,
                locale=revision.locale,
                published=revision.workflow_published,
                workflow_place=revision.workflow_place,
                categories=list(revision.categories),
                tags=list(revision.tags),
                created=article.created,
                changed=article.changed,
                content=template_data,
                article=article,
                revision=revision,
            )
        except Exception as exc:
            qlog.warning(QueryStage.RESOLVE, f"Could not resolve article {article.uuid} ({locale})", error=exc)
            return DegradedArticle(
                uuid=article.uuid,
                id=article.id,
                error=str(exc),
                article=article,
            )

    async def resolve_many(self, articles: list[Article], locale: str | None = None) -> list[ArticleView]:
        return [await self.resolve(article, locale) for article in articles]
