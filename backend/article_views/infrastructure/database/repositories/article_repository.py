"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from article_views.application.interfaces import ArticleRepository
from article_views.domain.entities import (
    Article,
    ArticleCriteria,
    ContentRevision,
    FilterOperator,
    Stage,
)
from article_views.infrastructure.database.models import (
    ArticleDimensionContentModel,
    ArticleModel,
    CategoryModel,
    TagModel,
)

_DC = ArticleDimensionContentModel

# Async sessions cannot lazy load, so revisions travel with every article
_LOAD_REVISIONS = (
    selectinload(ArticleModel.dimension_contents).selectinload(_DC.categories),
    selectinload(ArticleModel.dimension_contents).selectinload(_DC.tags),
)

_NEWEST_FIRST = (ArticleModel.created.desc(), ArticleModel.id.desc())


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            uuid=model.uuid,
            id=model.id,
            created=model.created,
            changed=model.changed,
            revisions=[self._to_revision(dc) for dc in model.dimension_contents],
        )

    def _to_revision(self, model: ArticleDimensionContentModel) -> ContentRevision:
        return ContentRevision(
            id=model.id,
            locale=model.locale,
            stage=Stage(model.stage),
            title=model.title,
            excerpt_title=model.excerpt_title,
            excerpt_description=model.excerpt_description,
            excerpt_more=model.excerpt_more,
            template_key=model.template_key,
            template_data=dict(model.template_data or {}),
            main_site=model.main_webspace,
            categories=sorted(c.key for c in model.categories),
            tags=sorted(t.name for t in model.tags),
            workflow_published=model.workflow_published,
            workflow_place=model.workflow_place,
        )

    # ── Statement builders ───────────────────────────────────────────

    def _revision_conditions(self, criteria: ArticleCriteria) -> list:
        """Conditions that must all hold on one and the same revision."""
        conditions = []
        if criteria.locale is not None:
            conditions.append(_DC.locale == criteria.locale)
        if criteria.stage is not None:
            conditions.append(_DC.stage == Stage(criteria.stage).value)
        if criteria.template_keys:
            conditions.append(_DC.template_key.in_(criteria.template_keys))

        if criteria.category_keys:
            if criteria.category_operator == FilterOperator.AND:
                conditions.extend(
                    _DC.categories.any(CategoryModel.key == key) for key in criteria.category_keys
                )
            else:
                conditions.append(_DC.categories.any(CategoryModel.key.in_(criteria.category_keys)))

        if criteria.tag_names:
            if criteria.tag_operator == FilterOperator.AND:
                conditions.extend(_DC.tags.any(TagModel.name == name) for name in criteria.tag_names)
            else:
                conditions.append(_DC.tags.any(TagModel.name.in_(criteria.tag_names)))
        return conditions

    def _apply_criteria(self, stmt: Select, criteria: ArticleCriteria) -> Select:
        if criteria.uuid is not None:
            stmt = stmt.where(ArticleModel.uuid == criteria.uuid)
        conditions = self._revision_conditions(criteria)
        if conditions:
            stmt = stmt.where(ArticleModel.dimension_contents.any(and_(*conditions)))
        return stmt

    def _live_condition(self, locale: str, stage: Stage, site_keys: list[str]):
        conditions = [_DC.locale == locale, _DC.stage == Stage(stage).value]
        if site_keys:
            conditions.append(_DC.main_webspace.in_(site_keys))
        return ArticleModel.dimension_contents.any(and_(*conditions))

    # ── Filter API ───────────────────────────────────────────────────

    async def find_one_by(self, criteria: ArticleCriteria) -> Article | None:
        stmt = self._apply_criteria(select(ArticleModel), criteria)
        stmt = stmt.options(*_LOAD_REVISIONS).order_by(*_NEWEST_FIRST).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def find_by(self, criteria: ArticleCriteria) -> list[Article]:
        stmt = self._apply_criteria(select(ArticleModel), criteria)
        stmt = stmt.options(*_LOAD_REVISIONS).order_by(*_NEWEST_FIRST)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_by(self, criteria: ArticleCriteria) -> int:
        stmt = self._apply_criteria(select(func.count()).select_from(ArticleModel), criteria)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    # ── Native paginated queries ─────────────────────────────────────

    async def list_live(
        self,
        locale: str,
        stage: Stage,
        site_keys: list[str],
        limit: int,
        offset: int = 0,
    ) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(self._live_condition(locale, stage, site_keys))
            .options(*_LOAD_REVISIONS)
            .order_by(*_NEWEST_FIRST)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_live(self, locale: str, stage: Stage, site_keys: list[str]) -> int:
        stmt = (
            select(func.count())
            .select_from(ArticleModel)
            .where(self._live_condition(locale, stage, site_keys))
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())
