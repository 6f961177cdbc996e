"""SQLAlchemy ORM models for articles and their dimension contents."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from article_views.infrastructure.database.base import Base
from article_views.infrastructure.database.models.taxonomy import (
    CategoryModel,
    TagModel,
    dimension_content_categories,
    dimension_content_tags,
)


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    changed: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    dimension_contents: Mapped[list["ArticleDimensionContentModel"]] = relationship(
        back_populates="article",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, uuid='{self.uuid}')>"


class ArticleDimensionContentModel(Base):
    """ORM model — maps to the 'article_dimension_contents' table.

    One row per (article, locale, stage); ``locale`` is NULL for the
    unlocalized dimension.
    """

    __tablename__ = "article_dimension_contents"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    )
    locale: Mapped[str | None] = mapped_column(String(15), nullable=True)
    stage: Mapped[str] = mapped_column(String(16), nullable=False, default="draft")

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    excerpt_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    excerpt_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_more: Mapped[str | None] = mapped_column(String(255), nullable=True)
    template_key: Mapped[str | None] = mapped_column(String(64), nullable=True)
    template_data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    main_webspace: Mapped[str | None] = mapped_column(String(64), nullable=True)
    workflow_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    workflow_place: Mapped[str | None] = mapped_column(String(32), nullable=True)

    article: Mapped[ArticleModel] = relationship(back_populates="dimension_contents")
    categories: Mapped[list[CategoryModel]] = relationship(secondary=dimension_content_categories)
    tags: Mapped[list[TagModel]] = relationship(secondary=dimension_content_tags)

    __table_args__ = (
        Index("ix_article_dimension_contents_dimension", "locale", "stage"),
        Index("ix_article_dimension_contents_article", "article_id"),
        Index("ix_article_dimension_contents_webspace", "main_webspace"),
    )

    def __repr__(self) -> str:
        return (
            f"<ArticleDimensionContentModel(id={self.id}, article_id={self.article_id}, "
            f"locale='{self.locale}', stage='{self.stage}')>"
        )
