"""SQLAlchemy ORM models for categories, tags and their revision links."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from article_views.infrastructure.database.base import Base

dimension_content_categories = Table(
    "article_dimension_content_categories",
    Base.metadata,
    Column(
        "dimension_content_id",
        Integer,
        ForeignKey("article_dimension_contents.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

dimension_content_tags = Table(
    "article_dimension_content_tags",
    Base.metadata,
    Column(
        "dimension_content_id",
        Integer,
        ForeignKey("article_dimension_contents.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class CategoryModel(Base):
    """ORM model — maps to the 'categories' table."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(191), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, key='{self.key}')>"


class TagModel(Base):
    """ORM model — maps to the 'tags' table."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(191), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<TagModel(id={self.id}, name='{self.name}')>"
