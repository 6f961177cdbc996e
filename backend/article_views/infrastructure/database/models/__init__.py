from .article import ArticleDimensionContentModel, ArticleModel
from .taxonomy import (
    CategoryModel,
    TagModel,
    dimension_content_categories,
    dimension_content_tags,
)

__all__ = [
    "ArticleModel",
    "ArticleDimensionContentModel",
    "CategoryModel",
    "TagModel",
    "dimension_content_categories",
    "dimension_content_tags",
]
