"""Display-ready article views produced by content resolution.

Resolution returns either a ``ResolvedArticle`` or, when the content
collaborator fails, a ``DegradedArticle`` carrying the error message.
Callers branch on ``is_degraded`` instead of catching exceptions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from article_views.domain.entities.article import Article, ContentRevision


@dataclass
class ResolvedArticle:
    """Flattened live view of one article in one locale."""

    uuid: str
    id: int | None
    title: str
    description: str
    excerpt_title: str
    excerpt_more: str
    url: str | None
    template: str | None
    stage: str
    locale: str | None
    published: bool
    workflow_place: str | None
    categories: list[str]
    tags: list[str]
    created: datetime
    changed: datetime
    content: dict[str, Any]
    article: Article = field(repr=False, compare=False)
    revision: ContentRevision = field(repr=False, compare=False)
    error: None = None

    @property
    def is_degraded(self) -> bool:
        return False

    def as_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "excerpt_title": self.excerpt_title,
            "excerpt_more": self.excerpt_more,
            "url": self.url,
            "template": self.template,
            "stage": self.stage,
            "locale": self.locale,
            "published": self.published,
            "workflow_place": self.workflow_place,
            "categories": list(self.categories),
            "tags": list(self.tags),
            "created": self.created,
            "changed": self.changed,
            "content": self.content,
            "_original": self.article,
            "_revision": self.revision,
        }


@dataclass
class DegradedArticle:
    """Minimal stand-in view for an article whose content could not be resolved."""

    uuid: str
    id: int | None
    error: str
    article: Article = field(repr=False, compare=False)
    url: None = None
    content: dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return f"Article {self.uuid}"

    @property
    def description(self) -> str:
        return f"Resolution error: {self.error}"

    @property
    def is_degraded(self) -> bool:
        return True

    def as_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "content": {},
            "_original": self.article,
            "_error": self.error,
        }


ArticleView = ResolvedArticle | DegradedArticle
