"""Typed filter value objects for article queries."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

from article_views.domain.entities.article import Stage


class FilterOperator(str, Enum):
    """How multiple values within one filter dimension combine."""

    OR = "OR"
    AND = "AND"


# Accepted keys for caller-supplied filter mappings → ArticleCriteria field
_CRITERIA_KEYS: dict[str, str] = {
    "uuid": "uuid",
    "locale": "locale",
    "stage": "stage",
    "template_keys": "template_keys",
    "templateKeys": "template_keys",
    "category_keys": "category_keys",
    "categoryKeys": "category_keys",
    "category_operator": "category_operator",
    "categoryOperator": "category_operator",
    "tag_names": "tag_names",
    "tagNames": "tag_names",
    "tag_operator": "tag_operator",
    "tagOperator": "tag_operator",
}


@dataclass(frozen=True)
class ArticleCriteria:
    """Equality criteria understood by the article repository's filter API.

    Every field is optional; ``None`` means "no constraint". All criteria
    apply to the same revision of an article.
    """

    uuid: str | None = None
    locale: str | None = None
    stage: Stage | None = None
    template_keys: tuple[str, ...] | None = None
    category_keys: tuple[str, ...] | None = None
    category_operator: FilterOperator = FilterOperator.OR
    tag_names: tuple[str, ...] | None = None
    tag_operator: FilterOperator = FilterOperator.OR

    @classmethod
    def from_mapping(cls, filters: Mapping[str, Any]) -> "ArticleCriteria":
        """Build criteria from a loosely-typed mapping (snake or camel case keys)."""
        values: dict[str, Any] = {}
        for key, value in filters.items():
            name = _CRITERIA_KEYS.get(key)
            if name is None:
                raise ValueError(f"Unsupported article filter: '{key}'")
            if name == "stage":
                value = Stage(value)
            elif name in ("category_operator", "tag_operator"):
                value = FilterOperator(str(value).upper())
            elif name in ("template_keys", "category_keys", "tag_names"):
                if isinstance(value, str):
                    value = (value,)
                value = tuple(value)
            values[name] = value
        return cls(**values)

    def merged(self, other: "ArticleCriteria") -> "ArticleCriteria":
        """Overlay the constraints set on ``other``; its values win."""
        overrides = {}
        for f in fields(other):
            value = getattr(other, f.name)
            if value is not None and value != f.default:
                overrides[f.name] = value
        return replace(self, **overrides)


@dataclass(frozen=True)
class ArticleFilter:
    """A per-call request for a listing of live articles.

    ``template_keys``, ``category_keys`` and ``tag_names`` are the dimension
    filters; the storage engine cannot paginate them together with site
    filtering, so requests carrying any of them are served by a slower
    fetch-all-then-slice path (linear in the size of the matching set).
    """

    locale: str | None = None
    limit: int = 12
    offset: int = 0
    template_keys: tuple[str, ...] = ()
    category_keys: tuple[str, ...] = ()
    tag_names: tuple[str, ...] = ()
    site_keys: tuple[str, ...] = ()
    ignore_site: bool = False
    stage: Stage = field(default=Stage.LIVE, init=False)

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        for name in ("template_keys", "category_keys", "tag_names", "site_keys"):
            object.__setattr__(self, name, tuple(getattr(self, name) or ()))

    @property
    def has_dimension_filters(self) -> bool:
        return bool(self.template_keys or self.category_keys or self.tag_names)

    def with_locale(self, locale: str) -> "ArticleFilter":
        return replace(self, locale=locale)

    def to_criteria(self) -> ArticleCriteria:
        """Repository criteria: OR within categories and tags, AND across dimensions."""
        return ArticleCriteria(
            locale=self.locale,
            stage=self.stage,
            template_keys=self.template_keys or None,
            category_keys=self.category_keys or None,
            category_operator=FilterOperator.OR,
            tag_names=self.tag_names or None,
            tag_operator=FilterOperator.OR,
        )
