"""Pagination envelope for article listings."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Pagination:
    """Offset pagination state derived from the request and the total count."""

    limit: int
    offset: int
    current_count: int
    total_count: int

    @property
    def has_more(self) -> bool:
        return (self.offset + self.limit) < self.total_count

    @property
    def next_offset(self) -> int:
        return self.offset + self.limit

    def as_dict(self) -> dict[str, Any]:
        return {
            "limit": self.limit,
            "offset": self.offset,
            "current_count": self.current_count,
            "total_count": self.total_count,
            "has_more": self.has_more,
            "next_offset": self.next_offset,
        }


@dataclass
class ArticlePage:
    """One page of resolved articles plus its pagination envelope."""

    articles: list[Any]
    pagination: Pagination
    debug: dict[str, Any] = field(default_factory=dict)
