"""Domain entities — articles and their localized, staged revisions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Stage(str, Enum):
    """Publication stage of a content revision."""

    DRAFT = "draft"
    LIVE = "live"


@dataclass
class ContentRevision:
    """The (locale, stage) projection of an article's editable fields.

    A revision with ``locale=None`` is the unlocalized revision; its values
    apply to every locale unless a localized revision overrides them.
    """

    locale: str | None
    stage: Stage = Stage.LIVE
    title: str | None = None
    excerpt_title: str | None = None
    excerpt_description: str | None = None
    excerpt_more: str | None = None
    template_key: str | None = None
    template_data: dict[str, Any] = field(default_factory=dict)
    main_site: str | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    workflow_published: bool = False
    workflow_place: str | None = None
    id: int | None = None

    def matches(self, locale: str | None, stage: Stage) -> bool:
        return self.locale == locale and self.stage == stage


@dataclass
class Article:
    """A content entity owned by the host storage; read-only here."""

    uuid: str
    id: int | None = None
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    changed: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    revisions: list[ContentRevision] = field(default_factory=list)

    def revision_for(self, locale: str | None, stage: Stage = Stage.LIVE) -> ContentRevision | None:
        """Return the revision for (locale, stage), or None."""
        for revision in self.revisions:
            if revision.matches(locale, stage):
                return revision
        return None

    def is_assigned_to(self, site_keys: list[str], locale: str, stage: Stage = Stage.LIVE) -> bool:
        """True if the (locale, stage) revision's main site is one of ``site_keys``."""
        return any(
            revision.matches(locale, stage) and revision.main_site in site_keys
            for revision in self.revisions
        )
