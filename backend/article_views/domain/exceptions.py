"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ContentResolutionError(Exception):
    """Raised when an article has no revision for the requested dimension."""

    def __init__(self, article_uuid: str, locale: str | None, stage: str):
        self.article_uuid = article_uuid
        self.locale = locale
        self.stage = stage
        super().__init__(
            f"Article '{article_uuid}' has no {stage} revision for locale '{locale}'"
        )


class SiteResolutionError(Exception):
    """Raised when the current request URL cannot be mapped to a site."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Cannot resolve site for '{url}': {reason}")
