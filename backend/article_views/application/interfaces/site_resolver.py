"""Port for the host site (webspace) lookup."""

from abc import ABC, abstractmethod


class SiteResolver(ABC):
    """Maps a request URL to the key of the site serving it."""

    @abstractmethod
    def find_site_key(self, url: str, environment: str | None = None) -> str | None:
        """Return the matching site key, or None when no site answers on ``url``."""
        ...
