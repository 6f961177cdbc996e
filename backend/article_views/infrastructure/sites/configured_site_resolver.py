"""Site lookup driven by the configured site table."""

import logging
from urllib.parse import urlsplit

from article_views.application.interfaces import SiteResolver
from article_views.config import SiteSettings
from article_views.domain.exceptions import SiteResolutionError

logger = logging.getLogger(__name__)


def _host_of(url: str) -> str:
    """Lower-cased ``host[:port]`` of a URL given with or without scheme."""
    if "://" not in url:
        url = f"//{url}"
    return urlsplit(url).netloc.lower()


class ConfiguredSiteResolver(SiteResolver):
    """Finds the site whose configured URLs answer on a request's host.

    Site URLs are compared on ``host[:port]`` only. A site listing
    environments only matches in those environments.
    """

    def __init__(self, sites: list[SiteSettings]):
        self._sites = list(sites)

    def find_site_key(self, url: str, environment: str | None = None) -> str | None:
        host = _host_of(url)
        if not host:
            raise SiteResolutionError(url, "no host")

        for site in self._sites:
            if site.environments and environment not in site.environments:
                continue
            if any(_host_of(site_url) == host for site_url in site.urls):
                return site.key

        logger.debug("No site configured for %s (environment=%s)", url, environment)
        return None
