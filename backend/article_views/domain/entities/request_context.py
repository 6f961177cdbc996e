"""Per-request state the article queries default from."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Locale, base URL and environment of the request being served."""

    locale: str
    scheme_and_host: str | None = None
    environment: str | None = None


def negotiate_locale(accept_language: str | None, supported: list[str], default: str) -> str:
    """Pick the best supported locale from an ``Accept-Language`` header.

    Matches exact tags first, then the primary subtag (``de-CH`` → ``de``).
    Falls back to ``default`` when nothing matches.
    """
    if not accept_language:
        return default

    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality > 0:
            weighted.append((-quality, position, tag))

    by_lower = {locale.lower().replace("_", "-"): locale for locale in supported}
    for _, _, tag in sorted(weighted):
        normalized = tag.lower().replace("_", "-")
        if normalized in by_lower:
            return by_lower[normalized]
        primary = normalized.split("-", 1)[0]
        if primary in by_lower:
            return by_lower[primary]
    return default
