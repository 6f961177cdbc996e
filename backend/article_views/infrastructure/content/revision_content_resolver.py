"""Content resolution over an article's loaded revisions."""

from dataclasses import fields, replace

from article_views.application.interfaces import ContentResolver
from article_views.domain.entities import Article, ContentRevision, Stage
from article_views.domain.exceptions import ContentResolutionError

# Fields the unlocalized revision may fill in when the localized one leaves them empty
_INHERITED_FIELDS = frozenset(
    f.name for f in fields(ContentRevision)
) - {"id", "locale", "stage", "template_data", "categories", "tags", "workflow_published"}


class RevisionContentResolver(ContentResolver):
    """Merges the unlocalized revision beneath the (locale, stage) revision."""

    async def resolve(self, article: Article, locale: str, stage: Stage) -> ContentRevision:
        localized = article.revision_for(locale, stage)
        if localized is None:
            raise ContentResolutionError(article.uuid, locale, Stage(stage).value)

        unlocalized = article.revision_for(None, stage)
        if unlocalized is None or unlocalized is localized:
            return localized

        inherited = {
            name: getattr(unlocalized, name)
            for name in _INHERITED_FIELDS
            if getattr(localized, name) in (None, "") and getattr(unlocalized, name) not in (None, "")
        }
        return replace(
            localized,
            template_data={**unlocalized.template_data, **localized.template_data},
            **inherited,
        )
