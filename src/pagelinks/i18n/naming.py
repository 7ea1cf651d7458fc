"""Entity naming derived from the paginated items."""

from collections.abc import Mapping
from typing import Any

from pagelinks.i18n.label_resolver import LabelResolver, resolve_label_resolver
from pagelinks.models.entries_info import EntityNaming
from pagelinks.utils.constants import AUTO_ID_SUFFIX, DEFAULT_ENTRY_NAME, PAGINATED_NAME_COUNT
from pagelinks.utils.inflection import humanize, pluralize, underscore


class NamingResolver:
    """Resolve the singular and plural name of the items being paginated.

    Lookup order:
    1. Catalog entry ``models.<key>`` (plain string or plural forms)
    2. ``model_name`` attribute of the item's class, if present
    3. The item's class name, e.g. ``ArticleComment`` → ``article comment``

    A string item is taken as the name itself and ``None`` (empty
    collection) names the entities "entry".
    """

    def __init__(self, label_resolver: LabelResolver | Mapping[str, Any] | None = None) -> None:
        self.label_resolver = resolve_label_resolver(label_resolver)

    @staticmethod
    def model_key(first_item: Any) -> str:
        if first_item is None:
            return DEFAULT_ENTRY_NAME
        if isinstance(first_item, str):
            return underscore(first_item)

        model_name = getattr(type(first_item), "model_name", None)
        if isinstance(model_name, str):
            return underscore(model_name)

        return underscore(type(first_item).__name__)

    def naming_for(self, first_item: Any) -> EntityNaming:
        key = self.model_key(first_item)
        name = humanize(key)

        singular = self.label_resolver.translate(f"models.{key}", name, count=1)
        plural = self.label_resolver.translate(
            f"models.{key}",
            {"one": singular, "other": pluralize(singular)},
            count=PAGINATED_NAME_COUNT,
        )
        if plural == singular:
            plural = pluralize(singular)

        return EntityNaming(singular=singular, plural=plural, key=key)

    def container_id_for(self, first_item: Any) -> str:
        """Auto id for the pagination container: ``article_comments_pagination``."""
        return f"{pluralize(self.model_key(first_item))}{AUTO_ID_SUFFIX}"
