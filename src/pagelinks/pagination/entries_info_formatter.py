"""
Entries summary formatting.

Produces messages such as "Displaying entities 6–10 of 26 in total" from
pagination metadata.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from pagelinks.i18n.label_resolver import LabelResolver, resolve_label_resolver
from pagelinks.models.entries_info import (
    EntityNaming,
    EntriesInfoCase,
    EntriesInfoMessage,
    EntriesInfoOptions,
)
from pagelinks.models.metadata import PaginationMetadata
from pagelinks.utils.constants import (
    DEFAULT_ENTRY_NAME,
    MULTI_PAGE_INFO_KEY,
    MULTI_PAGE_TEMPLATE,
    PAGINATED_NAME_COUNT,
    SINGLE_PAGE_INFO_KEY,
    SINGLE_PAGE_TEMPLATES,
)

logger = Logger(UTC=True)


class EntriesInfoFormatter:
    """
    Formatter for the "Displaying ..." summary.

    Selects one of four messages:
    - single page, no entries: "No entries found"
    - single page, one entry: "Displaying 1 entry"
    - single page, many entries: "Displaying all 3 entries"
    - several pages: "Displaying entries 6–10 of 26 in total"

    Templates are looked up first under the entity key
    (``<key>.page_entries_info...``), then globally, then fall back to the
    built-in English templates.
    """

    def __init__(self, label_resolver: LabelResolver | Mapping[str, Any] | None = None) -> None:
        self.label_resolver = resolve_label_resolver(label_resolver)

    def format(
        self,
        metadata: PaginationMetadata,
        naming: EntityNaming | None = None,
        options: EntriesInfoOptions | None = None,
    ) -> EntriesInfoMessage:
        opts = options or EntriesInfoOptions()
        entity = self.resolve_naming(naming, opts)
        emphasis_start, emphasis_end = opts.emphasis

        params: dict[str, Any] = {
            "b": emphasis_start,
            "eb": emphasis_end,
            "sp": opts.space,
            "range": opts.range_separator,
        }

        if metadata.total_pages < 2:
            size = metadata.length
            model = entity.for_count(size)
            text = self.label_resolver.translate(
                self.template_keys(entity, SINGLE_PAGE_INFO_KEY),
                SINGLE_PAGE_TEMPLATES,
                count=size,
                model=model,
                **params,
            )
            return EntriesInfoMessage(
                case=single_page_case(size),
                text=text,
                model=model,
                count=size,
            )

        model = entity.for_count(PAGINATED_NAME_COUNT)
        first = metadata.offset + 1
        last = metadata.offset + metadata.length
        text = self.label_resolver.translate(
            self.template_keys(entity, MULTI_PAGE_INFO_KEY),
            MULTI_PAGE_TEMPLATE,
            count=metadata.total_entries,
            model=model,
            first=first,
            last=last,
            **params,
        )

        logger.debug(
            "Entries info formatted",
            extra={"first": first, "last": last, "total_entries": metadata.total_entries},
        )

        return EntriesInfoMessage(
            case=EntriesInfoCase.MULTI_PAGE,
            text=text,
            model=model,
            count=metadata.total_entries,
            first=first,
            last=last,
        )

    @staticmethod
    def resolve_naming(naming: EntityNaming | None, options: EntriesInfoOptions) -> EntityNaming:
        if options.entry_name:
            return EntityNaming(singular=options.entry_name, plural=options.plural_name)
        return naming or EntityNaming(singular=DEFAULT_ENTRY_NAME)

    @staticmethod
    def template_keys(entity: EntityNaming, key: str) -> list[str]:
        return [f"{entity.key}.{key}", key]


def single_page_case(size: int) -> EntriesInfoCase:
    if size == 0:
        return EntriesInfoCase.EMPTY
    if size == 1:
        return EntriesInfoCase.SINGLE_ONE
    return EntriesInfoCase.SINGLE_MANY


def format_entries_info(
    metadata: PaginationMetadata,
    naming: EntityNaming | None = None,
    options: EntriesInfoOptions | None = None,
    *,
    label_resolver: LabelResolver | Mapping[str, Any] | None = None,
) -> EntriesInfoMessage:
    """Return the entries summary for ``metadata``."""
    return EntriesInfoFormatter(label_resolver).format(metadata, naming, options)
