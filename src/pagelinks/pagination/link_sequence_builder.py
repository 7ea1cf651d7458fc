"""
Link sequence assembly.

Turns pagination metadata and options into the ordered list of link items
a renderer draws: a previous control, page numbers with gaps, and a next
control.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from pagelinks.i18n.label_resolver import LabelResolver, resolve_label_resolver
from pagelinks.models.link_item import (
    Gap,
    LinkItem,
    LinkSequence,
    NextControl,
    PageLink,
    PreviousControl,
)
from pagelinks.models.metadata import PaginationMetadata
from pagelinks.models.options import PaginationOptions, coerce_options
from pagelinks.pagination.window_calculator import WindowCalculator
from pagelinks.utils.constants import (
    FALLBACK_NEXT_LABEL,
    FALLBACK_PREVIOUS_LABEL,
    NEXT_LABEL_KEY,
    PREVIOUS_LABEL_KEY,
)

logger = Logger(UTC=True)

OptionsInput = PaginationOptions | Mapping[str, Any] | None


class LinkSequenceBuilder:
    """
    Builds link sequences for paginated collections.

    The builder holds only its label resolver; everything derived from
    metadata and options is computed per call, so one instance can be
    shared between requests.
    """

    def __init__(self, label_resolver: LabelResolver | Mapping[str, Any] | None = None) -> None:
        self.label_resolver = resolve_label_resolver(label_resolver)
        self.window_calculator = WindowCalculator()

    def build(self, metadata: PaginationMetadata, options: OptionsInput = None) -> LinkSequence:
        """
        Build the link sequence for ``metadata``.

        Collections with a single page need no pagination and produce an
        empty sequence.

        Args:
            metadata: Pagination metadata for the current request
            options: PaginationOptions or a plain options mapping

        Returns:
            LinkSequence with items, container attributes and separator
        """
        opts = coerce_options(options)

        sequence_fields: dict[str, Any] = {
            "html_attributes": opts.html_attributes(),
            "auto_id_requested": opts.auto_id_requested,
            "container": opts.container,
            "separator": opts.separator,
        }

        if metadata.total_pages <= 1:
            logger.debug(
                "Nothing to paginate",
                extra={"total_pages": metadata.total_pages},
            )
            return LinkSequence(items=[], **sequence_fields)

        items: list[LinkItem] = self.windowed_links(metadata, opts) if opts.page_links else []
        items.insert(0, self.previous_control(metadata, opts))
        items.append(self.next_control(metadata, opts))

        logger.debug(
            "Link sequence built",
            extra={
                "current_page": metadata.current_page,
                "total_pages": metadata.total_pages,
                "item_count": len(items),
            },
        )

        return LinkSequence(items=items, **sequence_fields)

    def windowed_links(self, metadata: PaginationMetadata, options: PaginationOptions) -> list[LinkItem]:
        """Collect link items for visible page numbers, with gaps between breaks."""
        links: list[LinkItem] = []
        previous: int | None = None

        for page in self.window_calculator.for_options(
            metadata.current_page,
            metadata.total_pages,
            options.window,
        ):
            if previous is not None and page > previous + 1:
                links.append(Gap())
            links.append(self.page_link(metadata, page))
            previous = page

        return links

    @staticmethod
    def page_link(metadata: PaginationMetadata, page: int) -> PageLink:
        is_current = page == metadata.current_page
        return PageLink(
            page=page,
            is_current=is_current,
            text=str(page),
            classes=("current",) if is_current else (),
            rel=None if is_current else rel_value(metadata, page),
        )

    def previous_control(self, metadata: PaginationMetadata, options: PaginationOptions) -> PreviousControl:
        target = metadata.previous_page
        label = options.previous_label or self.label_resolver.translate(
            PREVIOUS_LABEL_KEY, FALLBACK_PREVIOUS_LABEL
        )
        return PreviousControl(
            target_page=target,
            text=label,
            classes=control_classes(target, "prev_page"),
            rel=rel_value(metadata, target) if target is not None else None,
        )

    def next_control(self, metadata: PaginationMetadata, options: PaginationOptions) -> NextControl:
        target = metadata.next_page
        label = options.next_label or self.label_resolver.translate(
            NEXT_LABEL_KEY, FALLBACK_NEXT_LABEL
        )
        return NextControl(
            target_page=target,
            text=label,
            classes=control_classes(target, "next_page"),
            rel=rel_value(metadata, target) if target is not None else None,
        )


def control_classes(target: int | None, name: str) -> tuple[str, ...]:
    return (name,) if target is not None else ("disabled", name)


def rel_value(metadata: PaginationMetadata, page: int) -> str | None:
    """
    Relation of ``page`` to the current page, for rel attributes.

    Example:
        current page 2 → page 1 is "prev start", page 3 is "next"
    """
    if page == metadata.previous_page:
        return "prev start" if page == 1 else "prev"
    if page == metadata.next_page:
        return "next"
    if page == 1:
        return "start"
    return None


def build_link_sequence(
    metadata: PaginationMetadata,
    options: OptionsInput = None,
    *,
    label_resolver: LabelResolver | Mapping[str, Any] | None = None,
) -> list[LinkItem]:
    """Return the ordered link items for ``metadata`` (empty for a single page)."""
    return LinkSequenceBuilder(label_resolver).build(metadata, options).items
