"""
Business logic for building page links.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from pagelinks.i18n.label_resolver import LabelResolver, resolve_label_resolver
from pagelinks.models.entries_info import EntityNaming, EntriesInfoOptions
from pagelinks.models.metadata import PaginationMetadata
from pagelinks.models.options import PaginationOptions
from pagelinks.pagination.entries_info_formatter import EntriesInfoFormatter
from pagelinks.pagination.link_sequence_builder import LinkSequenceBuilder
from pagelinks.rendering.link_renderer import HtmlLinkRenderer
from pagelinks.rendering.view_helpers import render_pagination

from .models import PageLinksRequest, PageLinksResponse

logger = Logger(UTC=True)


class PageLinksService:
    """Application service that assembles the page links response.

    This service coordinates:
    - Building pagination metadata from the request
    - Building the link sequence
    - Formatting the entries summary
    - Rendering HTML when requested
    """

    def __init__(self, label_resolver: LabelResolver | Mapping[str, Any] | None = None) -> None:
        """Initialize the service with a shared label resolver."""
        self.label_resolver = resolve_label_resolver(label_resolver)
        self.builder = LinkSequenceBuilder(self.label_resolver)
        self.formatter = EntriesInfoFormatter(self.label_resolver)
        self.renderer = HtmlLinkRenderer()

    def build(self, request: PageLinksRequest) -> PageLinksResponse:
        """Build link items, summary and optional HTML for the request."""
        metadata = PaginationMetadata(
            current_page=request.page,
            per_page=request.per_page,
            total_entries=request.total_entries,
        )
        options = PaginationOptions(
            inner_window=request.inner_window,
            outer_window=request.outer_window,
            page_links=request.page_links,
        )

        sequence = self.builder.build(metadata, options)

        naming = EntityNaming(singular=request.entry_name) if request.entry_name else None
        entries_info = self.formatter.format(metadata, naming, EntriesInfoOptions())

        html = None
        if request.html:
            html = render_pagination(
                metadata,
                options,
                renderer=self.renderer,
                base_url=request.base_url,
                label_resolver=self.label_resolver,
            )

        logger.info(
            "Page links built",
            extra={
                "current_page": metadata.current_page,
                "total_pages": metadata.total_pages,
                "link_count": len(sequence.items),
                "out_of_bounds": metadata.out_of_bounds,
            },
        )

        return PageLinksResponse(
            pagination=metadata,
            links=sequence.items,
            entries_info=entries_info,
            html=html,
        )
