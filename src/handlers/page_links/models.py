"""
Pydantic models for the page links request and response.
"""

from pydantic import BaseModel, ConfigDict, Field

from pagelinks.models.entries_info import EntriesInfoMessage
from pagelinks.models.link_item import LinkItem
from pagelinks.models.metadata import PaginationMetadata
from pagelinks.utils.constants import (
    DEFAULT_INNER_WINDOW,
    DEFAULT_OUTER_WINDOW,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    MAX_WINDOW,
    MIN_PER_PAGE,
)


class PageLinksRequest(BaseModel):
    """
    Validation model for the page links API.

    Query string values arrive as strings and are coerced to their types.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    total_entries: int = Field(..., ge=0, description="Entries in the whole collection")
    per_page: int = Field(
        default=DEFAULT_PER_PAGE,
        ge=MIN_PER_PAGE,
        le=MAX_PER_PAGE,
        description=f"Entries per page ({MIN_PER_PAGE}-{MAX_PER_PAGE})",
    )
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Current page (1-based)")

    inner_window: int = Field(default=DEFAULT_INNER_WINDOW, ge=0, le=MAX_WINDOW)
    outer_window: int = Field(default=DEFAULT_OUTER_WINDOW, ge=0, le=MAX_WINDOW)
    page_links: bool = Field(default=True, description="Include page numbers, not only previous/next")

    entry_name: str | None = Field(None, min_length=1, max_length=50)
    base_url: str = Field(default="", max_length=2048, description="URL the page parameter is added to")
    html: bool = Field(default=False, description="Also return rendered HTML")


class PageLinksResponse(BaseModel):
    """Link items and entries summary for one page of a collection."""

    pagination: PaginationMetadata
    links: list[LinkItem] = Field(..., description="Ordered link items, empty for a single page")
    entries_info: EntriesInfoMessage
    html: str | None = Field(None, description="Rendered pagination markup, when requested")
