"""Pagination metadata model."""

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, StrictInt, computed_field, model_validator

from pagelinks.models.errors import InvalidMetadataError

logger = Logger(UTC=True)


class PaginationMetadata(BaseModel):
    """
    Immutable facts about a paginated collection for a single request.

    Out-of-range pages (``current_page > total_pages``) are accepted; the
    link builder degrades by disabling navigation instead of failing.
    An empty collection still has one (empty) page.
    """

    model_config = ConfigDict(frozen=True)

    current_page: StrictInt = Field(..., description="1-based page being displayed")
    per_page: StrictInt = Field(..., description="Maximum number of entries on a page")
    total_entries: StrictInt = Field(..., description="Number of entries in the whole collection")

    @model_validator(mode="after")
    def validate_bounds(self) -> "PaginationMetadata":
        """Reject values that would make the page arithmetic meaningless."""
        problems: dict[str, int] = {}

        if self.current_page < 1:
            problems["current_page"] = self.current_page
        if self.per_page < 1:
            problems["per_page"] = self.per_page
        if self.total_entries < 0:
            problems["total_entries"] = self.total_entries

        if problems:
            logger.error("Invalid pagination metadata", extra={"invalid_fields": problems})
            raise InvalidMetadataError(
                message=(
                    "Invalid pagination metadata: current_page and per_page must be "
                    "at least 1 and total_entries must not be negative"
                ),
                details=problems,
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        if self.total_entries == 0:
            return 1
        return -(-self.total_entries // self.per_page)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.per_page

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        """Number of entries actually on the current page."""
        remaining = self.total_entries - self.offset
        return max(0, min(self.per_page, remaining))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def previous_page(self) -> int | None:
        previous = self.current_page - 1
        return previous if previous >= 1 else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def next_page(self) -> int | None:
        following = self.current_page + 1
        return following if following <= self.total_pages else None

    @property
    def out_of_bounds(self) -> bool:
        return self.current_page > self.total_pages

    @property
    def is_empty(self) -> bool:
        return self.total_entries == 0
