"""Link item models produced by the link sequence builder."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, computed_field

from pagelinks.utils.constants import DEFAULT_SEPARATOR, GAP_TEXT


class _LinkItemBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Text shown for the item")
    classes: tuple[str, ...] = Field(default=(), description="CSS-like state tags")
    rel: str | None = Field(None, description="Relation to the current page (prev, next, start)")

    @property
    def is_disabled(self) -> bool:
        return getattr(self, "target_page", None) is None


class PageLink(_LinkItemBase):
    """A numbered page. The current page is not clickable."""

    kind: Literal["page"] = "page"
    page: StrictInt
    is_current: StrictBool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def target_page(self) -> int | None:
        return None if self.is_current else self.page


class Gap(_LinkItemBase):
    """Placeholder for two or more omitted page numbers."""

    kind: Literal["gap"] = "gap"
    text: str = GAP_TEXT
    classes: tuple[str, ...] = ("gap",)

    @property
    def is_disabled(self) -> bool:
        return False


class PreviousControl(_LinkItemBase):
    """Link to the previous page, disabled when ``target_page`` is None."""

    kind: Literal["previous"] = "previous"
    target_page: StrictInt | None = None


class NextControl(_LinkItemBase):
    """Link to the next page, disabled when ``target_page`` is None."""

    kind: Literal["next"] = "next"
    target_page: StrictInt | None = None


LinkItem = Annotated[
    PageLink | Gap | PreviousControl | NextControl,
    Field(discriminator="kind"),
]


class LinkSequence(BaseModel):
    """Ordered link items plus what a renderer needs for the container."""

    model_config = ConfigDict(frozen=True)

    items: list[LinkItem] = Field(default_factory=list)
    html_attributes: dict[str, Any] = Field(default_factory=dict)
    auto_id_requested: bool = False
    container: bool = True
    separator: str = DEFAULT_SEPARATOR

    @property
    def is_empty(self) -> bool:
        return not self.items

    def page_numbers(self) -> list[int]:
        return [item.page for item in self.items if isinstance(item, PageLink)]
