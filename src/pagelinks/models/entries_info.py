"""Entries info models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from pagelinks.utils.constants import DEFAULT_RANGE_SEPARATOR
from pagelinks.utils.inflection import pluralize, underscore


class EntriesInfoCase(str, Enum):
    EMPTY = "empty"
    SINGLE_ONE = "single_one"
    SINGLE_MANY = "single_many"
    MULTI_PAGE = "multi_page"


class EntityNaming(BaseModel):
    """Singular and plural name of the paginated entity.

    Only ``singular`` is required; ``plural`` and the catalog ``key`` are
    derived from it when omitted.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    singular: str = Field(..., min_length=1)
    plural: str | None = None
    key: str | None = None

    @model_validator(mode="before")
    @classmethod
    def fill_derived_names(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("singular"), str):
            return data

        data = dict(data)
        singular = data["singular"].strip()
        if data.get("plural") is None:
            data["plural"] = pluralize(singular)
        if data.get("key") is None:
            data["key"] = underscore(singular)
        return data

    def for_count(self, count: int) -> str:
        return self.singular if count == 1 else str(self.plural)


class EntriesInfoOptions(BaseModel):
    """Formatting overrides for the entries summary.

    The defaults produce plain text. HTML callers pass ``<b>``/``</b>`` as
    emphasis and ``&nbsp;`` based separators.
    """

    model_config = ConfigDict(frozen=True)

    entry_name: str | None = None
    plural_name: str | None = None
    emphasis: tuple[str, str] = ("", "")
    space: str = " "
    range_separator: str = DEFAULT_RANGE_SEPARATOR


class EntriesInfoMessage(BaseModel):
    """Summary of which entries are displayed."""

    model_config = ConfigDict(frozen=True)

    case: EntriesInfoCase
    text: str
    model: str = Field(..., description="Entity name as it appears in the text")
    count: StrictInt = Field(..., description="Entries on the page, or total entries when paginated")
    first: StrictInt | None = None
    last: StrictInt | None = None

    def __str__(self) -> str:
        return self.text
