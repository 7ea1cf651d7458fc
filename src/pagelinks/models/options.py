"""Pagination options models."""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator

from pagelinks.models.errors import InvalidOptionsError
from pagelinks.utils.constants import (
    AUTO_ID_KEYWORD,
    DEFAULT_CONTAINER_CLASS,
    DEFAULT_INNER_WINDOW,
    DEFAULT_OUTER_WINDOW,
    DEFAULT_PARAM_NAME,
    DEFAULT_SEPARATOR,
    DEPRECATED_OPTION_KEYS,
)

logger = Logger(UTC=True)


class WindowOptions(BaseModel):
    """Window sizes used to pick the visible page numbers."""

    model_config = ConfigDict(frozen=True)

    inner_window: StrictInt = Field(
        default=DEFAULT_INNER_WINDOW,
        description="Pages shown on each side of the current page",
    )
    outer_window: StrictInt = Field(
        default=DEFAULT_OUTER_WINDOW,
        description="Pages shown next to the first and the last page",
    )

    @model_validator(mode="after")
    def validate_windows(self) -> "WindowOptions":
        if self.inner_window < 0 or self.outer_window < 0:
            raise InvalidOptionsError(
                message="inner_window and outer_window must not be negative",
                details={
                    "inner_window": self.inner_window,
                    "outer_window": self.outer_window,
                },
            )
        return self


class PaginationOptions(WindowOptions):
    """
    Explicit configuration for one pagination render.

    Every recognized key has a named default (see
    ``DEFAULT_PAGINATION_OPTIONS``). Unrecognized keys are kept and become
    HTML attributes of the container element, e.g. ``style="color:blue"``.

    ``class`` and ``id`` are both recognized and passed through as
    attributes. ``id=True`` (or ``"auto"``) asks the renderer to derive the
    id from the type of the paginated items.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    css_class: str | None = Field(default=DEFAULT_CONTAINER_CLASS, alias="class")
    previous_label: str | None = None
    next_label: str | None = None
    separator: str = DEFAULT_SEPARATOR
    param_name: str = DEFAULT_PARAM_NAME
    params: dict[str, Any] | None = None
    page_links: StrictBool = True
    container: StrictBool = True
    container_id: bool | str | None = Field(default=None, alias="id")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "PaginationOptions":
        """Build options from a plain mapping, translating deprecated keys.

        Example:
            PaginationOptions.from_mapping({"inner_window": 2, "style": "color:blue"})
        """
        data = dict(options or {})
        find_deprecated_options(data)

        if "link_separator" in data:
            separator = data.pop("link_separator")
            data.setdefault("separator", separator)
        data.pop("renderer", None)

        return cls.model_validate(data)

    @property
    def window(self) -> WindowOptions:
        return WindowOptions(inner_window=self.inner_window, outer_window=self.outer_window)

    @property
    def auto_id_requested(self) -> bool:
        return self.container and (
            self.container_id is True or self.container_id == AUTO_ID_KEYWORD
        )

    def html_attributes(self) -> dict[str, Any]:
        """Return the options that are HTML attributes of the container."""
        attributes: dict[str, Any] = {}

        if self.css_class is not None:
            attributes["class"] = self.css_class
        if isinstance(self.container_id, str) and self.container_id != AUTO_ID_KEYWORD:
            attributes["id"] = self.container_id

        for key, value in (self.model_extra or {}).items():
            if value is not None:
                attributes[key] = value

        return attributes


def find_deprecated_options(options: Mapping[str, Any]) -> dict[str, str]:
    """Report deprecated keys present in ``options``.

    Returns a mapping of key to deprecation message and logs one warning
    per call when anything deprecated was passed.
    """
    found = {key: DEPRECATED_OPTION_KEYS[key] for key in options if key in DEPRECATED_OPTION_KEYS}

    if found:
        logger.warning(
            "Deprecated pagination options",
            extra={"deprecated_options": found},
        )

    return found


def coerce_options(options: "PaginationOptions | Mapping[str, Any] | None") -> PaginationOptions:
    if isinstance(options, PaginationOptions):
        return options
    return PaginationOptions.from_mapping(options)
