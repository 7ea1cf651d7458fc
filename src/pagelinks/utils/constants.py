"""Global constants used throughout the application.

This module centralizes the default pagination options, fallback labels,
error codes and request bounds. Nothing here is mutated at runtime; callers
override defaults by passing their own options.
"""

from types import MappingProxyType
from typing import Any, Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_METADATA = "INVALID_METADATA"
ERROR_CODE_INVALID_OPTIONS = "INVALID_OPTIONS"
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"


# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_INNER_WINDOW = 4  # pages on each side of the current page
DEFAULT_OUTER_WINDOW = 1  # pages next to the first and last page
DEFAULT_SEPARATOR = " "
DEFAULT_PARAM_NAME = "page"
DEFAULT_CONTAINER_CLASS = "pagination"

DEFAULT_PAGINATION_OPTIONS: Final[MappingProxyType[str, Any]] = MappingProxyType(
    {
        "class": DEFAULT_CONTAINER_CLASS,
        "previous_label": None,
        "next_label": None,
        "inner_window": DEFAULT_INNER_WINDOW,
        "outer_window": DEFAULT_OUTER_WINDOW,
        "separator": DEFAULT_SEPARATOR,
        "param_name": DEFAULT_PARAM_NAME,
        "params": None,
        "page_links": True,
        "container": True,
        "id": None,
    }
)

# Keys that are still understood but should no longer be passed in options.
DEPRECATED_OPTION_KEYS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "link_separator": "'link_separator' is deprecated, use 'separator' instead",
        "renderer": (
            "'renderer' shouldn't be passed in options, "
            "choose a renderer when calling render_pagination"
        ),
    }
)

AUTO_ID_KEYWORD = "auto"
AUTO_ID_SUFFIX = "_pagination"

# ============================================================================
# Labels
# ============================================================================

PREVIOUS_LABEL_KEY = "previous_label"
NEXT_LABEL_KEY = "next_label"
FALLBACK_PREVIOUS_LABEL = "← Previous"
FALLBACK_NEXT_LABEL = "Next →"
GAP_TEXT = "…"

DEFAULT_ENTRY_NAME = "entry"

# Count used to pick a generic plural form when the collection spans pages.
PAGINATED_NAME_COUNT = 5

# ============================================================================
# Entries Info Templates
# ============================================================================

SINGLE_PAGE_INFO_KEY = "page_entries_info.single_page"
MULTI_PAGE_INFO_KEY = "page_entries_info.multi_page"

SINGLE_PAGE_TEMPLATES: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "zero": "No {model} found",
        "one": "Displaying {b}1{eb} {model}",
        "other": "Displaying {b}all{sp}{count}{eb} {model}",
    }
)
MULTI_PAGE_TEMPLATE = (
    "Displaying {model} {b}{first}{range}{last}{eb} of {b}{count}{eb} in total"
)

DEFAULT_RANGE_SEPARATOR = "–"
HTML_EMPHASIS: Final[tuple[str, str]] = ("<b>", "</b>")
HTML_SPACE = "&nbsp;"
HTML_RANGE_SEPARATOR = "&nbsp;-&nbsp;"

# ============================================================================
# Request Constraints
# ============================================================================

DEFAULT_PER_PAGE = 30
MIN_PER_PAGE = 1
MAX_PER_PAGE = 1000
DEFAULT_PAGE = 1
MAX_WINDOW = 100

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"
