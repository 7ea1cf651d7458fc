"""Page URL construction."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pagelinks.utils.constants import DEFAULT_PARAM_NAME


class PageUrlBuilder:
    """Build the URL of a page from a base URL and query parameters.

    Existing query parameters of ``base_url`` are kept, ``params`` are
    merged over them (a ``None`` value removes the parameter) and the page
    number is set last.

    Example:
        PageUrlBuilder("/posts?sort=new", params={"q": "cat"}).page_url(3)
        → "/posts?sort=new&q=cat&page=3"
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        param_name: str = DEFAULT_PARAM_NAME,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.base_url = base_url
        self.param_name = param_name
        self.params = dict(params or {})

    def page_url(self, page: int) -> str:
        scheme, netloc, path, query, fragment = urlsplit(self.base_url)

        merged: dict[str, Any] = dict(parse_qsl(query, keep_blank_values=True))
        for key, value in self.params.items():
            if value is None:
                merged.pop(key, None)
            else:
                merged[key] = value
        merged[self.param_name] = page

        return urlunsplit((scheme, netloc, path, urlencode(merged, doseq=True), fragment))
