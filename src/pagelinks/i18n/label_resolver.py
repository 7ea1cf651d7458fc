"""
Label and message lookup.

A label resolver turns a list of candidate catalog keys into a message:
the first key found wins, otherwise the fallback template is used. Catalog
entries may be plain templates or plural forms (``zero``/``one``/``other``)
selected by the ``count`` parameter. Templates use ``str.format`` fields,
e.g. ``"No {model} found"``.
"""

from collections.abc import Mapping, Sequence
from string import Formatter
from typing import Any, Protocol

from aws_lambda_powertools import Logger

logger = Logger(UTC=True)

Catalog = Mapping[str, Any]


class LabelResolver(Protocol):
    """Protocol for message lookup used by the builder and the formatter."""

    def translate(
        self,
        keys: str | Sequence[str],
        default: str | Mapping[str, str],
        **params: Any,
    ) -> str: ...


def select_plural_form(forms: Mapping[str, str], count: Any) -> str:
    """Pick the plural form for ``count``.

    ``zero`` is used for 0 when present, ``one`` for 1 and ``other`` for
    everything else (falling back to ``one`` when ``other`` is missing).
    """
    if count == 0 and "zero" in forms:
        return forms["zero"]
    if count == 1 and "one" in forms:
        return forms["one"]
    return forms.get("other", forms.get("one", ""))


class TemplateFormatter(Formatter):
    """``str.format`` that keeps fields it cannot resolve as ``{field}`` text."""

    def get_field(self, field_name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Any:
        try:
            return super().get_field(field_name, args, kwargs)
        except (KeyError, IndexError, AttributeError):
            logger.debug("Missing interpolation value", extra={"field": field_name})
            return "{" + field_name + "}", field_name


_formatter = TemplateFormatter()


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Format ``template`` with ``params``, leaving unknown fields untouched.

    A template that cannot be parsed (e.g. a stray brace) is returned as is.
    """
    try:
        return _formatter.vformat(template, (), params)
    except ValueError:
        logger.warning("Malformed label template", extra={"template": template})
        return template


class FallbackLabelResolver:
    """Resolver with an empty catalog: always formats the fallback."""

    def translate(
        self,
        keys: str | Sequence[str],
        default: str | Mapping[str, str],
        **params: Any,
    ) -> str:
        if isinstance(default, Mapping):
            default = select_plural_form(default, params.get("count"))
        return interpolate(default, params)


class CatalogLabelResolver(FallbackLabelResolver):
    """Resolver backed by a nested dictionary catalog.

    Keys are dotted paths into the catalog:

        catalog = {
            "previous_label": "‹ Prev",
            "page_entries_info": {"multi_page": "{first}-{last} of {count}"},
        }
        CatalogLabelResolver(catalog).translate("previous_label", "← Previous")
        → "‹ Prev"
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self.catalog: Catalog = catalog or {}

    def lookup(self, key: str) -> Any:
        node: Any = self.catalog
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def translate(
        self,
        keys: str | Sequence[str],
        default: str | Mapping[str, str],
        **params: Any,
    ) -> str:
        candidates = [keys] if isinstance(keys, str) else list(keys)

        for key in candidates:
            entry = self.lookup(key)
            if isinstance(entry, str):
                return interpolate(entry, params)
            if isinstance(entry, Mapping) and {"one", "other"} & entry.keys():
                return interpolate(select_plural_form(entry, params.get("count")), params)

        return super().translate(candidates, default, **params)


def resolve_label_resolver(resolver: LabelResolver | Catalog | None) -> LabelResolver:
    """Accept a resolver, a raw catalog or nothing."""
    if resolver is None:
        return FallbackLabelResolver()
    if isinstance(resolver, Mapping):
        return CatalogLabelResolver(resolver)
    return resolver
