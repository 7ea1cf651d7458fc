"""
Link renderers.

A renderer turns a LinkSequence into markup. The pagination core never
produces markup itself; it only hands renderers structured items.
"""

from collections.abc import Callable, Mapping
from html import escape
from typing import Any, Protocol

from pagelinks.models.link_item import Gap, LinkItem, LinkSequence

PageUrl = Callable[[int], str]


class LinkRenderer(Protocol):
    """Protocol for objects that render a link sequence."""

    def render(
        self,
        sequence: LinkSequence,
        *,
        page_url: PageUrl,
        container_id: str | None = None,
    ) -> str: ...


def tag_attributes(attributes: Mapping[str, Any]) -> str:
    """Render HTML attributes, skipping ``None`` and ``False`` values."""
    parts: list[str] = []

    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(str(key))}")
            continue
        parts.append(f' {escape(str(key))}="{escape(str(value), quote=True)}"')

    return "".join(parts)


class HtmlLinkRenderer:
    """
    Renders pagination links as HTML.

    Clickable items become ``<a>`` elements, the current page and disabled
    controls become ``<span>`` elements and gaps use ``gap_marker``. The
    items are joined with the sequence separator and, unless the container
    is switched off, wrapped in a ``<div>`` carrying the container
    attributes.
    """

    gap_marker = '<span class="gap">&hellip;</span>'

    def render(
        self,
        sequence: LinkSequence,
        *,
        page_url: PageUrl,
        container_id: str | None = None,
    ) -> str:
        html = sequence.separator.join(self.render_item(item, page_url) for item in sequence.items)

        if not sequence.container:
            return html

        attributes = dict(sequence.html_attributes)
        if container_id:
            attributes["id"] = container_id

        return f"<div{tag_attributes(attributes)}>{html}</div>"

    def render_item(self, item: LinkItem, page_url: PageUrl) -> str:
        if isinstance(item, Gap):
            return self.gap_marker

        text = escape(item.text)
        classnames = " ".join(item.classes) or None
        target = item.target_page

        if target is None:
            return f"<span{tag_attributes({'class': classnames})}>{text}</span>"

        attributes = {"href": page_url(target), "rel": item.rel, "class": classnames}
        return f"<a{tag_attributes(attributes)}>{text}</a>"
