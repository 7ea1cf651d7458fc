"""
View helpers.

Entry points for a view layer: render pagination links through a chosen
renderer and render the entries summary.
"""

from collections.abc import Mapping
from html import escape
from typing import Any

from aws_lambda_powertools import Logger

from pagelinks.i18n.label_resolver import LabelResolver, resolve_label_resolver
from pagelinks.i18n.naming import NamingResolver
from pagelinks.models.entries_info import EntityNaming, EntriesInfoOptions
from pagelinks.models.errors import ConfigurationError
from pagelinks.models.metadata import PaginationMetadata
from pagelinks.models.options import PaginationOptions, coerce_options
from pagelinks.pagination.entries_info_formatter import EntriesInfoFormatter
from pagelinks.pagination.link_sequence_builder import LinkSequenceBuilder
from pagelinks.rendering.link_renderer import LinkRenderer
from pagelinks.rendering.page_url import PageUrlBuilder
from pagelinks.utils.constants import HTML_EMPHASIS, HTML_RANGE_SEPARATOR, HTML_SPACE

logger = Logger(UTC=True)


def resolve_renderer(renderer: Any) -> LinkRenderer:
    """Accept a renderer instance or a renderer class.

    Raises:
        ConfigurationError: If no renderer is given, or it cannot render
    """
    if renderer is None:
        logger.error("Pagination renderer not specified")
        raise ConfigurationError(message="Renderer not specified")

    if isinstance(renderer, str):
        raise ConfigurationError(
            message="Renderer names are not resolved, pass a renderer class or instance",
            details={"renderer": renderer},
        )

    if isinstance(renderer, type):
        renderer = renderer()

    if not callable(getattr(renderer, "render", None)):
        raise ConfigurationError(
            message="Renderer must provide a render method",
            details={"renderer": type(renderer).__name__},
        )

    resolved: LinkRenderer = renderer
    return resolved


def render_pagination(
    metadata: PaginationMetadata,
    options: PaginationOptions | Mapping[str, Any] | None = None,
    *,
    renderer: Any,
    first_item: Any = None,
    base_url: str = "",
    label_resolver: LabelResolver | Mapping[str, Any] | None = None,
) -> str | None:
    """
    Render pagination links for a collection.

    Returns None when there is no more than one page in total.

    Args:
        metadata: Pagination metadata of the collection
        options: Pagination options (see PaginationOptions)
        renderer: Renderer class or instance (e.g. HtmlLinkRenderer)
        first_item: First item of the page, used for an automatic container id
        base_url: URL the page parameter is added to
        label_resolver: Resolver or catalog for labels

    Raises:
        ConfigurationError: If no usable renderer is given
    """
    if metadata.total_pages <= 1:
        return None

    link_renderer = resolve_renderer(renderer)
    resolver = resolve_label_resolver(label_resolver)
    opts = coerce_options(options)

    sequence = LinkSequenceBuilder(resolver).build(metadata, opts)
    container_id = (
        NamingResolver(resolver).container_id_for(first_item) if sequence.auto_id_requested else None
    )
    url_builder = PageUrlBuilder(base_url, param_name=opts.param_name, params=opts.params)

    return link_renderer.render(sequence, page_url=url_builder.page_url, container_id=container_id)


def render_entries_info(
    metadata: PaginationMetadata,
    first_item: Any = None,
    options: EntriesInfoOptions | None = None,
    *,
    html: bool = True,
    label_resolver: LabelResolver | Mapping[str, Any] | None = None,
) -> str:
    """
    Render a message containing number of displayed vs. total entries.

        render_entries_info(metadata, first_item=post)
        → "Displaying posts <b>6&nbsp;-&nbsp;12</b> of <b>26</b> in total"

    The entity name comes from ``options.entry_name`` when given, otherwise
    from the type of ``first_item``. Pass ``html=False`` for plain text.
    """
    resolver = resolve_label_resolver(label_resolver)
    opts = options or EntriesInfoOptions()
    naming = NamingResolver(resolver).naming_for(first_item)

    if html:
        opts = opts.model_copy(
            update={
                "emphasis": HTML_EMPHASIS,
                "space": HTML_SPACE,
                "range_separator": HTML_RANGE_SEPARATOR,
                "entry_name": escape(opts.entry_name) if opts.entry_name else None,
                "plural_name": escape(opts.plural_name) if opts.plural_name else None,
            }
        )
        naming = EntityNaming(
            singular=escape(naming.singular),
            plural=escape(str(naming.plural)),
            key=naming.key,
        )

    return EntriesInfoFormatter(resolver).format(metadata, naming, opts).text
