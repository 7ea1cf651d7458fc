"""
Pytest configuration and fixtures for page-links tests.
"""

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from pagelinks.models.metadata import PaginationMetadata


class ArticleComment:
    """Stand-in for a paginated domain object."""


@pytest.fixture
def make_metadata() -> Callable[..., PaginationMetadata]:
    """
    Helper to build pagination metadata.

    Usage:
        metadata = make_metadata(page=2, per_page=5, total=26)
    """

    def _make(*, page: int = 1, per_page: int = 10, total: int = 0) -> PaginationMetadata:
        return PaginationMetadata(current_page=page, per_page=per_page, total_entries=total)

    return _make


@pytest.fixture
def twenty_pages(make_metadata) -> Callable[[int], PaginationMetadata]:
    """Metadata factory for a 200-entry collection shown 10 per page."""

    def _make(page: int) -> PaginationMetadata:
        metadata: PaginationMetadata = make_metadata(page=page, per_page=10, total=200)
        return metadata

    return _make


@pytest.fixture
def article_comment() -> ArticleComment:
    return ArticleComment()


@pytest.fixture
def catalog() -> dict[str, Any]:
    """Label catalog overriding labels, model names and messages."""
    return {
        "previous_label": "‹ Prev",
        "next_label": "Next ›",
        "models": {
            "article_comment": {"one": "comment", "other": "comments"},
        },
        "page_entries_info": {
            "multi_page": "{model} {first}-{last} / {count}",
        },
        "article_comment": {
            "page_entries_info": {
                "single_page": {
                    "zero": "Nothing here yet",
                    "one": "Just one {model}",
                    "other": "All {count} {model}",
                },
            },
        },
    }


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def page_links_event() -> Callable[..., dict[str, Any]]:
    """
    Helper to build an API Gateway event for the page links handler.

    Usage:
        event = page_links_event(total_entries="26", per_page="5", page="2")
    """

    def _event(**params: str) -> dict[str, Any]:
        return {
            "httpMethod": "GET",
            "path": "/page-links",
            "queryStringParameters": params or None,
            "headers": {"x-api-key": "test-api-key"},
        }

    return _event
