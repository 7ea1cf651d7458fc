import json
from http import HTTPStatus
from types import SimpleNamespace
from typing import Any, cast

from pagelinks.models.errors import InvalidMetadataError
from pagelinks.utils.decorators import api_gateway_handler
from pagelinks.utils.response import JsonDict, ResponseBuilder


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    """Parse JSON body from API Gateway response."""
    body = resp.get("body")
    if not body:
        return {}
    return cast(dict[str, Any], json.loads(body))


def test_api_handler_success() -> None:
    """Successful handler execution returns response unchanged."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok(
            {"msg": "ok"},
            request_id=context.aws_request_id,
            cors_origin="*",
        )

    context = SimpleNamespace(aws_request_id="req-ok")
    resp = handler({}, context)

    parsed = parse_body(resp)
    assert resp["statusCode"] == HTTPStatus.OK
    assert parsed["msg"] == "ok"
    assert parsed["request_id"] == "req-ok"


def test_api_handler_options_preflight() -> None:
    """OPTIONS request returns 204 with CORS headers."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:  # pragma: no cover
        raise AssertionError("Should not be called")

    resp = handler({"httpMethod": "OPTIONS"}, SimpleNamespace())

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert resp["body"] == ""
    assert "Access-Control-Allow-Origin" in resp["headers"]


def test_pagination_error_returns_400_with_code() -> None:
    """Pagination errors keep their error code and details."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise InvalidMetadataError(
            message="Invalid pagination metadata",
            details={"per_page": 0},
        )

    resp = handler({}, SimpleNamespace(aws_request_id="req-meta"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["error"] == "INVALID_METADATA"
    assert parsed["message"] == "Invalid pagination metadata"
    assert parsed["details"] == {"per_page": 0}
    assert parsed["request_id"] == "req-meta"


def test_value_error_returns_400() -> None:
    """ValueError returns 400 with user-friendly message."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise ValueError("Invalid input data")

    resp = handler({}, SimpleNamespace(aws_request_id="req-400"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["message"] == "Invalid input data"
    assert parsed["request_id"] == "req-400"


def test_generic_value_error_message_is_rewritten() -> None:
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise ValueError("could not convert string to float")

    parsed = parse_body(handler({}, SimpleNamespace()))

    assert parsed["message"] == "The provided data is invalid. Please check your input and try again."


def test_key_error_returns_400() -> None:
    """KeyError returns 400 with a missing-field message."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise KeyError("total_entries")

    resp = handler({}, SimpleNamespace())
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["message"].startswith("A required field is missing")


def test_type_error_returns_400() -> None:
    """TypeError returns 400."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise TypeError("wrong type")

    resp = handler({}, SimpleNamespace())
    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST


def test_unexpected_error_returns_500() -> None:
    """Unexpected exceptions return 500 without leaking details."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise RuntimeError("database password is hunter2")

    resp = handler({}, SimpleNamespace(aws_request_id="req-500"))
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert "hunter2" not in parsed["message"]
    assert parsed["request_id"] == "req-500"
