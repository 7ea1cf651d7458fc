"""
API Gateway responses for the page links endpoints.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from pagelinks.models.errors import PaginationError
from pagelinks.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
)
from pagelinks.utils.time import utc_now_iso

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses.

    Every response carries JSON content type and CORS headers. Error bodies
    share one shape: ``error``, ``message``, ``timestamp`` and, when
    present, ``details`` and ``request_id``.
    """

    @staticmethod
    def headers(cors_origin: str | None = None) -> dict[str, str]:
        return {
            "Content-Type": DEFAULT_CONTENT_TYPE,
            "Access-Control-Allow-Origin": cors_origin or CORS_ORIGIN,
            "Access-Control-Allow-Headers": CORS_HEADERS,
            "Access-Control-Allow-Methods": CORS_METHODS,
        }

    @staticmethod
    def _json(
        status: HTTPStatus,
        payload: JsonDict,
        *,
        request_id: str | None,
        cors_origin: str | None,
    ) -> JsonDict:
        if request_id:
            payload = {**payload, "request_id": request_id}

        return {
            "statusCode": status.value,
            "headers": ResponseBuilder.headers(cors_origin),
            "body": json.dumps(payload, ensure_ascii=False),
        }

    @staticmethod
    def _error(
        status: HTTPStatus,
        message: str,
        *,
        error: str | None = None,
        details: Any = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return ResponseBuilder._json(status, payload, request_id=request_id, cors_origin=cors_origin)

    @staticmethod
    def ok(
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder._json(HTTPStatus.OK, body, request_id=request_id, cors_origin=cors_origin)

    @staticmethod
    def preflight(cors_origin: str | None = None) -> JsonDict:
        """204 answer to a CORS preflight request."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": ResponseBuilder.headers(cors_origin),
            "body": "",
        }

    @staticmethod
    def bad_request(
        message: str,
        *,
        error: str | None = None,
        details: Any = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder._error(
            HTTPStatus.BAD_REQUEST,
            message,
            error=error,
            details=details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error",
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder._error(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            message,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @staticmethod
    def from_pagination_error(
        exc: PaginationError,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """400 response carrying the error code and details of ``exc``."""
        return ResponseBuilder.bad_request(
            exc.message,
            error=exc.error_code,
            details=exc.details,
            request_id=request_id,
            cors_origin=cors_origin,
        )
