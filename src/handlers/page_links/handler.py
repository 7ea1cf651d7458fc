"""
Lambda handler responsible for building pagination links for a collection.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from pagelinks.utils.decorators import api_gateway_handler
from pagelinks.utils.response import ResponseBuilder
from pagelinks.utils.validators import sanitize_validation_errors, validate_request

from .models import PageLinksRequest
from .service import PageLinksService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests for pagination links.

    Supports:
    - Page, page size and total entries as query parameters
    - Inner/outer window sizes and previous/next-only mode
    - Entries summary with an optional entity name
    - Rendered HTML on request

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received page links request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": request_id,
        },
    )

    params = event.get("queryStringParameters") or {}

    try:
        request = validate_request(PageLinksRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors(include_url=False, include_context=False)},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
            request_id=request_id,
        )

    response = PageLinksService().build(request)

    return ResponseBuilder.ok(response.model_dump(mode="json"), request_id=request_id)
