"""
Lambda handler for GET /api/my-images.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import RegistryError, UnauthorizedError
from core.utils.constants import DEFAULT_METRICS_NAMESPACE, ENV_METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.identity import require_caller_id
from core.utils.response import ResponseBuilder

from .models import ListUploadsResponse
from .service import ListUploadsService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=os.getenv(ENV_METRICS_NAMESPACE, DEFAULT_METRICS_NAMESPACE))

LIST_FAILURE_MESSAGE = "Failed to fetch uploads"


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests for the caller's upload history.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received upload history request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    try:
        user_id = require_caller_id(event)
    except UnauthorizedError as exc:
        logger.warning("Rejected unauthenticated history request", extra={"request_id": request_id})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    service = ListUploadsService()

    try:
        assets = service.list_uploads(user_id)
    except RegistryError as exc:
        logger.exception(
            "Failed to fetch uploads",
            extra={"user_id": user_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(
            exc,
            message=LIST_FAILURE_MESSAGE,
            request_id=request_id,
        )

    response = ListUploadsResponse(assets=assets)

    return ResponseBuilder.ok(response.to_json_dict())
