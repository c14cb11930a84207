"""
Lambda handler for POST /api/upload-image.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ImageServiceError, UnauthorizedError, UpstreamFailureError
from core.utils.constants import (
    DEFAULT_METRICS_NAMESPACE,
    ENV_METRICS_NAMESPACE,
    ERROR_CODE_UNSUPPORTED_CONTENT_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
    HEADER_CONTENT_TYPE,
    HEADER_FILE_NAME,
    METRIC_IMAGE_UPLOADED,
)
from core.utils.decorators import api_gateway_handler
from core.utils.identity import get_header, require_caller_id
from core.utils.response import ResponseBuilder
from core.utils.validators import error_fields, sanitize_validation_errors, validate_request

from .models import UploadImageRequest
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=os.getenv(ENV_METRICS_NAMESPACE, DEFAULT_METRICS_NAMESPACE))

UPLOAD_FAILURE_MESSAGE = "Failed to process image upload"


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle raw binary image uploads.

    The handler rejects unauthenticated callers before touching the body,
    validates the declared Content-Type and body encoding, and delegates
    verification, storage and indexing to the service layer.

    Expected API Gateway event structure:
    {
        "headers": {"Content-Type": "image/png", "X-File-Name": "cat.png"},
        "body": "<base64 image bytes>",
        "isBase64Encoded": true,
        "requestContext": {"authorizer": {"principalId": "<user id>"}}
    }

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received image upload request",
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
        logger.warning("Rejected unauthenticated upload", extra={"request_id": request_id})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    params = {
        "content_type": get_header(event, HEADER_CONTENT_TYPE),
        "file_name": get_header(event, HEADER_FILE_NAME),
        "is_base64_encoded": bool(event.get("isBase64Encoded")),
        "body": event.get("body"),
    }

    try:
        request = validate_request(UploadImageRequest, params)
    except PydanticValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        logger.warning(
            "Request validation failed",
            extra={"user_id": user_id, "errors": errors},
        )

        if "content_type" in error_fields(errors):
            return ResponseBuilder.unsupported_media_type(
                "Unsupported Content-Type",
                error=ERROR_CODE_UNSUPPORTED_CONTENT_TYPE,
                request_id=request_id,
            )

        return ResponseBuilder.bad_request(
            "Empty or invalid request body",
            error=ERROR_CODE_VALIDATION_FAILED,
            details={"errors": sanitize_validation_errors(errors)},
            request_id=request_id,
        )

    service = UploadService()

    try:
        response = service.upload_image(
            user_id=user_id,
            mime_type=request.content_type,
            file_data=request.body,
            file_name=request.file_name,
        )

    except UpstreamFailureError as exc:
        logger.exception(
            "Upstream error during image upload",
            extra={"user_id": user_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(
            exc,
            message=UPLOAD_FAILURE_MESSAGE,
            request_id=request_id,
        )

    except ImageServiceError as exc:
        logger.info(
            "Upload rejected",
            extra={"user_id": user_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name=METRIC_IMAGE_UPLOADED, unit=MetricUnit.Count, value=1)

    return ResponseBuilder.ok(response.to_json_dict())
