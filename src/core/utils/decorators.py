"""
Handler composition for API Gateway Lambda entry points.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import ImageServiceError
from core.utils.response import JsonDict, ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

GENERIC_FAILURE_MESSAGE = "We encountered an issue processing your request. Please try again."

# Messages starting with these are already written for clients
CLIENT_SAFE_PREFIXES = (
    "Invalid",
    "Missing",
    "Empty",
    "Unsupported",
    "Unable to",
    "Failed to",
    "File",
)

INPUT_ERROR_MESSAGES: tuple[tuple[type[Exception], str], ...] = (
    (ValueError, "The provided data is invalid. Please check your input and try again."),
    (KeyError, "A required field is missing. Please ensure all required fields are provided."),
    (AttributeError, "A required field is missing. Please ensure all required fields are provided."),
    (TypeError, "The data format is incorrect. Please check the request format."),
)


def client_message(exc: Exception) -> str:
    """Pick a message for an unhandled exception that is safe to return."""
    text = str(exc)
    if text.startswith(CLIENT_SAFE_PREFIXES):
        return text

    for exc_type, message in INPUT_ERROR_MESSAGES:
        if isinstance(exc, exc_type):
            return message

    return GENERIC_FAILURE_MESSAGE


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Outermost decorator for every route handler.

    - ``OPTIONS`` preflight gets 204 with CORS headers, the handler is not called
    - a domain error that escaped the handler renders with its own status
    - anything else is logged with its traceback and reported as 400
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)
        log_context = {"handler": func.__name__, "request_id": request_id}

        try:
            return func(event, context)

        except ImageServiceError as exc:
            logger.warning(
                "Unhandled domain error",
                extra={**log_context, "error_code": exc.error_code},
            )
            return ResponseBuilder.from_error(exc, request_id=request_id, cors_origin=cors_origin)

        except Exception as exc:
            logger.exception(
                "Unexpected error in handler",
                extra={**log_context, "error_type": type(exc).__name__},
            )
            return ResponseBuilder.error(
                status=HTTPStatus.BAD_REQUEST,
                message=client_message(exc),
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
