"""
API Gateway proxy responses.

Success bodies are the serialized response model as-is. Error bodies share
one envelope::

    {"status": "error", "error": <code>, "message": ..., "timestamp": ...,
     "details"?: ..., "request_id"?: ...}
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    EXPOSE_HEADERS,
)
from core.utils.time import utc_now_iso

if TYPE_CHECKING:
    from core.models.errors import ImageServiceError

JsonDict = dict[str, Any]

ERROR_STATUS = "error"


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    CORS: dict[str, str] = {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": CORS_HEADERS,
        "Access-Control-Allow-Methods": CORS_METHODS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }

    @classmethod
    def headers(cls, cors_origin: str | None = None) -> dict[str, str]:
        headers = {"Content-Type": DEFAULT_CONTENT_TYPE, **cls.CORS}
        if cors_origin:
            headers["Access-Control-Allow-Origin"] = cors_origin
        return headers

    @classmethod
    def build(
        cls,
        status: HTTPStatus,
        payload: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if request_id:
            payload = {**payload, "request_id": request_id}

        return {
            "statusCode": int(status),
            "headers": cls.headers(cors_origin),
            "body": json.dumps(payload),
        }

    @classmethod
    def ok(
        cls,
        body: JsonDict,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.build(HTTPStatus.OK, body, request_id=request_id, cors_origin=cors_origin)

    @classmethod
    def no_content(cls, *, cors_origin: str | None = None) -> JsonDict:
        """CORS preflight answer."""
        return {
            "statusCode": int(HTTPStatus.NO_CONTENT),
            "headers": cls.headers(cors_origin),
            "body": "",
        }

    @classmethod
    def error(
        cls,
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "status": ERROR_STATUS,
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return cls.build(status, payload, request_id=request_id, cors_origin=cors_origin)

    @classmethod
    def from_error(
        cls,
        exc: ImageServiceError,
        *,
        message: str | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """Render a domain error with its own status and code.

        ``message`` replaces the error's message for failures whose detail
        must not reach the client.
        """
        return cls.error(
            status=exc.status,
            message=message or exc.message,
            error=exc.error_code,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def bad_request(
        cls,
        message: str,
        *,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            error=error,
            details=details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @classmethod
    def unsupported_media_type(
        cls,
        message: str,
        *,
        error: str | None = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return cls.error(
            status=HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            message=message,
            error=error,
            request_id=request_id,
            cors_origin=cors_origin,
        )
