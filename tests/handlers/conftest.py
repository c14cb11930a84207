import base64
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def upload_event() -> Callable[..., dict[str, Any]]:
    """
    Build a POST /api/upload-image proxy event.

    Usage:
        upload_event(png_bytes, content_type="image/png", file_name="cat.png")
        upload_event(png_bytes, user_id=None)  # unauthenticated
    """

    def _build(
        data: bytes = b"",
        *,
        content_type: str | None = "image/png",
        file_name: str | None = None,
        user_id: str | None = "john",
    ) -> dict[str, Any]:
        headers: dict[str, str] = {}
        if content_type is not None:
            headers["Content-Type"] = content_type
        if file_name is not None:
            headers["X-File-Name"] = file_name

        request_context: dict[str, Any] = {}
        if user_id is not None:
            request_context["authorizer"] = {"principalId": user_id}

        return {
            "httpMethod": "POST",
            "path": "/api/upload-image",
            "headers": headers,
            "body": base64.b64encode(data).decode("utf-8"),
            "isBase64Encoded": True,
            "requestContext": request_context,
        }

    return _build


@pytest.fixture
def list_uploads_event() -> Callable[..., dict[str, Any]]:
    """Build a GET /api/my-images proxy event."""

    def _build(*, user_id: str | None = "john") -> dict[str, Any]:
        request_context: dict[str, Any] = {}
        if user_id is not None:
            request_context["authorizer"] = {"principalId": user_id}

        return {
            "httpMethod": "GET",
            "path": "/api/my-images",
            "headers": {},
            "body": None,
            "isBase64Encoded": False,
            "requestContext": request_context,
        }

    return _build
