"""Pydantic models for image upload request/response."""

import base64
import binascii
from typing import Any, Literal

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator

from core.models.asset import CamelModel
from core.utils.constants import RESPONSE_TYPE_UPLOAD

logger = Logger(UTC=True)

SupportedMimeType = Literal["image/png", "image/jpeg", "image/gif", "image/webp"]


class UploadImageRequest(BaseModel):
    """Validation model for a raw binary image upload.

    Built from the proxy event: the ``Content-Type`` and ``X-File-Name``
    headers plus the (usually base64-encoded) body.
    """

    content_type: SupportedMimeType = Field(..., description="Declared image MIME type")
    file_name: str | None = Field(None, description="Client file name, echoed verbatim")
    is_base64_encoded: bool = Field(False, description="API Gateway body encoding flag")
    body: bytes = Field(..., description="Raw image bytes")

    @field_validator("file_name")
    @classmethod
    def empty_file_name_is_absent(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("body", mode="before")
    @classmethod
    def decode_body(cls, value: Any, info: ValidationInfo) -> bytes:
        """
        Decode the request body:
        - must be present and non-empty
        - text bodies must be base64-encoded by API Gateway
        - must decode to at least one byte
        """
        if isinstance(value, (bytes, bytearray)):
            data = bytes(value)
        elif isinstance(value, str) and info.data.get("is_base64_encoded"):
            try:
                data = base64.b64decode(value, validate=True)
            except binascii.Error as e:
                logger.error(f"Body validation error: Invalid base64 - {e}")
                raise ValueError("Invalid base64 encoded body") from e
        elif value is None or value == "":
            data = b""
        else:
            raise ValueError("Invalid request body: expected binary content")

        if not data:
            raise ValueError("Empty request body")

        return data


class UploadImageResponse(CamelModel):
    """Response model for a successful image upload."""

    type: StrictStr = Field(default=RESPONSE_TYPE_UPLOAD)
    mime_type: SupportedMimeType = Field(..., description="Declared image MIME type")
    byte_count: StrictInt = Field(..., alias="bytes", description="Payload length in bytes")
    file_name: StrictStr | None = Field(None, description="Client file name, if provided")
