"""Domain errors for the image upload registry.

Each error carries the HTTP status it surfaces as, so handlers can turn
any ``ImageServiceError`` into a response without a per-class branch.
"""

from http import HTTPStatus
from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_BAD_REQUEST,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_MEDIA_UPLOAD_FAILED,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_UNSUPPORTED_CONTENT_TYPE,
    ERROR_CODE_UPSTREAM_FAILURE,
)


class ImageServiceError(Exception):
    """
    Base exception for all image service errors.

    Subclasses set ``default_error_code`` and may set ``default_message``;
    callers can override either per instance. Optional context goes in
    ``details`` and is never shown to clients unless a handler copies it.
    """

    status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST
    default_error_code: ClassVar[str | None] = None
    default_message: ClassVar[str | None] = None

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or self.default_message
        error_code = error_code or self.default_error_code

        if not message or not error_code:
            raise TypeError(f"{type(self).__name__} requires a message and an error code")

        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class UnauthorizedError(ImageServiceError):
    """No caller identity on the request."""

    status = HTTPStatus.UNAUTHORIZED
    default_error_code = ERROR_CODE_UNAUTHORIZED
    default_message = "Unauthorized"


class BadRequestError(ImageServiceError):
    """Empty or malformed request body."""

    default_error_code = ERROR_CODE_BAD_REQUEST


class UnsupportedMediaTypeError(ImageServiceError):
    """Declared type is unsupported, or the bytes do not match it."""

    status = HTTPStatus.UNSUPPORTED_MEDIA_TYPE
    default_error_code = ERROR_CODE_UNSUPPORTED_CONTENT_TYPE


class FileSizeError(ImageServiceError):
    status = HTTPStatus.REQUEST_ENTITY_TOO_LARGE
    default_error_code = ERROR_CODE_FILE_SIZE_EXCEEDED


class UpstreamFailureError(ImageServiceError):
    """An external store call failed. Clients only ever see a generic message."""

    default_error_code = ERROR_CODE_UPSTREAM_FAILURE


class MediaStoreError(UpstreamFailureError):
    default_error_code = ERROR_CODE_MEDIA_UPLOAD_FAILED


class RegistryError(UpstreamFailureError):
    """Raised with the read or write code of the operation that failed."""
