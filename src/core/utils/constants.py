"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Request Errors
ERROR_CODE_BAD_REQUEST = "BAD_REQUEST"
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Media Type Errors
ERROR_CODE_UNSUPPORTED_CONTENT_TYPE = "UNSUPPORTED_CONTENT_TYPE"
ERROR_CODE_INVALID_IMAGE_FORMAT = "INVALID_IMAGE_FORMAT"

# Upstream Errors
ERROR_CODE_UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
ERROR_CODE_MEDIA_UPLOAD_FAILED = "MEDIA_UPLOAD_FAILED"
ERROR_CODE_REGISTRY_WRITE_FAILED = "REGISTRY_WRITE_FAILED"
ERROR_CODE_REGISTRY_READ_FAILED = "REGISTRY_READ_FAILED"


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB in bytes


MIME_TYPE_PNG: Final = "image/png"
MIME_TYPE_JPEG: Final = "image/jpeg"
MIME_TYPE_GIF: Final = "image/gif"
MIME_TYPE_WEBP: Final = "image/webp"

MIME_TYPE_EXTENSION_MAP: Final[dict[str, str]] = {
    MIME_TYPE_PNG: "png",
    MIME_TYPE_JPEG: "jpg",
    MIME_TYPE_GIF: "gif",
    MIME_TYPE_WEBP: "webp",
}

SUPPORTED_MIME_TYPES: Final[frozenset[str]] = frozenset(MIME_TYPE_EXTENSION_MAP.keys())


# ============================================================================
# Media Store
# ============================================================================

MEDIA_ID_PREFIX = "media_"
MEDIA_KEY_PREFIX = "media"
DATA_URL_PREFIX = "data:"
DATA_URL_BASE64_MARKER = ";base64"


# ============================================================================
# Asset Registry
# ============================================================================

REGISTRY_PARTITION_KEY = "user_id"
REGISTRY_SORT_KEY = "media_url"
REGISTRY_VALUE_ATTRIBUTE = "asset"


# ============================================================================
# Request Headers
# ============================================================================

HEADER_CONTENT_TYPE = "content-type"
HEADER_FILE_NAME = "x-file-name"


# ============================================================================
# Response Types
# ============================================================================

RESPONSE_TYPE_UPLOAD = "upload"
RESPONSE_TYPE_LIST_UPLOADS = "listUploads"


# ============================================================================
# Metrics
# ============================================================================

DEFAULT_METRICS_NAMESPACE = "ImageUploadRegistry"
METRIC_IMAGE_UPLOADED = "ImageUploaded"
METRIC_ASSET_INDEX_FAILED = "AssetIndexFailed"


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key,X-File-Name"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_MEDIA_S3_BUCKET_NAME = "MEDIA_S3_BUCKET_NAME"
ENV_MEDIA_PUBLIC_BASE_URL = "MEDIA_PUBLIC_BASE_URL"
ENV_ASSET_REGISTRY_TABLE_NAME = "ASSET_REGISTRY_TABLE_NAME"
ENV_METRICS_NAMESPACE = "POWERTOOLS_METRICS_NAMESPACE"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)
