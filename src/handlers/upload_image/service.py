"""Business logic for image upload operations.

This module coordinates format verification, media storage and asset
indexing for image uploads while translating failures into
domain-specific errors.
"""

import os

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from core.infrastructure.aws.dynamodb_asset_registry import DynamoDBAssetRegistry
from core.infrastructure.aws.s3_media_store import S3MediaStore
from core.models.asset import UploadedAsset
from core.models.errors import (
    BadRequestError,
    FileSizeError,
    MediaStoreError,
    UnsupportedMediaTypeError,
)
from core.repositories.asset_registry_repository import AssetRegistryRepository
from core.repositories.media_store_repository import MediaStoreRepository
from core.utils.constants import (
    DEFAULT_METRICS_NAMESPACE,
    ENV_METRICS_NAMESPACE,
    ERROR_CODE_INVALID_IMAGE_FORMAT,
    MAX_FILE_SIZE,
    METRIC_ASSET_INDEX_FAILED,
    get_max_file_size_mb,
)
from core.utils.mime import (
    build_data_url,
    is_supported_mime_type,
    matches_declared_type,
    media_type_for,
)
from core.utils.time import utc_now_iso

from .models import UploadImageResponse

logger = Logger(UTC=True)
metrics = Metrics(namespace=os.getenv(ENV_METRICS_NAMESPACE, DEFAULT_METRICS_NAMESPACE))


class UploadService:
    """Application service responsible for image uploads.

    This service orchestrates:
    - Declared type and payload validation
    - Magic-byte verification of the payload
    - Uploading image content to the media store
    - Indexing the stored asset in the user's history
    """

    def __init__(
        self,
        media_store: MediaStoreRepository | None = None,
        registry: AssetRegistryRepository | None = None,
    ) -> None:
        """Initialize the upload service with required infrastructure dependencies."""
        self.media_store = media_store or S3MediaStore()
        self.registry = registry or DynamoDBAssetRegistry()

    def upload_image(
        self,
        *,
        user_id: str,
        mime_type: str,
        file_data: bytes,
        file_name: str | None = None,
    ) -> UploadImageResponse:
        """Verify, store and index an uploaded image.

        The upload flow is:
        1. Validate declared type, payload presence and size
        2. Verify magic bytes against the declared type
        3. Upload the payload to the media store (single attempt)
        4. Index the asset under the caller's collection
        5. Report success even when indexing fails

        Args:
            user_id: Authenticated caller
            mime_type: Declared Content-Type
            file_data: Raw image bytes
            file_name: Optional client file name, echoed back

        Returns:
            Upload response describing the accepted payload

        Raises:
            UnsupportedMediaTypeError: If the type is unsupported or the bytes do not match it
            BadRequestError: If the payload is empty
            FileSizeError: If the payload exceeds the size limit
            MediaStoreError: If the media store upload fails
        """
        logger.debug(
            "Starting image upload",
            extra={"user_id": user_id, "mime_type": mime_type, "bytes": len(file_data)},
        )

        # Step 1: Validate declared type and payload
        if not is_supported_mime_type(mime_type):
            logger.warning("Unsupported Content-Type", extra={"mime_type": mime_type})
            raise UnsupportedMediaTypeError(
                message="Unsupported Content-Type",
                details={"mime_type": mime_type},
            )

        if not file_data:
            raise BadRequestError(message="Empty or invalid request body")

        if len(file_data) > MAX_FILE_SIZE:
            logger.warning(
                "Payload exceeds size limit",
                extra={"user_id": user_id, "bytes": len(file_data)},
            )
            raise FileSizeError(
                message=f"File size exceeds {get_max_file_size_mb()}MB limit",
                details={"bytes": len(file_data)},
            )

        # Step 2: Verify magic bytes against the declared type
        if not matches_declared_type(file_data, mime_type):
            logger.warning(
                "Payload does not match declared type",
                extra={"user_id": user_id, "mime_type": mime_type},
            )
            raise UnsupportedMediaTypeError(
                message="Invalid image format",
                error_code=ERROR_CODE_INVALID_IMAGE_FORMAT,
                details={"mime_type": mime_type},
            )

        # Step 3: Upload to the media store, at most once. Failures are
        # logged by the handler.
        media_type = media_type_for(mime_type)

        try:
            stored = self.media_store.upload(
                media_type=media_type,
                data_url=build_data_url(file_data, mime_type),
            )
        except MediaStoreError:
            raise
        except Exception as exc:
            raise MediaStoreError(
                message="Unable to upload image",
                details={"user_id": user_id},
            ) from exc

        # Step 4: Index the asset; a failed write leaves it untracked
        asset = UploadedAsset(
            media_type=media_type,
            media_url=stored.media_url,
            media_id=stored.media_id,
            date=utc_now_iso(),
        )

        try:
            self.registry.put(user_id=user_id, asset=asset)
        except Exception:
            logger.warning(
                "Upload succeeded but asset was not indexed",
                extra={"user_id": user_id, "media_url": asset.media_url},
                exc_info=True,
            )
            metrics.add_metric(name=METRIC_ASSET_INDEX_FAILED, unit=MetricUnit.Count, value=1)

        logger.info(
            "Image uploaded successfully",
            extra={"user_id": user_id, "media_id": asset.media_id, "media_type": media_type.value},
        )

        return UploadImageResponse(
            mime_type=mime_type,
            byte_count=len(file_data),
            file_name=file_name,
        )
