"""S3-backed implementation of MediaStoreRepository."""

import os
import uuid

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.asset import MediaAsset, MediaType
from core.models.errors import MediaStoreError
from core.repositories.media_store_repository import MediaStoreRepository
from core.utils.constants import (
    ENV_MEDIA_PUBLIC_BASE_URL,
    MEDIA_ID_PREFIX,
    MEDIA_KEY_PREFIX,
    MIME_TYPE_EXTENSION_MAP,
)
from core.utils.mime import parse_data_url

logger = Logger(UTC=True)


class S3MediaStore(MediaStoreRepository):
    """Media store backed by Amazon S3.

    Every upload gets a fresh media id and object key, so re-uploading
    identical bytes yields a new, independent media URL.
    """

    def __init__(
        self,
        adapter: S3AdapterProtocol | None = None,
        public_base_url: str | None = None,
    ) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter or S3Adapter()
        self._public_base_url = public_base_url or os.getenv(ENV_MEDIA_PUBLIC_BASE_URL)

    @staticmethod
    def generate_media_id() -> str:
        """Generate a unique media identifier."""
        return f"{MEDIA_ID_PREFIX}{uuid.uuid4().hex}"

    def upload(self, *, media_type: MediaType, data_url: str) -> MediaAsset:
        """Decode the data URL and store its payload in S3."""
        try:
            mime_type, payload = parse_data_url(data_url)
        except ValueError as exc:
            logger.error("Rejected malformed data URL", extra={"media_type": media_type.value})
            raise MediaStoreError(
                message="Unable to store media payload",
                details={"reason": str(exc)},
            ) from exc

        media_id = self.generate_media_id()
        key = f"{MEDIA_KEY_PREFIX}/{media_id}.{self._get_extension(mime_type)}"

        logger.debug(
            "Uploading media",
            extra={
                "media-id": media_id,
                "media-type": media_type.value,
                "key": key,
                "size": len(payload),
            },
        )

        try:
            self._s3.put_object(
                key=key,
                body=payload,
                content_type=mime_type,
                metadata={
                    "media-id": media_id,
                    "media-type": media_type.value,
                },
            )
        except ClientError as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise MediaStoreError(
                message="Unable to store media at this time",
                details={"media_id": media_id},
            ) from exc

        except Exception as exc:
            logger.error("Unexpected error uploading media", extra={"key": key})
            raise MediaStoreError(
                message="Unable to store media at this time",
                details={"media_id": media_id},
            ) from exc

        media_url = self._build_media_url(key)
        logger.info("Media stored", extra={"media_id": media_id, "media_url": media_url})

        return MediaAsset(media_url=media_url, media_id=media_id)

    def _build_media_url(self, key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{key}"

        return f"https://{self._s3.bucket_name}.s3.amazonaws.com/{key}"

    @staticmethod
    def _get_extension(mime_type: str) -> str:
        """Return file extension for a given MIME type."""
        return MIME_TYPE_EXTENSION_MAP[mime_type]
