"""Abstract contract for external media storage."""

from abc import ABC, abstractmethod

from core.models.asset import MediaAsset, MediaType


class MediaStoreRepository(ABC):
    """Contract for durably storing uploaded media.

    Implementations could be S3, a hosting platform's media API, etc.
    The media store is the only authority for media URLs and ids.
    """

    @abstractmethod
    def upload(self, *, media_type: MediaType, data_url: str) -> MediaAsset:
        """Store a media payload and return its permanent identifiers.

        Args:
            media_type: Kind of media being stored
            data_url: Base64 data URL carrying both payload and MIME type

        Returns:
            MediaAsset with the permanent URL and opaque id

        Raises:
            MediaStoreError: If the payload cannot be stored
        """
