"""Abstract contract for per-user asset history persistence."""

from abc import ABC, abstractmethod

from core.models.asset import UploadedAsset


class AssetRegistryRepository(ABC):
    """Contract for storing and retrieving a user's uploaded assets.

    Each user owns one field-keyed collection; the field is the asset's
    media URL and the value is the serialized asset record.
    """

    @abstractmethod
    def put(self, *, user_id: str, asset: UploadedAsset) -> None:
        """Write one asset record into the user's collection.

        An existing record with the same media URL is overwritten.

        Raises:
            RegistryError: If the write fails
        """

    @abstractmethod
    def list_all(self, *, user_id: str) -> list[UploadedAsset]:
        """Return every decodable asset for a user, most recent first.

        Records that fail to decode are dropped. A user with no uploads
        gets an empty list.

        Raises:
            RegistryError: If the collection cannot be read
        """
