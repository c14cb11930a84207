"""
Business logic for the per-user upload history.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_asset_registry import DynamoDBAssetRegistry
from core.models.asset import UploadedAsset
from core.repositories.asset_registry_repository import AssetRegistryRepository

logger = Logger(UTC=True)


class ListUploadsService:
    """Application service responsible for listing a user's uploads.

    Decoding, dropping of corrupt records and ordering all happen in the
    registry; this service never fails for a single bad record.
    """

    def __init__(self, registry: AssetRegistryRepository | None = None) -> None:
        self.registry = registry or DynamoDBAssetRegistry()

    def list_uploads(self, user_id: str) -> list[UploadedAsset]:
        """Return the caller's assets, most recent first.

        Raises:
            RegistryError: If the history cannot be read
        """
        assets = self.registry.list_all(user_id=user_id)

        logger.info(
            "Uploads listed successfully",
            extra={"user_id": user_id, "count": len(assets)},
        )
        return assets
