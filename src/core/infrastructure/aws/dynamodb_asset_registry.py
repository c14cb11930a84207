"""DynamoDB-backed implementation of AssetRegistryRepository.

The table emulates one hash map per user: the partition key is the
user id, the sort key is the asset's media URL (the field) and the
``asset`` attribute holds the serialized record (the value).
"""

from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import ValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.asset import UploadedAsset
from core.models.errors import RegistryError
from core.repositories.asset_registry_repository import AssetRegistryRepository
from core.utils.constants import (
    ERROR_CODE_REGISTRY_READ_FAILED,
    ERROR_CODE_REGISTRY_WRITE_FAILED,
    REGISTRY_PARTITION_KEY,
    REGISTRY_SORT_KEY,
    REGISTRY_VALUE_ATTRIBUTE,
)

Item = dict[str, Any]

logger = Logger(UTC=True)


class DynamoDBAssetRegistry(AssetRegistryRepository):
    """DynamoDB-backed asset registry with error handling.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def put(self, *, user_id: str, asset: UploadedAsset) -> None:
        """Write one asset record keyed by its media URL.

        Raises:
            RegistryError: If the write fails
        """
        logger.debug(
            "Writing asset record",
            extra={"user_id": user_id, "media_url": asset.media_url},
        )

        item: Item = {
            REGISTRY_PARTITION_KEY: user_id,
            REGISTRY_SORT_KEY: asset.media_url,
            REGISTRY_VALUE_ATTRIBUTE: asset.model_dump_json(by_alias=True),
        }

        try:
            self._db.put_item(item=item)
            logger.info(
                "Asset record written",
                extra={"user_id": user_id, "media_url": asset.media_url},
            )

        except ClientError as exc:
            logger.error(
                "DynamoDB put_item failed",
                extra={"user_id": user_id, "media_url": asset.media_url},
            )
            raise RegistryError(
                message="Unable to save asset record at this time",
                error_code=ERROR_CODE_REGISTRY_WRITE_FAILED,
                details={"user_id": user_id},
            ) from exc

        except Exception as exc:
            logger.error("Unexpected error writing asset record", extra={"user_id": user_id})
            raise RegistryError(
                message="Unable to save asset record at this time",
                error_code=ERROR_CODE_REGISTRY_WRITE_FAILED,
                details={"user_id": user_id},
            ) from exc

    def list_all(self, *, user_id: str) -> list[UploadedAsset]:
        """Read, decode and order the user's whole collection.

        Raises:
            RegistryError: If the query fails
        """
        items = self._fetch_items(user_id)

        assets = [
            asset
            for asset in (self._decode(item, user_id=user_id) for item in items)
            if asset is not None
        ]

        # ISO-8601 UTC strings order lexicographically; sorted() is stable on ties
        assets = sorted(assets, key=lambda asset: asset.date, reverse=True)

        logger.info(
            "Asset records listed",
            extra={
                "user_id": user_id,
                "count": len(assets),
                "dropped": len(items) - len(assets),
            },
        )
        return assets

    def _fetch_items(self, user_id: str) -> list[Item]:
        logger.debug("Reading asset records", extra={"user_id": user_id})

        query_kwargs: dict[str, Any] = {
            "KeyConditionExpression": Key(REGISTRY_PARTITION_KEY).eq(user_id),
        }

        items: list[Item] = []

        try:
            while True:
                response = self._db.query(**query_kwargs)
                page_items = response.get("Items", [])

                if not isinstance(page_items, list):
                    raise RegistryError(
                        message="Invalid query response from DynamoDB",
                        error_code=ERROR_CODE_REGISTRY_READ_FAILED,
                        details={"user_id": user_id},
                    )

                items.extend(page_items)

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break

                query_kwargs["ExclusiveStartKey"] = last_evaluated_key

            return items

        except RegistryError:
            raise

        except ClientError as exc:
            logger.error("DynamoDB query failed", extra={"user_id": user_id})
            raise RegistryError(
                message="Unable to list uploads for this user",
                error_code=ERROR_CODE_REGISTRY_READ_FAILED,
                details={"user_id": user_id},
            ) from exc

        except Exception as exc:
            logger.error("Unexpected error listing asset records", extra={"user_id": user_id})
            raise RegistryError(
                message="Unable to list uploads for this user",
                error_code=ERROR_CODE_REGISTRY_READ_FAILED,
                details={"user_id": user_id},
            ) from exc

    @staticmethod
    def _decode(item: Item, *, user_id: str) -> UploadedAsset | None:
        raw = item.get(REGISTRY_VALUE_ATTRIBUTE)

        try:
            if not isinstance(raw, str):
                raise TypeError(f"expected string value, got {type(raw).__name__}")
            return UploadedAsset.model_validate_json(raw)

        except (ValidationError, TypeError) as exc:
            logger.warning(
                "Skipping malformed asset record",
                extra={
                    "user_id": user_id,
                    "media_url": item.get(REGISTRY_SORT_KEY),
                    "error": str(exc),
                },
            )
            return None
