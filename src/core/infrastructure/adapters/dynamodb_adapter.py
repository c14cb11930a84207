"""boto3 DynamoDB table bound to the asset registry."""

from typing import Any, Protocol

import boto3

from core.infrastructure.adapters.aws_config import boto3_options, require_env
from core.utils.constants import ENV_ASSET_REGISTRY_TABLE_NAME


class DynamoDBAdapterProtocol(Protocol):
    """What the asset registry needs from DynamoDB."""

    def put_item(self, *, item: dict[str, Any]) -> dict[str, Any]: ...
    def query(self, **kwargs: Any) -> dict[str, Any]: ...


class DynamoDBAdapter:
    """Registry table operations.

    Errors are not handled here; ``DynamoDBAssetRegistry`` translates them.
    """

    def __init__(self) -> None:
        table_name = require_env(ENV_ASSET_REGISTRY_TABLE_NAME)
        self.table: Any = boto3.resource("dynamodb", **boto3_options()).Table(table_name)

    def put_item(self, *, item: dict[str, Any]) -> dict[str, Any]:
        """Insert or replace one item."""
        return self.table.put_item(Item=item)

    def query(self, **kwargs: Any) -> dict[str, Any]:
        """Run one query page; callers follow ``LastEvaluatedKey``."""
        return self.table.query(**kwargs)
