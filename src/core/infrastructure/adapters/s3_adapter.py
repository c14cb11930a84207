"""boto3 S3 client bound to the media bucket."""

from typing import Any, Protocol

import boto3

from core.infrastructure.adapters.aws_config import boto3_options, require_env
from core.utils.constants import ENV_MEDIA_S3_BUCKET_NAME


class S3AdapterProtocol(Protocol):
    """What the media store needs from S3."""

    @property
    def bucket_name(self) -> str: ...

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None: ...


class S3Adapter:
    """Writes objects into the media bucket.

    Errors are not handled here; ``S3MediaStore`` translates them.
    """

    def __init__(self) -> None:
        self._bucket = require_env(ENV_MEDIA_S3_BUCKET_NAME)
        self._client: Any = boto3.client("s3", **boto3_options())

    @property
    def bucket_name(self) -> str:
        return self._bucket

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            Metadata=metadata,
        )
