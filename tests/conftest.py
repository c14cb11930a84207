"""
Pytest configuration and fixtures for image upload registry tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup.
"""

import os

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("MEDIA_S3_BUCKET_NAME", "image-upload-media-test")
os.environ.setdefault("ASSET_REGISTRY_TABLE_NAME", "image-upload-assets-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "image-upload-registry")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "ImageUploadRegistryTest")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.pop("MEDIA_PUBLIC_BASE_URL", None)

from collections.abc import Callable  # noqa: E402
import json  # noqa: E402
from typing import Any  # noqa: E402

import boto3  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_registry_table(dynamodb_resource):
    """Helper to create the asset registry table (user hash + media_url field)."""
    table_name = os.getenv("ASSET_REGISTRY_TABLE_NAME")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[
            {"AttributeName": "user_id", "KeyType": "HASH"},
            {"AttributeName": "media_url", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "user_id", "AttributeType": "S"},
            {"AttributeName": "media_url", "AttributeType": "S"},
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the asset registry table for testing.

    moto discards the table when the mock context exits.
    """
    table_name = os.getenv("ASSET_REGISTRY_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_registry_table(dynamodb_resource)
        table.wait_until_exists()

    return table


@pytest.fixture
def registry_put_raw(dynamodb_table) -> Callable[[str, str, Any], None]:
    """
    Helper to write a raw registry field, bypassing the registry's encoder.

    Usage:
        registry_put_raw("john", "https://cdn/x.png", "{not json")
    """

    def _put(user_id: str, media_url: str, value: Any) -> None:
        dynamodb_table.put_item(
            Item={"user_id": user_id, "media_url": media_url, "asset": value}
        )

    return _put


@pytest.fixture
def registry_items(dynamodb_table) -> Callable[[str], list[dict[str, Any]]]:
    """Helper to read every raw registry item for a user."""

    def _items(user_id: str) -> list[dict[str, Any]]:
        response = dynamodb_table.query(
            KeyConditionExpression="user_id = :u",
            ExpressionAttributeValues={":u": user_id},
        )
        return list(response.get("Items", []))

    return _items


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the media bucket for testing."""
    bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
    s3_client.create_bucket(Bucket=bucket_name)
    return s3_client


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], dict[str, Any]]:
    """
    Helper to get an object from S3.

    Usage:
        obj = s3_get_object("media/media_abc.png")
        obj["Body"].read()
    """

    def _get(key: str) -> dict[str, Any]:
        bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
        response: dict[str, Any] = s3_client.get_object(Bucket=bucket_name, Key=key)
        return response

    return _get


@pytest.fixture
def s3_keys(s3_client) -> Callable[[], list[str]]:
    """Helper listing every object key in the media bucket."""

    def _keys() -> list[str]:
        bucket_name = os.getenv("MEDIA_S3_BUCKET_NAME")
        response = s3_client.list_objects_v2(Bucket=bucket_name)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _keys


@pytest.fixture
def sample_asset_json() -> Callable[..., str]:
    """Build a serialized asset record as stored in the registry."""

    def _build(
        media_url: str = "https://cdn.example.com/media/media_1.png",
        media_id: str = "media_1",
        media_type: str = "image",
        date: str = "2024-01-01T10:00:00+00:00",
    ) -> str:
        return json.dumps(
            {
                "mediaType": media_type,
                "mediaUrl": media_url,
                "mediaId": media_id,
                "date": date,
            }
        )

    return _build


@pytest.fixture
def png_bytes() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def gif_bytes() -> bytes:
    """Sample binary GIF data (1x1 GIF89a)."""
    return (
        b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04"
        b"\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
    )


@pytest.fixture
def webp_bytes() -> bytes:
    """Sample binary WEBP header with a VP8L chunk."""
    return b"RIFF\x1a\x00\x00\x00WEBPVP8L\x0d\x00\x00\x00/\x00\x00\x00\x10\x07\x10\x11\x11\x88\x88\xfe\x07\x00"
