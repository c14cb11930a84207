"""Environment-driven settings shared by the boto3 adapters."""

import os

from core.utils.constants import ENV_AWS_ENDPOINT_URL, ENV_AWS_REGION


def require_env(name: str) -> str:
    """Return a required environment variable or fail adapter construction."""
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} environment variable is not set")
    return value


def boto3_options() -> dict[str, str | None]:
    # endpoint_url lets LocalStack stand in for AWS
    return {
        "endpoint_url": os.getenv(ENV_AWS_ENDPOINT_URL),
        "region_name": os.getenv(ENV_AWS_REGION),
    }
