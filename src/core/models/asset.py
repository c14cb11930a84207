"""Shared uploaded asset models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class MediaType(str, Enum):
    """Kind of media held by the media store."""

    IMAGE = "image"
    GIF = "gif"
    VIDEO = "video"


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MediaAsset(CamelModel):
    """Identifiers returned by the media store for a stored binary."""

    media_url: StrictStr = Field(..., min_length=1, description="Permanent media URL")
    media_id: StrictStr = Field(..., min_length=1, description="Opaque media identifier")


class UploadedAsset(CamelModel):
    """Asset record persisted in a user's upload history."""

    media_type: MediaType = Field(..., description="Kind of media stored")
    media_url: StrictStr = Field(..., min_length=1, description="Permanent media URL")
    media_id: StrictStr = Field(..., min_length=1, description="Opaque media identifier")
    date: StrictStr = Field(..., description="ISO-8601 persistence timestamp (UTC)")

