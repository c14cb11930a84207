"""Pydantic models for the upload history response."""

from pydantic import Field, StrictStr

from core.models.asset import CamelModel, UploadedAsset
from core.utils.constants import RESPONSE_TYPE_LIST_UPLOADS


class ListUploadsResponse(CamelModel):
    """Upload history for the calling user, most recent first."""

    type: StrictStr = Field(default=RESPONSE_TYPE_LIST_UPLOADS)
    assets: list[UploadedAsset] = Field(default_factory=list, description="Uploaded assets")
