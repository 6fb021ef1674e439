from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ImageUploadResponse(BaseModel):
    """DTO for an uploaded image"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    image_url: str


class ImageDeleteResponse(BaseModel):
    """DTO for an image deletion attempt; `error` is set when nothing was deleted"""
    error: Optional[bool] = None
    message: str
