from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class TravelStoryCreateRequest(BaseModel):
    """
    DTO for travel story creation request.

    `visited_date` is a millisecond timestamp, as a number or numeric string.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    story: Optional[str] = None
    visited_location: Optional[str] = None
    image_url: Optional[str] = None
    visited_date: Optional[Union[StrictInt, StrictFloat, StrictStr]] = None


class TravelStoryResponse(BaseModel):
    """DTO for travel story response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    story: str
    visited_location: str
    image_url: str
    visited_date: datetime
    is_favourite: bool = False
    user_id: str
    created_on: datetime


class AddTravelStoryResponse(BaseModel):
    """DTO for a created travel story"""
    story: TravelStoryResponse
    message: str
