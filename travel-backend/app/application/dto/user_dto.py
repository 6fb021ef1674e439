from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserSummary(BaseModel):
    """DTO for the public part of a user returned on register/login"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str
    email: str


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    full_name: str
    email: str
    created_on: Optional[datetime] = None


class UserProfileResponse(BaseModel):
    """DTO wrapping the authenticated user's profile"""
    user: UserResponse
