from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .user_dto import UserSummary


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request; presence is checked by the use case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request; presence is checked by the use case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """DTO for a successful registration or login"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: bool = False
    user: UserSummary
    access_token: str
    message: str
