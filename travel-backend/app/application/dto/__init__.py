from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserSummary, UserResponse, UserProfileResponse
from .travel_story_dto import (
    TravelStoryCreateRequest,
    TravelStoryResponse,
    AddTravelStoryResponse,
)
from .image_dto import ImageUploadResponse, ImageDeleteResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserSummary",
    "UserResponse",
    "UserProfileResponse",
    "TravelStoryCreateRequest",
    "TravelStoryResponse",
    "AddTravelStoryResponse",
    "ImageUploadResponse",
    "ImageDeleteResponse",
]
