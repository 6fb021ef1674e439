from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .travel_story import AddTravelStoryUseCase
from .image import (
    UploadImageUseCase,
    DeleteImageUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "AddTravelStoryUseCase",
    "UploadImageUseCase",
    "DeleteImageUseCase",
]
