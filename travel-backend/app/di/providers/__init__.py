from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .travel_story_provider import TravelStoryProvider
from .image_provider import ImageProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "TravelStoryProvider",
    "ImageProvider",
]
