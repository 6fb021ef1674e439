"""Constants for domain model field names"""

from .user_fields import UserFields
from .travel_story_fields import TravelStoryFields
from .media_constants import ALLOWED_IMAGE_CONTENT_TYPES, ALLOWED_IMAGE_EXTENSIONS, UPLOADS_URL_PATH

__all__ = [
    "UserFields",
    "TravelStoryFields",
    "ALLOWED_IMAGE_CONTENT_TYPES",
    "ALLOWED_IMAGE_EXTENSIONS",
    "UPLOADS_URL_PATH",
]
