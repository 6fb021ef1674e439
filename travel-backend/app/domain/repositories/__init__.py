from .user_repository import UserRepository, UserAlreadyExistsError
from .travel_story_repository import TravelStoryRepository

__all__ = ["UserRepository", "UserAlreadyExistsError", "TravelStoryRepository"]
