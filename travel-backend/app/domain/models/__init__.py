from .user import User
from .travel_story import TravelStory

__all__ = ["User", "TravelStory"]
