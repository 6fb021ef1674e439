from abc import ABC, abstractmethod
from ..models.travel_story import TravelStory


class TravelStoryRepository(ABC):
    """Repository interface - defines contract for travel story data access"""

    @abstractmethod
    async def create(self, story: TravelStory) -> TravelStory:
        """Insert a new travel story and return it with its ID set"""
        pass
