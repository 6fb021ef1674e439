# Standard library imports
from dataclasses import replace
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.travel_story_repository import TravelStoryRepository
from ...domain.models.travel_story import TravelStory
from ...domain.constants import TravelStoryFields
from .mongo_connection import get_travel_story_collection


class MongoTravelStoryRepository(TravelStoryRepository):
    """MongoDB implementation of TravelStoryRepository"""

    def __init__(self, travel_story_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.travel_story_collection = (
            travel_story_collection
            if travel_story_collection is not None
            else get_travel_story_collection()
        )

    async def create(self, story: TravelStory) -> TravelStory:
        """
        Insert a new travel story

        Args:
            story: TravelStory domain model without an ID

        Returns:
            Stored TravelStory with ID set
        """
        if not story:
            raise ValueError("Travel story cannot be None")

        try:
            result = await self.travel_story_collection.insert_one(self._story_to_dict(story))
        except PyMongoError as e:
            raise RuntimeError(f"Error saving travel story: {str(e)}")

        return replace(story, id=str(result.inserted_id))

    def _story_to_dict(self, story: TravelStory) -> dict:
        """
        Convert TravelStory domain model to MongoDB document

        Args:
            story: TravelStory domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            TravelStoryFields.USER_ID: story.user_id,
            TravelStoryFields.TITLE: story.title,
            TravelStoryFields.STORY: story.story,
            TravelStoryFields.VISITED_LOCATION: story.visited_location,
            TravelStoryFields.IMAGE_URL: story.image_url,
            TravelStoryFields.VISITED_DATE: story.visited_date,
            TravelStoryFields.IS_FAVOURITE: story.is_favourite,
            TravelStoryFields.CREATED_ON: story.created_on,
        }
