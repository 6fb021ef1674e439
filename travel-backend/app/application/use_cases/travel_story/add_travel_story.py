# Standard library imports
import logging

# Local application imports
from ....domain.repositories.travel_story_repository import TravelStoryRepository
from ....domain.models.travel_story import TravelStory
from ....utils.datetime_utils import from_epoch_millis
from ...dto.travel_story_dto import TravelStoryCreateRequest, TravelStoryResponse

logger = logging.getLogger(__name__)


class AddTravelStoryUseCase:
    """Use case for creating a travel story owned by the authenticated user"""

    def __init__(self, travel_story_repository: TravelStoryRepository) -> None:
        self.travel_story_repository = travel_story_repository

    async def execute(self, user_id: str, request: TravelStoryCreateRequest) -> TravelStoryResponse:
        """
        Create a travel story

        Args:
            user_id: Owner, taken from the verified access token
            request: Story fields; `visited_date` is a millisecond timestamp

        Returns:
            TravelStoryResponse for the stored story

        Raises:
            ValueError: If a field is missing or the visited date is invalid
        """
        if not all([
            request.title,
            request.story,
            request.visited_location,
            request.image_url,
            request.visited_date,
        ]):
            raise ValueError("All fields are required")

        story = TravelStory(
            id=None,
            user_id=user_id,
            title=request.title,
            story=request.story,
            visited_location=request.visited_location,
            image_url=request.image_url,
            visited_date=from_epoch_millis(request.visited_date),
        )
        saved = await self.travel_story_repository.create(story)
        logger.info("User %s added travel story %s", user_id, saved.id)

        return TravelStoryResponse(
            id=saved.id or "",
            title=saved.title,
            story=saved.story,
            visited_location=saved.visited_location,
            image_url=saved.image_url,
            visited_date=saved.visited_date,
            is_favourite=saved.is_favourite,
            user_id=saved.user_id,
            created_on=saved.created_on,
        )
