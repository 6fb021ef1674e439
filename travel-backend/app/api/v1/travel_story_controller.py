# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.travel_story_dto import TravelStoryCreateRequest, AddTravelStoryResponse
from ...application.use_cases.travel_story.add_travel_story import AddTravelStoryUseCase
from ...di.container import get_container
from ..exceptions import BadRequestError
from .dependencies import get_current_user_id


router = APIRouter(tags=["travel-stories"])


@router.post(
    "/add-travel-story",
    response_model=AddTravelStoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_travel_story(
    request: TravelStoryCreateRequest,
    user_id: str = Depends(get_current_user_id),
) -> AddTravelStoryResponse:
    """
    Create a travel story owned by the authenticated user

    Args:
        request: Story fields; `visitedDate` is a millisecond timestamp
        user_id: User ID from the verified token

    Returns:
        AddTravelStoryResponse with the stored story
    """
    container = get_container()
    add_story_use_case = container.get(AddTravelStoryUseCase)

    try:
        story = await add_story_use_case.execute(user_id, request)
    except ValueError as exception:
        raise BadRequestError(str(exception))

    return AddTravelStoryResponse(story=story, message="Added Successfully")
