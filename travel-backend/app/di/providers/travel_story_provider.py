from typing import TYPE_CHECKING
from ...domain.repositories.travel_story_repository import TravelStoryRepository
from ...application.use_cases.travel_story.add_travel_story import AddTravelStoryUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TravelStoryProvider:
    """Travel story use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            AddTravelStoryUseCase,
            lambda: AddTravelStoryUseCase(
                travel_story_repository=container.get(TravelStoryRepository)
            )
        )
