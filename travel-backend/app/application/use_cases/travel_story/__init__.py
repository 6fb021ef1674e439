from .add_travel_story import AddTravelStoryUseCase

__all__ = ["AddTravelStoryUseCase"]
