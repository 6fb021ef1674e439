from .auth_controller import router as auth_router
from .image_controller import router as image_router
from .travel_story_controller import router as travel_story_router


__all__ = ["auth_router", "image_router", "travel_story_router"]
