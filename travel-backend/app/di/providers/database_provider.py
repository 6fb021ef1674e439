from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_user_collection,
    get_travel_story_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB collections in the container.
        Repositories receive collections from here, never from module globals.
        """
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("travel_story_collection", get_travel_story_collection())
