from .mongo_connection import (
    connect_to_mongo,
    close_mongo_connection,
    get_database,
    get_user_collection,
    get_travel_story_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_travel_story_repository import MongoTravelStoryRepository

__all__ = [
    "connect_to_mongo",
    "close_mongo_connection",
    "get_database",
    "get_user_collection",
    "get_travel_story_collection",
    "MongoUserRepository",
    "MongoTravelStoryRepository",
]
