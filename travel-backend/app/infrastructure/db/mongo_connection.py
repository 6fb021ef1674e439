# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TRAVEL_STORIES_COLLECTION = "travelstories"


# Process-wide MongoDB connection, opened by the application lifespan
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def connect_to_mongo() -> AsyncIOMotorDatabase:
    """
    Open the MongoDB client (idempotent)

    Motor connects lazily, so this does not block on the server; the first
    query (or index creation) does.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info("MongoDB client created for database '%s'", settings.mongo_database_name)
    return _mongo_database


def close_mongo_connection() -> None:
    """Close the MongoDB client if it was opened"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance, connecting on first use

    Returns:
        MongoDB database instance
    """
    return connect_to_mongo()


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_travel_story_collection() -> AsyncIOMotorCollection:
    """
    Get travel stories collection from MongoDB

    Returns:
        MongoDB collection for travel stories
    """
    return get_database()[TRAVEL_STORIES_COLLECTION]
