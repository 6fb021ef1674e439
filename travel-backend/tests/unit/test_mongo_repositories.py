"""
Unit tests for the MongoDB repositories, against mocked Motor collections.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from app.domain.constants import TravelStoryFields, UserFields
from app.domain.models.travel_story import TravelStory
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserAlreadyExistsError
from app.infrastructure.db.mongo_travel_story_repository import MongoTravelStoryRepository
from app.infrastructure.db.mongo_user_repository import MongoUserRepository


@pytest.fixture
def collection():
    mock = MagicMock()
    mock.find_one = AsyncMock()
    mock.insert_one = AsyncMock()
    mock.create_index = AsyncMock()
    return mock


def _new_user() -> User:
    return User(id=None, full_name="A", email="a@a.com", hashed_password="$2b$10$hash")


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_ensure_indexes_creates_unique_email_index(self, collection):
        await MongoUserRepository(user_collection=collection).ensure_indexes()

        args, kwargs = collection.create_index.await_args
        assert args[0] == [(UserFields.EMAIL, 1)]
        assert kwargs["unique"] is True

    @pytest.mark.asyncio
    async def test_create_returns_user_with_id(self, collection):
        object_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)

        saved = await MongoUserRepository(user_collection=collection).create(_new_user())

        assert saved.id == str(object_id)
        assert saved.created_on is not None
        document = collection.insert_one.await_args.args[0]
        assert document[UserFields.FULL_NAME] == "A"
        assert document[UserFields.HASHED_PASSWORD] == "$2b$10$hash"

    @pytest.mark.asyncio
    async def test_create_duplicate_email_raises(self, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(UserAlreadyExistsError):
            await MongoUserRepository(user_collection=collection).create(_new_user())

    @pytest.mark.asyncio
    async def test_driver_error_wrapped(self, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no server")

        with pytest.raises(RuntimeError, match="Error finding user by email"):
            await MongoUserRepository(user_collection=collection).find_by_email("a@a.com")

    @pytest.mark.asyncio
    async def test_find_by_id_maps_document(self, collection):
        object_id = ObjectId()
        collection.find_one.return_value = {
            UserFields.MONGO_ID: object_id,
            UserFields.FULL_NAME: "A",
            UserFields.EMAIL: "a@a.com",
            UserFields.HASHED_PASSWORD: "$2b$10$hash",
            UserFields.CREATED_ON: datetime(2025, 1, 1, 12, 0),
        }

        user = await MongoUserRepository(user_collection=collection).find_by_id(str(object_id))

        assert user.id == str(object_id)
        assert user.created_on == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        collection.find_one.assert_awaited_once_with({UserFields.MONGO_ID: object_id})

    @pytest.mark.asyncio
    async def test_find_by_id_invalid_object_id_returns_none(self, collection):
        assert await MongoUserRepository(user_collection=collection).find_by_id("not-an-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_email_not_found(self, collection):
        collection.find_one.return_value = None
        assert await MongoUserRepository(user_collection=collection).find_by_email("x@x.com") is None


class TestMongoTravelStoryRepository:
    @pytest.mark.asyncio
    async def test_create_persists_camel_case_document(self, collection):
        object_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=object_id)
        story = TravelStory(
            id=None,
            user_id="usr-1",
            title="Title",
            story="Story",
            visited_location="Lisbon",
            image_url="http://x/uploads/a.png",
            visited_date=datetime(2024, 5, 1, tzinfo=timezone.utc),
        )

        saved = await MongoTravelStoryRepository(travel_story_collection=collection).create(story)

        assert saved.id == str(object_id)
        assert saved.title == "Title"
        document = collection.insert_one.await_args.args[0]
        assert document[TravelStoryFields.USER_ID] == "usr-1"
        assert document[TravelStoryFields.VISITED_LOCATION] == "Lisbon"
        assert document[TravelStoryFields.IS_FAVOURITE] is False
        assert TravelStoryFields.MONGO_ID not in document
