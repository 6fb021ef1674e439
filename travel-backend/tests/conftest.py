"""
Shared pytest fixtures for travel-backend tests.
"""
from contextlib import ExitStack
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from app.domain.models.travel_story import TravelStory
from app.domain.models.user import User
from app.domain.repositories.travel_story_repository import TravelStoryRepository
from app.domain.repositories.user_repository import UserAlreadyExistsError, UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping users in a dict; email uniqueness as in the unique index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def ensure_indexes(self) -> None:
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def create(self, user: User) -> User:
        if await self.find_by_email(user.email) is not None:
            raise UserAlreadyExistsError("User already exists")
        stored = replace(user, id=str(ObjectId()))
        self.users[stored.id] = stored
        return stored


class InMemoryTravelStoryRepository(TravelStoryRepository):
    """TravelStoryRepository keeping stories in insertion order."""

    def __init__(self) -> None:
        self.stories: List[TravelStory] = []

    async def create(self, story: TravelStory) -> TravelStory:
        stored = replace(story, id=str(ObjectId()))
        self.stories.append(stored)
        return stored


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_server_selection_timeout_ms = 100
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_hours = 72
    mock.public_base_url = "http://localhost:8000"
    mock.upload_dir = str(tmp_path / "uploads")
    mock.assets_dir = str(tmp_path / "assets")
    mock.image_upload_max_mb = 1
    mock.environment = "test"
    mock.is_development = False
    mock.log_level = "INFO"
    mock.cors_origins = ["*"]
    mock.host = "127.0.0.1"
    mock.port = 8000

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ), patch(
        "app.infrastructure.storage.local_image_storage.get_settings", return_value=mock
    ), patch(
        "app.application.use_cases.image.upload_image.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def travel_story_repository():
    return InMemoryTravelStoryRepository()


@pytest.fixture
def app_container(mock_settings, user_repository, travel_story_repository):
    """DI container wired with in-memory repositories and a temp upload directory."""
    from app.di.base_container import BaseContainer
    from app.di.providers import AuthProvider, ImageProvider, TravelStoryProvider
    from app.infrastructure.storage.local_image_storage import LocalImageStorage

    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(TravelStoryRepository, travel_story_repository)
    container.register_singleton(
        LocalImageStorage,
        LocalImageStorage(upload_dir=mock_settings.upload_dir, max_bytes=1024),
    )
    AuthProvider.register(container)
    TravelStoryProvider.register(container)
    ImageProvider.register(container)
    return container


@pytest.fixture
def client(mock_settings, app_container):
    """TestClient for a freshly built app, with MongoDB replaced by the test container."""
    from fastapi.testclient import TestClient

    targets = [
        "app.main.get_container",
        "app.api.v1.auth_controller.get_container",
        "app.api.v1.image_controller.get_container",
        "app.api.v1.travel_story_controller.get_container",
    ]
    with ExitStack() as stack:
        stack.enter_context(patch("app.main.connect_to_mongo"))
        stack.enter_context(patch("app.main.get_settings", return_value=mock_settings))
        stack.enter_context(patch("app.main.close_mongo_connection"))
        for target in targets:
            stack.enter_context(patch(target, return_value=app_container))
        from app.main import create_application

        with TestClient(create_application()) as c:
            yield c
