"""
Unit tests for the dependency injection container.
"""
from unittest.mock import MagicMock, patch

import pytest
from app.di.base_container import BaseContainer
from app.di.providers import DatabaseProvider


class _Service:
    pass


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        service = _Service()
        container.register_singleton(_Service, service)
        assert container.get(_Service) is service

    def test_factory_builds_per_lookup(self):
        container = BaseContainer()
        container.register_factory(_Service, _Service)
        assert container.get(_Service) is not container.get(_Service)

    def test_string_keys(self):
        container = BaseContainer()
        container.register_singleton("user_collection", "users")
        assert container.get("user_collection") == "users"

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="_Service"):
            BaseContainer().get(_Service)

    def test_later_registration_replaces_earlier(self):
        container = BaseContainer()
        container.register_factory(_Service, _Service)
        service = _Service()
        container.register_singleton(_Service, service)
        assert container.get(_Service) is service


class TestDatabaseProvider:
    def test_registers_collections_only(self):
        users, stories = MagicMock(), MagicMock()
        container = BaseContainer()
        with patch(
            "app.di.providers.database_provider.get_user_collection", return_value=users
        ), patch(
            "app.di.providers.database_provider.get_travel_story_collection", return_value=stories
        ):
            DatabaseProvider.register(container)

        assert container.get("user_collection") is users
        assert container.get("travel_story_collection") is stories
        with pytest.raises(ValueError):
            container.get("database")
