"""Tests for repository factory."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.persistence import factory
from infrastructure.persistence.factory import (
    create_order_repository,
    create_points_repository,
    create_session_repository,
    create_user_repository,
    get_mongo_client,
    get_user_repository,
    reset_repositories,
)
from infrastructure.persistence.in_memory.order_repository import InMemoryOrderRepository
from infrastructure.persistence.in_memory.points_repository import InMemoryPointsRepository
from infrastructure.persistence.in_memory.session_repository import InMemorySessionRepository
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository


class TestRepositoryFactory:
    def test_inmemory_backend(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")

        assert isinstance(create_user_repository(), InMemoryUserRepository)
        assert isinstance(create_order_repository(), InMemoryOrderRepository)
        assert isinstance(create_points_repository(), InMemoryPointsRepository)
        assert isinstance(create_session_repository(), InMemorySessionRepository)

    def test_default_is_inmemory(self, monkeypatch):
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

        assert isinstance(create_user_repository(), InMemoryUserRepository)

    def test_invalid_backend(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "postgres")

        with pytest.raises(ValueError, match="Invalid REPOSITORY_BACKEND"):
            create_user_repository()

    def test_mongodb_backend_requires_uri(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with pytest.raises(ValueError, match="MONGODB_URI not set"):
            create_user_repository()

    def test_mongodb_backend_shares_client(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")

        with patch.object(factory, "AsyncIOMotorClient", return_value=MagicMock()) as motor:
            users = create_user_repository()
            sessions = create_session_repository()

            motor.assert_called_once_with("mongodb://localhost:27017")
            assert type(users).__name__ == "MongoUserRepository"
            assert type(sessions).__name__ == "MongoSessionRepository"
            assert get_mongo_client() is motor.return_value

            reset_repositories()
            motor.return_value.close.assert_called_once()

    def test_singleton_until_reset(self, monkeypatch):
        monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")

        first = get_user_repository()
        assert get_user_repository() is first

        reset_repositories()
        assert get_user_repository() is not first
