"""Tests for MongoDB repositories with a mocked motor client."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import DESCENDING

from domain.order.core.value_objects.order_stats import OrderStats
from domain.session.core.entities.session import Session
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.order_repository import MongoOrderRepository
from infrastructure.persistence.mongodb.points_repository import MongoPointsRepository
from infrastructure.persistence.mongodb.session_repository import MongoSessionRepository
from infrastructure.persistence.mongodb.user_repository import MongoUserRepository

USER_ID = UserId("42")


@pytest.fixture
def collection():
    """Mocked motor collection."""
    coll = MagicMock()
    coll.find_one = AsyncMock(return_value=None)
    coll.update_one = AsyncMock(return_value=SimpleNamespace(matched_count=1))
    coll.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=1))
    coll.count_documents = AsyncMock(return_value=0)
    return coll


@pytest.fixture
def client(collection, monkeypatch):
    """Mocked motor client resolving every collection to ``collection``."""
    monkeypatch.setenv("MONGODB_DATABASE", "storefront_test")
    database = MagicMock()
    database.__getitem__.return_value = collection
    mongo = MagicMock()
    mongo.__getitem__.return_value = database
    return mongo


def test_requires_uri_without_client(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)

    with pytest.raises(ValueError, match="MONGODB_URI not set"):
        MongoUserRepository()


def test_uses_configured_database(client):
    MongoUserRepository(client)

    client.__getitem__.assert_called_with("storefront_test")
    client.__getitem__.return_value.__getitem__.assert_called_with("users")


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_update_email_sets_field(self, client, collection):
        await MongoUserRepository(client).update_email(USER_ID, "a@b.com")

        collection.update_one.assert_awaited_once_with(
            {"user_id": "42"}, {"$set": {"email": "a@b.com"}}, upsert=False
        )

    @pytest.mark.asyncio
    async def test_update_email_clears_with_none(self, client, collection):
        await MongoUserRepository(client).update_email(USER_ID, None)

        args = collection.update_one.await_args.args
        assert args[1] == {"$set": {"email": None}}

    @pytest.mark.asyncio
    async def test_update_email_unknown_user(self, client, collection):
        collection.update_one.return_value = SimpleNamespace(matched_count=0)

        with pytest.raises(UserNotFoundError):
            await MongoUserRepository(client).update_email(USER_ID, "a@b.com")

    @pytest.mark.asyncio
    async def test_find_by_id_maps_document(self, client, collection):
        collection.find_one.return_value = {
            "_id": "x",
            "user_id": "42",
            "name": "Ada",
            "username": "ada",
            "email": "ada@example.com",
        }

        user = await MongoUserRepository(client).find_by_id(USER_ID)

        assert user.user_id == USER_ID
        assert user.handle == "@ada"
        assert user.avatar is None
        assert user.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_find_by_id_keeps_unvalidated_email(self, client, collection):
        collection.find_one.return_value = {"user_id": "7", "name": "Bob", "email": "bob@localhost"}

        user = await MongoUserRepository(client).find_by_id(UserId("7"))

        assert user.email == "bob@localhost"

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, client):
        assert await MongoUserRepository(client).find_by_id(USER_ID) is None

    @pytest.mark.asyncio
    async def test_save_upserts(self, client, collection):
        await MongoUserRepository(client).save(User(user_id=USER_ID, name="Ada"))

        collection.update_one.assert_awaited_once()
        assert collection.update_one.await_args.kwargs == {"upsert": True}

    @pytest.mark.asyncio
    async def test_driver_errors_propagate(self, client, collection):
        collection.update_one.side_effect = ConnectionError("down")

        with pytest.raises(ConnectionError):
            await MongoUserRepository(client).update_email(USER_ID, "a@b.com")


class TestMongoOrderRepository:
    @pytest.mark.asyncio
    async def test_get_stats(self, client, collection):
        counts = {None: 5, "pending": 2, "delivered": 3}
        collection.count_documents.side_effect = lambda f: counts[f.get("status")]

        stats = await MongoOrderRepository(client).get_stats(USER_ID)

        assert stats == OrderStats(total=5, pending=2, delivered=3)

    @pytest.mark.asyncio
    async def test_list_recent(self, client, collection):
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.limit.return_value = cursor
        cursor.to_list = AsyncMock(
            return_value=[
                {
                    "order_id": 7,
                    "product_name": "Lamp",
                    "amount": "$12.00",
                    "status": "delivered",
                    "created_at": datetime(2025, 5, 1, 9, 30),
                }
            ]
        )
        collection.find.return_value = cursor

        orders = await MongoOrderRepository(client).list_recent(USER_ID, 5)

        cursor.sort.assert_called_once_with([("created_at", DESCENDING)])
        cursor.limit.assert_called_once_with(5)
        assert orders[0].order_id == "7"
        assert orders[0].created_at.tzinfo is timezone.utc

    @pytest.mark.asyncio
    async def test_list_recent_zero_limit(self, client, collection):
        assert await MongoOrderRepository(client).list_recent(USER_ID, 0) == []
        collection.find.assert_not_called()


class TestMongoPointsRepository:
    @pytest.mark.asyncio
    async def test_points(self, client, collection):
        collection.find_one.return_value = {"points": 80}
        assert await MongoPointsRepository(client).get_points(USER_ID) == 80
        collection.find_one.assert_awaited_with({"user_id": "42"}, {"points": 1})

    @pytest.mark.asyncio
    async def test_missing_or_negative_points(self, client, collection):
        repo = MongoPointsRepository(client)
        assert await repo.get_points(USER_ID) == 0

        collection.find_one.return_value = {"points": -3}
        assert await repo.get_points(USER_ID) == 0


class TestMongoSessionRepository:
    @pytest.mark.asyncio
    async def test_round_trip_document(self, client, collection):
        repo = MongoSessionRepository(client)
        session = Session.start(USER_ID)

        await repo.save(session)
        stored = collection.update_one.await_args.args[1]["$set"]
        collection.find_one.return_value = {
            **stored,
            "created_at": stored["created_at"].replace(tzinfo=None),
            "expires_at": stored["expires_at"].replace(tzinfo=None),
        }

        assert await repo.find_by_id(session.session_id) == session

    @pytest.mark.asyncio
    async def test_delete(self, client, collection):
        repo = MongoSessionRepository(client)
        assert await repo.delete("tok") is True

        collection.delete_one.return_value = SimpleNamespace(deleted_count=0)
        assert await repo.delete("tok") is False
