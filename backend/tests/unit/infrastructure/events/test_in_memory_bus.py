"""Tests for the in-memory event bus."""

import logging
from unittest.mock import AsyncMock

import pytest

from domain.user.core.events.user_email_changed import UserEmailChanged
from domain.user.core.value_objects.user_id import UserId
from infrastructure.events.in_memory_bus import InMemoryEventBus


@pytest.fixture
def event():
    return UserEmailChanged.create(UserId("42"), "a@b.com")


@pytest.mark.asyncio
async def test_publish_calls_subscribers_in_order(event):
    bus = InMemoryEventBus()
    calls = []

    async def first(e):
        calls.append(("first", e))

    async def second(e):
        calls.append(("second", e))

    bus.subscribe(UserEmailChanged, first)
    bus.subscribe(UserEmailChanged, second)
    await bus.publish(event)

    assert calls == [("first", event), ("second", event)]


@pytest.mark.asyncio
async def test_failing_handler_is_isolated(event, caplog):
    bus = InMemoryEventBus()
    failing = AsyncMock(side_effect=RuntimeError("boom"))
    healthy = AsyncMock()
    bus.subscribe(UserEmailChanged, failing)
    bus.subscribe(UserEmailChanged, healthy)

    with caplog.at_level(logging.ERROR):
        await bus.publish(event)

    healthy.assert_awaited_once_with(event)
    assert any(r.getMessage() == "events.handler_failed" for r in caplog.records)


@pytest.mark.asyncio
async def test_publish_without_handlers(event):
    await InMemoryEventBus().publish(event)


def test_unsubscribe_and_clear():
    bus = InMemoryEventBus()
    handler = AsyncMock()
    bus.subscribe(UserEmailChanged, handler)

    assert bus.get_handler_count(UserEmailChanged) == 1
    assert bus.unsubscribe(UserEmailChanged, handler) is True
    assert bus.unsubscribe(UserEmailChanged, handler) is False
    assert bus.get_handler_count(UserEmailChanged) == 0

    bus.subscribe(UserEmailChanged, handler)
    bus.clear()
    assert bus.get_handler_count(UserEmailChanged) == 0
