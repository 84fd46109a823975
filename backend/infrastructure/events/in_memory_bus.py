"""In-memory event bus implementation.

Implements the IEventBus port inside the process: handlers live in a dict
keyed by event type and run sequentially on publish.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

from domain.shared.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)
Handler = Callable[[Any], Awaitable[None]]


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Not thread-safe; subscriptions are lost on restart. A failing handler
    is logged and skipped so the publisher never sees its exception.

    Example:
        >>> bus = InMemoryEventBus()
        >>> bus.subscribe(UserEmailChanged, UserEmailChangedHandler().handle)
        >>> await bus.publish(UserEmailChanged.create(UserId("42"), "a@b.com"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Handler]] = {}

    def subscribe(self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]) -> None:
        """Register ``handler`` for ``event_type`` (duplicates run twice)."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "events.subscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )

    async def publish(self, event: TEvent) -> None:
        """Run every handler subscribed to the exact type of ``event``."""
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))
        if not handlers:
            logger.debug("events.no_handlers", extra={"event_type": event_type.__name__})
            return

        logger.info(
            "events.publishing",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "events.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]) -> bool:
        """Remove the first registration of ``handler``.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def clear(self) -> None:
        """Drop all subscriptions."""
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """Number of handlers subscribed to ``event_type``."""
        return len(self._handlers.get(event_type, []))
