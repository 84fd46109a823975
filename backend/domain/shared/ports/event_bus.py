"""Event bus port."""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from domain.shared.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)


class IEventBus(Protocol):
    """Publish/subscribe for domain events.

    Publishing never raises because of a handler: implementations log
    handler failures and keep dispatching, in subscription order.

    Example:
        >>> bus.subscribe(UserEmailChanged, UserEmailChangedHandler().handle)
        >>> await bus.publish(UserEmailChanged.create(UserId("42"), None))
    """

    def subscribe(
        self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]
    ) -> None: ...

    async def publish(self, event: TEvent) -> None: ...

    def unsubscribe(
        self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]
    ) -> bool:
        """Returns False when the handler was not subscribed."""
        ...

    def clear(self) -> None: ...
