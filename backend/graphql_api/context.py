"""GraphQL context factory for dependency injection.

Provides the dependencies of the profile resolvers:
- Repositories (users, orders, loyalty points)
- Event bus (domain events)
- Translator for the negotiated request locale
- Current session (resolved by SessionMiddleware)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from domain.loyalty.core.ports.points_repository import IPointsRepository
from domain.order.core.ports.order_repository import IOrderRepository
from domain.session.core.entities.session import Session
from domain.shared.ports.event_bus import IEventBus
from domain.shared.ports.translator import ITranslator
from domain.user.core.ports.user_repository import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using ``info.context.get("name")``, which
    also works when tests pass a plain dict as context.

    Attributes:
        user_repository: Repository for user data
        order_repository: Read access to orders
        points_repository: Read access to loyalty points
        event_bus: Event bus for domain events
        translator: Translator for the request locale
        recent_orders_limit: Number of recent orders on the profile page
        request: FastAPI request object
        session: Current session (None if not authenticated)
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        order_repository: IOrderRepository,
        points_repository: IPointsRepository,
        event_bus: IEventBus,
        translator: ITranslator,
        recent_orders_limit: int,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.user_repository = user_repository
        self.order_repository = order_repository
        self.points_repository = points_repository
        self.event_bus = event_bus
        self.translator = translator
        self.recent_orders_limit = recent_orders_limit
        self.request = request
        self.session: Optional[Session] = (
            getattr(request.state, "session", None) if request is not None else None
        )

    def get(self, key: str) -> Any:
        """Get dependency by name (None if not found)."""
        return getattr(self, key, None)
