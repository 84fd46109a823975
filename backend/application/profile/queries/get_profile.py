"""Get profile query."""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from domain.loyalty.core.ports.points_repository import IPointsRepository
from domain.order.core.entities.order_summary import OrderSummary
from domain.order.core.ports.order_repository import IOrderRepository
from domain.order.core.value_objects.order_stats import OrderStats
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

DEFAULT_RECENT_ORDERS_LIMIT = 5


@dataclass(frozen=True)
class ProfileData:
    """Everything the profile page displays."""

    user: User
    points: int
    order_stats: OrderStats
    recent_orders: List[OrderSummary] = field(default_factory=list)


@dataclass
class GetProfileQuery:
    """Load profile page data for one user.

    Read-only. Points, stats and recent orders are fetched concurrently
    once the user record is known to exist.

    Examples:
        >>> query = GetProfileQuery(users, orders, points)
        >>> data = await query.execute(UserId("42"))
        >>> data.order_stats.total
        3
    """

    user_repository: IUserRepository
    order_repository: IOrderRepository
    points_repository: IPointsRepository
    recent_orders_limit: int = DEFAULT_RECENT_ORDERS_LIMIT

    async def execute(self, user_id: UserId) -> Optional[ProfileData]:
        """Execute query.

        Args:
            user_id: User from the current session

        Returns:
            ProfileData, or None if the user record does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return None

        points, stats, recent = await asyncio.gather(
            self.points_repository.get_points(user_id),
            self.order_repository.get_stats(user_id),
            self.order_repository.list_recent(user_id, self.recent_orders_limit),
        )

        return ProfileData(
            user=user,
            points=points,
            order_stats=stats,
            recent_orders=list(recent),
        )
