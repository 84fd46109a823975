"""Order repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List

from domain.order.core.entities.order_summary import OrderSummary
from domain.order.core.value_objects.order_stats import OrderStats
from domain.user.core.value_objects.user_id import UserId


class IOrderRepository(ABC):
    """Read access to a user's orders."""

    @abstractmethod
    async def get_stats(self, user_id: UserId) -> OrderStats:
        """Count the user's orders.

        Returns:
            Total, pending and delivered counts (zeros when no orders)
        """
        pass

    @abstractmethod
    async def list_recent(self, user_id: UserId, limit: int) -> List[OrderSummary]:
        """List the most recent orders, newest first.

        Args:
            user_id: Order owner
            limit: Maximum number of orders
        """
        pass
