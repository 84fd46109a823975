"""In-memory order repository."""

from datetime import datetime, timezone
from typing import Dict, List

from domain.order.core.entities.order_summary import OrderSummary
from domain.order.core.ports.order_repository import IOrderRepository
from domain.order.core.value_objects.order_stats import OrderStats
from domain.order.core.value_objects.order_status import OrderStatus
from domain.user.core.value_objects.user_id import UserId

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(order: OrderSummary) -> datetime:
    created = order.created_at
    if created is None:
        return _OLDEST
    # Naive timestamps are taken as UTC
    return created if created.tzinfo else created.replace(tzinfo=timezone.utc)


class InMemoryOrderRepository(IOrderRepository):
    """Orders held in memory, grouped by owner."""

    def __init__(self) -> None:
        self._orders: Dict[str, List[OrderSummary]] = {}

    def add(self, user_id: UserId, order: OrderSummary) -> None:
        """Store an order for a user."""
        self._orders.setdefault(str(user_id), []).append(order)

    async def get_stats(self, user_id: UserId) -> OrderStats:
        orders = self._orders.get(str(user_id), [])
        return OrderStats(
            total=len(orders),
            pending=sum(1 for o in orders if o.known_status is OrderStatus.PENDING),
            delivered=sum(1 for o in orders if o.known_status is OrderStatus.DELIVERED),
        )

    async def list_recent(self, user_id: UserId, limit: int) -> List[OrderSummary]:
        if limit <= 0:
            return []
        orders = self._orders.get(str(user_id), [])
        return sorted(orders, key=_sort_key, reverse=True)[:limit]

    def clear(self) -> None:
        self._orders.clear()
