"""MongoDB order repository."""

import asyncio
from typing import Any, Dict, List

from pymongo import DESCENDING

from domain.order.core.entities.order_summary import OrderSummary
from domain.order.core.ports.order_repository import IOrderRepository
from domain.order.core.value_objects.order_stats import OrderStats
from domain.order.core.value_objects.order_status import OrderStatus
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoOrderRepository(MongoBaseRepository, IOrderRepository):
    """Reads the ``orders`` collection.

    Documents carry ``order_id``, ``user_id``, ``product_name``, ``amount``
    (display string), ``status`` and ``created_at``.
    """

    @property
    def collection_name(self) -> str:
        return "orders"

    async def get_stats(self, user_id: UserId) -> OrderStats:
        owner = {"user_id": str(user_id)}
        total, pending, delivered = await asyncio.gather(
            self._count(owner),
            self._count({**owner, "status": OrderStatus.PENDING.value}),
            self._count({**owner, "status": OrderStatus.DELIVERED.value}),
        )
        return OrderStats(total=total, pending=pending, delivered=delivered)

    async def list_recent(self, user_id: UserId, limit: int) -> List[OrderSummary]:
        if limit <= 0:
            return []
        documents = await self._find_many(
            {"user_id": str(user_id)},
            sort=[("created_at", DESCENDING)],
            limit=limit,
        )
        return [self.from_document(doc) for doc in documents]

    def from_document(self, document: Dict[str, Any]) -> OrderSummary:
        return OrderSummary(
            order_id=str(document["order_id"]),
            product_name=document.get("product_name") or "",
            amount=str(document.get("amount") or ""),
            status=document.get("status"),
            created_at=self.as_utc(document.get("created_at")),
        )
