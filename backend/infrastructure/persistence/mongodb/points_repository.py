"""MongoDB loyalty points repository."""

from domain.loyalty.core.ports.points_repository import IPointsRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoPointsRepository(MongoBaseRepository, IPointsRepository):
    """Reads ``{"user_id": ..., "points": int}`` documents."""

    @property
    def collection_name(self) -> str:
        return "loyalty_points"

    async def get_points(self, user_id: UserId) -> int:
        document = await self._find_one({"user_id": str(user_id)}, {"points": 1})
        if not document:
            return 0
        return max(int(document.get("points") or 0), 0)
