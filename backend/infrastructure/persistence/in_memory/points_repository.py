"""In-memory loyalty points repository."""

from typing import Dict

from domain.loyalty.core.ports.points_repository import IPointsRepository
from domain.user.core.value_objects.user_id import UserId


class InMemoryPointsRepository(IPointsRepository):
    """Point balances in a dict."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}

    def set_points(self, user_id: UserId, points: int) -> None:
        if points < 0:
            raise ValueError(f"points cannot be negative: {points}")
        self._points[str(user_id)] = points

    async def get_points(self, user_id: UserId) -> int:
        return self._points.get(str(user_id), 0)

    def clear(self) -> None:
        self._points.clear()
