"""Loyalty points repository port (interface)."""

from abc import ABC, abstractmethod

from domain.user.core.value_objects.user_id import UserId


class IPointsRepository(ABC):
    """Read access to loyalty point balances."""

    @abstractmethod
    async def get_points(self, user_id: UserId) -> int:
        """Current point balance of a user (0 when the user has none)."""
        pass
