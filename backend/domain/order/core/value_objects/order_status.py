"""OrderStatus value object."""

from enum import Enum
from typing import Optional


class OrderStatus(str, Enum):
    """Known order lifecycle states."""

    PENDING = "pending"
    PAID = "paid"
    DELIVERED = "delivered"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> Optional["OrderStatus"]:
        """Map a stored status string to a known state.

        Args:
            raw: Status as stored (may be None or an unknown value)

        Returns:
            Matching OrderStatus, or None for missing/unknown values

        Examples:
            >>> OrderStatus.from_raw("paid")
            <OrderStatus.PAID: 'paid'>
            >>> OrderStatus.from_raw("on_hold") is None
            True
        """
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None
