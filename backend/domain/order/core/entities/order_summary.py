"""OrderSummary read model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.order.core.value_objects.order_status import OrderStatus


@dataclass(frozen=True)
class OrderSummary:
    """One line of the recent orders list.

    Attributes:
        order_id: Order identifier (used in the detail link)
        product_name: Product display name
        amount: Amount already formatted for display (e.g. "12.50")
        status: Raw stored status (None when unset)
        created_at: Creation timestamp, if known
    """

    order_id: str
    product_name: str
    amount: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def known_status(self) -> Optional[OrderStatus]:
        """Status as enum, None when missing or unrecognised."""
        return OrderStatus.from_raw(self.status)
