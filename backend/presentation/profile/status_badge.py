"""Order status badges."""

from dataclasses import dataclass
from typing import Dict, Optional

from domain.order.core.value_objects.order_status import OrderStatus
from domain.shared.ports.translator import ITranslator

BADGE_VARIANT = "outline"

_STATUS_CLASSES: Dict[OrderStatus, str] = {
    OrderStatus.PENDING: "text-yellow-600 border-yellow-600",
    OrderStatus.PAID: "text-blue-600 border-blue-600",
    OrderStatus.DELIVERED: "text-green-600 border-green-600",
    OrderStatus.REFUNDED: "text-gray-600 border-gray-600",
    OrderStatus.CANCELLED: "text-red-600 border-red-600",
}


@dataclass(frozen=True)
class StatusBadge:
    """Rendered badge."""

    label: str
    variant: str = BADGE_VARIANT
    class_name: Optional[str] = None


def status_badge(status: Optional[str], translator: ITranslator) -> StatusBadge:
    """Badge for a stored order status.

    Known statuses get a translated label and their colour classes.
    Anything else shows the raw value (``-`` when empty) without colour.

    Examples:
        >>> status_badge("paid", translator).class_name
        'text-blue-600 border-blue-600'
        >>> status_badge(None, translator).label
        '-'
    """
    known = OrderStatus.from_raw(status)
    if known is None:
        return StatusBadge(label=status or "-")
    return StatusBadge(
        label=translator.t(f"order.status.{known.value}"),
        class_name=_STATUS_CLASSES[known],
    )
