"""OrderStats value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderStats:
    """Order counters for one user.

    Examples:
        >>> OrderStats(total=3, pending=1, delivered=2).total
        3
        >>> OrderStats.empty()
        OrderStats(total=0, pending=0, delivered=0)
    """

    total: int
    pending: int
    delivered: int

    def __post_init__(self) -> None:
        """Validate counters."""
        for name in ("total", "pending", "delivered"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} cannot be negative: {value}")

    @staticmethod
    def empty() -> "OrderStats":
        """Stats for a user without orders."""
        return OrderStats(total=0, pending=0, delivered=0)
