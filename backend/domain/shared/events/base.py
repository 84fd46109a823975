"""Domain event base type."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Something that already happened to an aggregate.

    Subclasses add their payload fields and build instances through a
    ``create`` classmethod that fills the metadata via ``new_metadata()``.

    Attributes:
        event_id: Identity of this occurrence
        occurred_at: UTC time of the occurrence (naive values rejected)
    """

    event_id: UUID
    occurred_at: datetime

    def __post_init__(self) -> None:
        if self.occurred_at.tzinfo is None:
            raise ValueError(f"{type(self).__name__}.occurred_at must be timezone-aware")

    @staticmethod
    def new_metadata() -> Dict[str, Any]:
        """Fresh ``event_id`` and ``occurred_at`` keyword arguments."""
        return {"event_id": uuid4(), "occurred_at": datetime.now(timezone.utc)}
