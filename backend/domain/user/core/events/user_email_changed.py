"""UserEmailChanged domain event."""

from dataclasses import dataclass
from typing import Optional

from domain.shared.events.base import DomainEvent
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserEmailChanged(DomainEvent):
    """Domain event: a user set or cleared their contact email.

    Attributes:
        user_id: User whose record was written
        email: New address, None when the email was cleared

    Examples:
        >>> event = UserEmailChanged.create(UserId("42"), "a@b.com")
        >>> event.cleared
        False
    """

    user_id: UserId
    email: Optional[str]

    @property
    def cleared(self) -> bool:
        """True when the email was removed."""
        return self.email is None

    @classmethod
    def create(cls, user_id: UserId, email: Optional[str]) -> "UserEmailChanged":
        """Create event with a fresh id and the current UTC time."""
        return cls(user_id=user_id, email=email, **cls.new_metadata())
