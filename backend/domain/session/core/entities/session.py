"""Session entity."""

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.user.core.value_objects.user_id import UserId

DEFAULT_SESSION_TTL = timedelta(days=30)


@dataclass(frozen=True)
class Session:
    """Authenticated session.

    Attributes:
        session_id: Opaque token sent by the client (cookie or bearer)
        user_id: Authenticated user
        created_at: Creation time (UTC)
        expires_at: Expiry time (UTC)

    Examples:
        >>> session = Session.start(UserId("42"))
        >>> session.is_expired()
        False
    """

    session_id: str
    user_id: UserId
    created_at: datetime
    expires_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.session_id:
            raise ValueError("session_id cannot be empty")
        if self.expires_at < self.created_at:
            raise ValueError(
                f"expires_at cannot be before created_at: {self.expires_at} < {self.created_at}"
            )

    @staticmethod
    def start(user_id: UserId, ttl: timedelta = DEFAULT_SESSION_TTL) -> "Session":
        """Open a new session with a random token.

        Args:
            user_id: Authenticated user
            ttl: Session lifetime

        Returns:
            New Session
        """
        now = datetime.now(timezone.utc)
        return Session(
            session_id=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + ttl,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check expiry.

        Args:
            now: Reference time (defaults to current UTC time)
        """
        return (now or datetime.now(timezone.utc)) >= self.expires_at
