"""User email changed event handler."""

from dataclasses import dataclass
from typing import Optional
import logging

from domain.user.core.events.user_email_changed import UserEmailChanged


logger = logging.getLogger(__name__)


@dataclass
class UserEmailChangedHandler:
    """Handler for UserEmailChanged domain event.

    Writes an audit log line. The address itself is masked.

    Examples:
        >>> handler = UserEmailChangedHandler()
        >>> bus.subscribe(UserEmailChanged, handler.handle)
    """

    async def handle(self, event: UserEmailChanged) -> None:
        """Handle UserEmailChanged event.

        Args:
            event: UserEmailChanged domain event
        """
        logger.info(
            "User email changed",
            extra={
                "user_id": str(event.user_id),
                "email": mask_email(event.email),
                "cleared": event.cleared,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )


def mask_email(email: Optional[str]) -> Optional[str]:
    """Keep the first character of the local part and the domain.

    Examples:
        >>> mask_email("ada@example.com")
        'a***@example.com'
        >>> mask_email(None) is None
        True
    """
    if email is None:
        return None
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"
