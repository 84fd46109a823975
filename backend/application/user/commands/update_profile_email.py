"""Update profile email command."""

from dataclasses import dataclass
from typing import Optional
import logging

from application.user.results import ActionResult, ERROR_EMAIL_INVALID, ERROR_GENERIC
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.user_email_changed import UserEmailChanged
from domain.user.core.exceptions.user_errors import InvalidEmailError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class UpdateProfileEmailCommand:
    """Command to set or clear the signed-in user's contact email.

    Unauthenticated calls and malformed addresses come back as failed
    results, never as exceptions. Repository errors propagate.

    Examples:
        >>> command = UpdateProfileEmailCommand(repository)
        >>> await command.execute(UserId("42"), " a@b.com ")
        ActionResult(success=True, error=None)
        >>> await command.execute(None, "a@b.com")
        ActionResult(success=False, error='common.error')
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, user_id: Optional[UserId], email_input: Optional[str]) -> ActionResult:
        """Execute update email command.

        Args:
            user_id: User id from the current session, None when signed out
            email_input: Raw form value; blank clears the email

        Returns:
            ActionResult with ``common.error`` (no session) or
            ``profile.emailInvalid`` (bad format) on failure
        """
        if user_id is None:
            logger.info("profile.email.rejected", extra={"reason": "unauthenticated"})
            return ActionResult.fail(ERROR_GENERIC)

        try:
            email = EmailAddress.parse(email_input)
        except InvalidEmailError:
            logger.info(
                "profile.email.rejected",
                extra={"reason": "invalid_format", "user_id": str(user_id)},
            )
            return ActionResult.fail(ERROR_EMAIL_INVALID)

        value = email.value if email is not None else None
        await self.repository.update_email(user_id, value)

        logger.info(
            "profile.email.updated",
            extra={"user_id": str(user_id), "cleared": value is None},
        )

        if self.event_bus is not None:
            await self.event_bus.publish(UserEmailChanged.create(user_id, value))

        return ActionResult.ok()
