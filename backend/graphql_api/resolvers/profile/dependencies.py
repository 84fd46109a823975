"""Context access shared by the profile resolvers."""

from typing import Any, Optional

from strawberry.types import Info

from application.user.commands.update_profile_email import UpdateProfileEmailCommand
from application.user.results import ActionResult
from domain.user.core.value_objects.user_id import UserId
from presentation.profile.email_form import UpdateEmailAction


def require(info: Info, key: str) -> Any:
    """Get a dependency from the context.

    Raises:
        RuntimeError: If the dependency is missing
    """
    value = info.context.get(key)
    if value is None:
        raise RuntimeError(f"{key} not found in context")
    return value


def session_user_id(info: Info) -> Optional[UserId]:
    """User id of the current session, None when signed out."""
    session = info.context.get("session")
    if session is None:
        return None
    return session.user_id


def build_update_email_action(info: Info, user_id: Optional[UserId]) -> UpdateEmailAction:
    """Bind the update email command to the current session."""
    command = UpdateProfileEmailCommand(
        repository=require(info, "user_repository"),
        event_bus=info.context.get("event_bus"),
    )

    async def update_email(value: str) -> ActionResult:
        return await command.execute(user_id, value)

    return update_email
