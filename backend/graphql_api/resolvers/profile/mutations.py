"""Profile GraphQL mutations."""

import strawberry
from strawberry.types import Info

from graphql_api.resolvers.profile.dependencies import (
    build_update_email_action,
    require,
    session_user_id,
)
from graphql_api.types_profile import UpdateEmailPayload
from infrastructure.notifications.toast_queue import ToastQueue
from presentation.profile.email_form import EmailForm


@strawberry.type
class ProfileMutations:
    """Profile mutations.

    Examples:
        mutation {
          profile {
            updateEmail(email: " ada@example.com ") {
              success
              error
              message
            }
          }
        }
    """

    @strawberry.mutation
    async def update_email(self, info: Info, email: str) -> UpdateEmailPayload:
        """Set or clear the signed-in user's email.

        Never raises for the three expected failures (no session, bad
        format, unexpected error); they come back as ``success: false``
        with a message key and its localized text.

        Args:
            info: GraphQL context with the current session
            email: Raw form value (blank clears the email)
        """
        translator = require(info, "translator")
        toasts = ToastQueue()
        form = EmailForm(
            email,
            action=build_update_email_action(info, session_user_id(info)),
            translator=translator,
            notifier=toasts,
        )
        result = await form.save()

        last = toasts.last()
        message = last.message if last is not None else ""
        return UpdateEmailPayload.from_result(result, message)
