"""Profile GraphQL queries."""

from typing import Optional

import strawberry
from strawberry.types import Info

from application.profile.queries.get_profile import DEFAULT_RECENT_ORDERS_LIMIT, GetProfileQuery
from graphql_api.resolvers.profile.dependencies import (
    build_update_email_action,
    require,
    session_user_id,
)
from graphql_api.types_profile import ProfileViewType
from infrastructure.notifications.toast_queue import ToastQueue
from presentation.profile.profile_view import ProfileView


@strawberry.type
class ProfileQueries:
    """Profile queries.

    Examples:
        query {
          profile {
            view { user { name } points { points } }
          }
        }
    """

    @strawberry.field
    async def view(self, info: Info) -> Optional[ProfileViewType]:
        """Render the profile page of the signed-in user.

        Returns:
            Rendered view, or None if not authenticated or the user record
            is missing
        """
        user_id = session_user_id(info)
        if user_id is None:
            return None

        limit = info.context.get("recent_orders_limit")
        if limit is None:
            limit = DEFAULT_RECENT_ORDERS_LIMIT

        query = GetProfileQuery(
            user_repository=require(info, "user_repository"),
            order_repository=require(info, "order_repository"),
            points_repository=require(info, "points_repository"),
            recent_orders_limit=limit,
        )
        data = await query.execute(user_id)
        if data is None:
            return None

        view = ProfileView.create(
            data,
            translator=require(info, "translator"),
            action=build_update_email_action(info, user_id),
            notifier=ToastQueue(),
        )
        return ProfileViewType.from_model(view.render())
