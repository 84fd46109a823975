"""GraphQL types for the profile page."""

from typing import List, Optional

import strawberry

from application.user.results import ActionResult, ERROR_GENERIC
from presentation.profile.status_badge import StatusBadge
from presentation.profile.view_models import (
    EmailCardModel,
    OrderStatsCardModel,
    ProfileViewModel,
    RecentOrderModel,
    StatTileModel,
    UserCardModel,
)


@strawberry.type
class StatusBadgeType:
    label: str
    variant: str
    class_name: Optional[str]

    @staticmethod
    def from_model(badge: StatusBadge) -> "StatusBadgeType":
        return StatusBadgeType(label=badge.label, variant=badge.variant, class_name=badge.class_name)


@strawberry.type
class UserCardType:
    user_id: str
    name: str
    handle: Optional[str]
    avatar_url: str
    id_line: str

    @staticmethod
    def from_model(card: UserCardModel) -> "UserCardType":
        return UserCardType(
            user_id=card.user_id,
            name=card.name,
            handle=card.handle,
            avatar_url=card.avatar_url,
            id_line=card.id_line,
        )


@strawberry.type
class EmailCardType:
    title: str
    label: str
    placeholder: str
    hint: str
    save_label: str
    value: str
    disabled: bool
    input_id: str
    input_type: str

    @staticmethod
    def from_model(card: EmailCardModel) -> "EmailCardType":
        return EmailCardType(
            title=card.title,
            label=card.label,
            placeholder=card.placeholder,
            hint=card.hint,
            save_label=card.save_label,
            value=card.value,
            disabled=card.disabled,
            input_id=card.input_id,
            input_type=card.input_type,
        )


@strawberry.type
class PointsCardType:
    label: str
    points: int


@strawberry.type
class StatTileType:
    icon: str
    value: int
    label: str

    @staticmethod
    def from_model(tile: StatTileModel) -> "StatTileType":
        return StatTileType(icon=tile.icon, value=tile.value, label=tile.label)


@strawberry.type
class OrderStatsCardType:
    title: str
    view_orders_label: str
    view_orders_href: str
    tiles: List[StatTileType]

    @staticmethod
    def from_model(card: OrderStatsCardModel) -> "OrderStatsCardType":
        return OrderStatsCardType(
            title=card.title,
            view_orders_label=card.view_orders_label,
            view_orders_href=card.view_orders_href,
            tiles=[StatTileType.from_model(tile) for tile in card.tiles],
        )


@strawberry.type
class RecentOrderType:
    order_id: str
    href: str
    product_name: str
    date_label: str
    amount: str
    badge: StatusBadgeType

    @staticmethod
    def from_model(order: RecentOrderModel) -> "RecentOrderType":
        return RecentOrderType(
            order_id=order.order_id,
            href=order.href,
            product_name=order.product_name,
            date_label=order.date_label,
            amount=order.amount,
            badge=StatusBadgeType.from_model(order.badge),
        )


@strawberry.type
class RecentOrdersCardType:
    title: str
    orders: List[RecentOrderType]


@strawberry.type
class SignOutControlType:
    label: str
    action: str
    method: str


@strawberry.type
class ProfileViewType:
    """Rendered profile page.

    ``recentOrders`` is null when the user has no orders (card hidden).

    Examples:
        query {
          profile {
            view {
              user { name handle idLine }
              points { label points }
              recentOrders { orders { href badge { label className } } }
            }
          }
        }
    """

    user: UserCardType
    email: EmailCardType
    points: PointsCardType
    order_stats: OrderStatsCardType
    recent_orders: Optional[RecentOrdersCardType]
    sign_out: SignOutControlType

    @staticmethod
    def from_model(view: ProfileViewModel) -> "ProfileViewType":
        recent = None
        if view.recent_orders is not None:
            recent = RecentOrdersCardType(
                title=view.recent_orders.title,
                orders=[RecentOrderType.from_model(o) for o in view.recent_orders.orders],
            )
        return ProfileViewType(
            user=UserCardType.from_model(view.user),
            email=EmailCardType.from_model(view.email),
            points=PointsCardType(label=view.points.label, points=view.points.points),
            order_stats=OrderStatsCardType.from_model(view.order_stats),
            recent_orders=recent,
            sign_out=SignOutControlType(
                label=view.sign_out.label,
                action=view.sign_out.action,
                method=view.sign_out.method,
            ),
        )


@strawberry.type
class UpdateEmailPayload:
    """Result of ``updateEmail``.

    ``error`` is the message key, ``message`` the localized toast text.
    """

    success: bool
    error: Optional[str]
    message: str

    @staticmethod
    def from_result(result: Optional[ActionResult], message: str) -> "UpdateEmailPayload":
        if result is None:
            return UpdateEmailPayload(success=False, error=ERROR_GENERIC, message=message)
        return UpdateEmailPayload(success=result.success, error=result.error, message=message)
