"""Display models of the profile page.

Plain frozen dataclasses, one per card, assembled by ``ProfileView``.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from presentation.profile.status_badge import StatusBadge


@dataclass(frozen=True)
class UserCardModel:
    user_id: str
    name: str
    handle: Optional[str]
    avatar_url: str
    id_line: str


@dataclass(frozen=True)
class EmailCardModel:
    title: str
    label: str
    placeholder: str
    hint: str
    save_label: str
    value: str
    disabled: bool
    input_id: str = "profile-email"
    input_type: str = "email"


@dataclass(frozen=True)
class PointsCardModel:
    label: str
    points: int


@dataclass(frozen=True)
class StatTileModel:
    icon: str
    value: int
    label: str


@dataclass(frozen=True)
class OrderStatsCardModel:
    title: str
    view_orders_label: str
    view_orders_href: str
    tiles: List[StatTileModel] = field(default_factory=list)


@dataclass(frozen=True)
class RecentOrderModel:
    order_id: str
    href: str
    product_name: str
    date_label: str
    amount: str
    badge: StatusBadge


@dataclass(frozen=True)
class RecentOrdersCardModel:
    title: str
    orders: List[RecentOrderModel]


@dataclass(frozen=True)
class SignOutControlModel:
    label: str
    action: str
    method: str = "POST"


@dataclass(frozen=True)
class ProfileViewModel:
    user: UserCardModel
    email: EmailCardModel
    points: PointsCardModel
    order_stats: OrderStatsCardModel
    sign_out: SignOutControlModel
    # None hides the card
    recent_orders: Optional[RecentOrdersCardModel] = None
