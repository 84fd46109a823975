"""Profile page presenter."""

from datetime import datetime
from typing import Optional
from urllib.parse import quote

from application.profile.queries.get_profile import ProfileData
from application.session.commands.sign_out import HOME_PATH
from domain.order.core.entities.order_summary import OrderSummary
from domain.shared.ports.notifier import INotifier
from domain.shared.ports.translator import ITranslator
from presentation.profile.email_form import EmailForm, UpdateEmailAction
from presentation.profile.status_badge import status_badge
from presentation.profile.view_models import (
    EmailCardModel,
    OrderStatsCardModel,
    PointsCardModel,
    ProfileViewModel,
    RecentOrderModel,
    RecentOrdersCardModel,
    SignOutControlModel,
    StatTileModel,
    UserCardModel,
)

ORDERS_PATH = "/orders"
SIGN_OUT_PATH = "/auth/signout"

DATE_FORMAT_KEY = "format.date"
DEFAULT_DATE_FORMAT = "{month}/{day}/{year}"


def order_href(order_id: str) -> str:
    """Link to the order detail page."""
    return f"/order/{quote(order_id, safe='')}"


def format_order_date(created_at: Optional[datetime], translator: ITranslator) -> str:
    """Locale date (``-`` when unknown).

    The pattern comes from the catalog key ``format.date`` and may use the
    ``{year}``, ``{month}`` and ``{day}`` placeholders (unpadded).
    """
    if created_at is None:
        return "-"
    pattern = translator.t(DATE_FORMAT_KEY)
    if pattern == DATE_FORMAT_KEY:
        pattern = DEFAULT_DATE_FORMAT
    return pattern.format(year=created_at.year, month=created_at.month, day=created_at.day)


class ProfileView:
    """Presenter for the profile page.

    Composes user, points, order stats and recent orders into a
    ``ProfileViewModel`` and owns the inline ``EmailForm``. Rendering is
    repeatable; the email card reflects the form state at render time.
    """

    def __init__(self, data: ProfileData, translator: ITranslator, email_form: EmailForm) -> None:
        self.data = data
        self.translator = translator
        self.email_form = email_form

    @classmethod
    def create(
        cls,
        data: ProfileData,
        translator: ITranslator,
        action: UpdateEmailAction,
        notifier: INotifier,
    ) -> "ProfileView":
        """Build the view with an email form seeded from the user record."""
        form = EmailForm(data.user.email, action, translator, notifier)
        return cls(data, translator, form)

    def render(self) -> ProfileViewModel:
        t = self.translator.t
        user = self.data.user
        stats = self.data.order_stats

        user_card = UserCardModel(
            user_id=str(user.user_id),
            name=user.name,
            handle=user.handle,
            avatar_url=user.avatar or "",
            id_line=f"ID: {user.user_id}",
        )

        email_card = EmailCardModel(
            title=t("profile.emailTitle"),
            label=t("profile.emailLabel"),
            placeholder=t("profile.emailPlaceholder"),
            hint=t("profile.emailHint"),
            save_label=t("profile.emailSave"),
            value=self.email_form.email,
            disabled=self.email_form.disabled,
        )

        stats_card = OrderStatsCardModel(
            title=t("common.myOrders"),
            view_orders_label=t("common.viewOrders"),
            view_orders_href=ORDERS_PATH,
            tiles=[
                StatTileModel(icon="package", value=stats.total, label=t("admin.stats.total")),
                StatTileModel(icon="clock", value=stats.pending, label=t("order.status.pending")),
                StatTileModel(
                    icon="check-circle", value=stats.delivered, label=t("order.status.delivered")
                ),
            ],
        )

        recent_card = None
        if self.data.recent_orders:
            recent_card = RecentOrdersCardModel(
                title=t("admin.stats.recentOrders"),
                orders=[self._render_order(order) for order in self.data.recent_orders],
            )

        return ProfileViewModel(
            user=user_card,
            email=email_card,
            points=PointsCardModel(label=t("common.credits"), points=self.data.points),
            order_stats=stats_card,
            recent_orders=recent_card,
            sign_out=SignOutControlModel(
                label=t("common.logout"),
                action=f"{SIGN_OUT_PATH}?callbackUrl={HOME_PATH}",
            ),
        )

    def _render_order(self, order: OrderSummary) -> RecentOrderModel:
        return RecentOrderModel(
            order_id=order.order_id,
            href=order_href(order.order_id),
            product_name=order.product_name,
            date_label=format_order_date(order.created_at, self.translator),
            amount=order.amount,
            badge=status_badge(order.status, self.translator),
        )
