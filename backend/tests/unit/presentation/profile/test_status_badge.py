"""Tests for order status badges."""

import pytest

from presentation.profile.status_badge import BADGE_VARIANT, status_badge


@pytest.mark.parametrize(
    "status,class_name",
    [
        ("pending", "text-yellow-600 border-yellow-600"),
        ("paid", "text-blue-600 border-blue-600"),
        ("delivered", "text-green-600 border-green-600"),
        ("refunded", "text-gray-600 border-gray-600"),
        ("cancelled", "text-red-600 border-red-600"),
    ],
)
def test_known_status(translator, status, class_name):
    """Test known statuses get label and colour."""
    badge = status_badge(status, translator)

    assert badge.label == translator.t(f"order.status.{status}")
    assert badge.label != f"order.status.{status}"
    assert badge.class_name == class_name
    assert badge.variant == BADGE_VARIANT == "outline"


@pytest.mark.parametrize("status,label", [("shipped", "shipped"), ("", "-"), (None, "-")])
def test_fallback_status(translator, status, label):
    """Test unknown statuses render raw without colour."""
    badge = status_badge(status, translator)

    assert badge.label == label
    assert badge.class_name is None
    assert badge.variant == "outline"


def test_badges_are_distinct(translator):
    """Test each known status renders differently."""
    statuses = ["pending", "paid", "delivered", "refunded", "cancelled"]
    classes = {status_badge(s, translator).class_name for s in statuses}
    assert len(classes) == len(statuses)
