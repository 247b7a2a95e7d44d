"""
Tests for the notification center: single source for the list and the unread badge.
"""

from __future__ import annotations

from laundry.application.use_cases.notifications import NotificationCenter
from laundry.infrastructure.notifications.memory_store import MemoryNotificationStore


def _center() -> NotificationCenter:
    return NotificationCenter(store=MemoryNotificationStore())


def test_unread_count_is_derived_from_notifications():
    center = _center()
    first = center.add("Order placed", "Order order_1 placed", order_id="order_1", now_ts=1.0)
    center.add("Order ready", "Order order_1 is ready", order_id="order_1", now_ts=2.0)

    assert center.unread_count() == 2
    assert [n.title for n in center.notifications()] == ["Order ready", "Order placed"]

    assert center.mark_read(first.notification_id) is True
    assert center.mark_read(first.notification_id) is True
    assert center.unread_count() == 1
    assert center.mark_read("missing") is False


def test_subscribers_see_every_change():
    center = _center()
    badge: list[int] = []
    unsubscribe = center.subscribe(lambda notifications, unread: badge.append(unread))

    center.add("Order placed", "body", now_ts=1.0)
    center.add("Promo", "body", now_ts=2.0)
    assert center.mark_all_read() == 2

    unsubscribe()
    center.add("Ignored", "body", now_ts=3.0)

    assert badge == [0, 1, 2, 0]


def test_failing_listener_does_not_block_others():
    center = _center()
    seen: list[int] = []

    def broken(notifications, unread):
        if unread:
            raise RuntimeError("render failed")

    center.subscribe(broken)
    center.subscribe(lambda notifications, unread: seen.append(unread))

    center.add("Order placed", "body", now_ts=1.0)

    assert seen == [0, 1]
