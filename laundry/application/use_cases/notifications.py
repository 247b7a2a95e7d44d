from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace
from typing import Callable

from laundry.application.ports.notification_store import NotificationStorePort
from laundry.domain.entities.notification import Notification

Listener = Callable[[list[Notification], int], None]


class NotificationCenter:
    """Single owner of notification state.

    Readers (badge, list screen) subscribe here and receive the current list
    and unread count after every change; the count is always derived from
    the stored notifications, never kept as a separate counter.
    """

    def __init__(self, store: NotificationStorePort) -> None:
        self._store = store
        self._listeners: list[Listener] = []
        self._logger = logging.getLogger(__name__)

    def notifications(self) -> list[Notification]:
        return sorted(self._store.list_notifications(), key=lambda n: n.created_at, reverse=True)

    def unread_count(self) -> int:
        return sum(1 for n in self._store.list_notifications() if not n.is_read)

    def add(self, title: str, body: str, order_id: str | None = None, now_ts: float | None = None) -> Notification:
        notification = Notification(
            notification_id=uuid.uuid4().hex,
            title=title,
            body=body,
            created_at=now_ts if now_ts is not None else time.time(),
            order_id=order_id,
        )
        self._store.save(notification)
        self._publish()
        return notification

    def mark_read(self, notification_id: str) -> bool:
        notification = self._store.get(notification_id)
        if notification is None:
            return False
        if not notification.is_read:
            self._store.save(replace(notification, is_read=True))
            self._publish()
        return True

    def mark_all_read(self) -> int:
        unread = [n for n in self._store.list_notifications() if not n.is_read]
        for notification in unread:
            self._store.save(replace(notification, is_read=True))
        if unread:
            self._publish()
        return len(unread)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; it is called immediately with the current state."""
        self._listeners.append(listener)
        listener(self.notifications(), self.unread_count())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.notifications()
        unread = self.unread_count()
        for listener in list(self._listeners):
            try:
                listener(snapshot, unread)
            except Exception:
                self._logger.exception("Notification listener failed")
