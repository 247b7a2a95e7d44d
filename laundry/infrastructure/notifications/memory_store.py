from __future__ import annotations

from laundry.application.ports.notification_store import NotificationStorePort
from laundry.domain.entities.notification import Notification


class MemoryNotificationStore(NotificationStorePort):
    def __init__(self) -> None:
        self._notifications: dict[str, Notification] = {}

    def list_notifications(self) -> list[Notification]:
        return list(self._notifications.values())

    def save(self, notification: Notification) -> None:
        self._notifications[notification.notification_id] = notification

    def get(self, notification_id: str) -> Notification | None:
        return self._notifications.get(notification_id)
