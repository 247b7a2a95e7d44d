from abc import ABC, abstractmethod

from laundry.domain.entities.notification import Notification


class NotificationStorePort(ABC):
    @abstractmethod
    def list_notifications(self) -> list[Notification]:
        raise NotImplementedError

    @abstractmethod
    def save(self, notification: Notification) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, notification_id: str) -> Notification | None:
        raise NotImplementedError
