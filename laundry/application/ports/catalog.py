from __future__ import annotations

from abc import ABC, abstractmethod

from laundry.domain.entities.catalog import CatalogItem, ServiceRecord


class CatalogPort(ABC):
    @abstractmethod
    def get_item(self, name: str) -> CatalogItem | None:
        """Get orderable item by its unique name."""
        raise NotImplementedError

    @abstractmethod
    def list_items(self) -> list[CatalogItem]:
        """All orderable items, in catalog order."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> ServiceRecord | None:
        """Get a bookable service by id."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[ServiceRecord]:
        raise NotImplementedError
