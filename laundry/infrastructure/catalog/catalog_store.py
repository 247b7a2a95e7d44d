from __future__ import annotations

from laundry.application.ports.catalog import CatalogPort
from laundry.domain.entities.catalog import CatalogItem, ServiceRecord
from laundry.infrastructure.catalog.catalog_data import CATALOG_ITEMS, SERVICES


class StaticCatalogStore(CatalogPort):
    def __init__(
        self,
        items: list[CatalogItem] | None = None,
        services: list[ServiceRecord] | None = None,
    ) -> None:
        items = CATALOG_ITEMS if items is None else items
        services = SERVICES if services is None else services
        self._items = {item.name: item for item in items}
        if len(self._items) != len(items):
            raise ValueError("Catalog item names must be unique")
        self._services = {service.service_id.lower(): service for service in services}

    def get_item(self, name: str) -> CatalogItem | None:
        return self._items.get(name)

    def list_items(self) -> list[CatalogItem]:
        return list(self._items.values())

    def get_service(self, service_id: str) -> ServiceRecord | None:
        return self._services.get(service_id.lower().strip())

    def list_services(self) -> list[ServiceRecord]:
        return list(self._services.values())
