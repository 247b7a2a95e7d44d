from __future__ import annotations

from decimal import Decimal

from laundry.domain.entities.catalog import CatalogItem, Category, ServiceRecord


def _item(name: str, price: int, category: Category) -> CatalogItem:
    return CatalogItem(name=name, unit_price=Decimal(price), category=category)


def _service(service_id: str, name: str, price: str, unit: str = "kg") -> ServiceRecord:
    return ServiceRecord(service_id=service_id, name=name, base_price_per_unit=Decimal(price), unit=unit)


CATALOG_ITEMS: list[CatalogItem] = [
    _item("Shirt", 15000, Category.WASH),
    _item("T-Shirt", 15000, Category.WASH),
    _item("Pants", 20000, Category.WASH),
    _item("Jeans", 25000, Category.WASH),
    _item("Bedsheet", 40000, Category.WASH),
    _item("Towel", 15000, Category.WASH),
    _item("Pillowcase", 10000, Category.WASH),
    _item("Curtain", 50000, Category.WASH),
    _item("Suit", 80000, Category.DRY_CLEAN),
    _item("Dress", 60000, Category.DRY_CLEAN),
    _item("Coat", 90000, Category.DRY_CLEAN),
    _item("Sweater", 45000, Category.DRY_CLEAN),
    _item("Blouse", 20000, Category.IRON),
    _item("Dress Shirt", 25000, Category.IRON),
]

SERVICES: list[ServiceRecord] = [
    _service("wash_fold", "Wash & Fold", "14.99"),
    _service("wf1", "Regular Laundry", "12.99"),
    _service("wf2", "Bedding & Linens", "15.99"),
    _service("dc1", "Suits & Blazers", "24.99", unit="item"),
    _service("dc2", "Dresses & Gowns", "29.99", unit="item"),
    _service("ir1", "Shirts & Blouses", "4.99", unit="item"),
    _service("ir2", "Pants & Trousers", "5.99", unit="item"),
    _service("ex1", "Express Wash & Fold", "18.99"),
    _service("ex2", "Express Dry Cleaning", "34.99", unit="item"),
    _service("sp1", "Stain Removal", "9.99", unit="item"),
    _service("sp2", "Leather & Suede", "49.99", unit="item"),
]
