from __future__ import annotations

from decimal import Decimal

import pytest

from laundry.application.use_cases.cart import CartAggregator
from laundry.domain.entities.catalog import CatalogItem, Category, ServiceRecord
from laundry.infrastructure.catalog.catalog_store import StaticCatalogStore


@pytest.fixture
def catalog() -> StaticCatalogStore:
    return StaticCatalogStore(
        items=[
            CatalogItem("Shirt", Decimal("2000"), Category.WASH),
            CatalogItem("Pant", Decimal("2500"), Category.WASH),
            CatalogItem("Suit", Decimal("8000"), Category.DRY_CLEAN),
            CatalogItem("Blouse", Decimal("1500"), Category.IRON),
        ],
        services=[
            ServiceRecord("wash_fold", "Wash & Fold", Decimal("14.99")),
            ServiceRecord("ir1", "Shirts & Blouses", Decimal("4.99"), unit="item"),
        ],
    )


@pytest.fixture
def cart(catalog: StaticCatalogStore) -> CartAggregator:
    return CartAggregator(catalog=catalog)
