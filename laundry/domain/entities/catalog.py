from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


ALL_CATEGORIES = "All"


class Category(str, Enum):
    WASH = "wash"
    DRY_CLEAN = "dry_clean"
    IRON = "iron"


@dataclass(frozen=True)
class CatalogItem:
    name: str
    unit_price: Decimal
    category: Category


@dataclass(frozen=True)
class ServiceRecord:
    service_id: str
    name: str
    base_price_per_unit: Decimal
    unit: str = "kg"
