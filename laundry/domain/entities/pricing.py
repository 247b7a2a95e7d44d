from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from laundry.domain.money import round2


@dataclass(frozen=True)
class ServiceSelection:
    service_id: str
    base_price_per_unit: Decimal
    quantity_units: Decimal
    name: str | None = None

    @property
    def base_amount(self) -> Decimal:
        return self.base_price_per_unit * self.quantity_units


@dataclass(frozen=True)
class PricedTotal:
    base_amount: Decimal
    extra_item_amount: Decimal
    delivery_fee: Decimal
    promotion_discount: Decimal = Decimal("0")

    @property
    def final_amount(self) -> Decimal:
        # Derived on every read so it can never drift from the components.
        gross = self.base_amount + self.extra_item_amount + self.delivery_fee
        return round2(max(Decimal("0"), gross - self.promotion_discount))
