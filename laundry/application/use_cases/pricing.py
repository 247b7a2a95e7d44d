from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from laundry.core.config import settings
from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.pricing import PricedTotal, ServiceSelection
from laundry.domain.money import to_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class PricingCalculator:
    """Prices a booking: base service + extra-item surcharge + delivery - promotion.

    Extra items are surcharged at a fraction of the selected service's unit
    rate, counted per unit across all extra lines. They are not billed at
    their own catalog price.
    """

    def __init__(
        self,
        delivery_fee: Decimal | None = None,
        extra_item_rate: Decimal | None = None,
        default_service_rate: Decimal | None = None,
    ) -> None:
        self._delivery_fee = delivery_fee if delivery_fee is not None else settings.DELIVERY_FEE
        self._extra_item_rate = extra_item_rate if extra_item_rate is not None else settings.EXTRA_ITEM_RATE
        self._default_service_rate = (
            default_service_rate if default_service_rate is not None else settings.DEFAULT_SERVICE_RATE
        )
        self._logger = logging.getLogger(__name__)

    @property
    def delivery_fee(self) -> Decimal:
        return self._delivery_fee

    def extra_item_unit_price(self, service: ServiceSelection | None) -> Decimal:
        # Extras booked without a service are surcharged against the standard wash rate.
        rate = service.base_price_per_unit if service is not None else self._default_service_rate
        return rate * self._extra_item_rate

    def price(
        self,
        service: ServiceSelection | None,
        extra_items: Iterable[CartLine] = (),
        promotion_discount: Decimal | int | float | str = ZERO,
    ) -> PricedTotal:
        extra_units = sum(line.quantity for line in extra_items)
        base_amount = service.base_amount if service is not None else ZERO
        discount = to_decimal(promotion_discount)
        if discount < ZERO:
            self._logger.info("Negative promotion ignored", extra={"reason": str(discount)})
            discount = ZERO
        return PricedTotal(
            base_amount=base_amount,
            extra_item_amount=extra_units * self.extra_item_unit_price(service),
            delivery_fee=self._delivery_fee,
            promotion_discount=discount,
        )

    def offer_discount(self, service: ServiceSelection, percent: Decimal | int | float | str) -> Decimal:
        """Promotion amount for a percentage offer on the service rate."""
        pct = min(HUNDRED, max(ZERO, to_decimal(percent)))
        return service.base_price_per_unit * pct / HUNDRED * service.quantity_units


def select_service(
    service_id: str,
    base_price_per_unit: Decimal | int | float | str,
    quantity_units: Decimal | int | float | str = 1,
    name: str | None = None,
) -> ServiceSelection:
    """Build a ServiceSelection, rejecting negative prices or quantities."""
    price = to_decimal(base_price_per_unit)
    quantity = to_decimal(quantity_units)
    if price < ZERO:
        raise ValueError(f"Service price cannot be negative: {price}")
    if quantity < ZERO:
        raise ValueError(f"Service quantity cannot be negative: {quantity}")
    return ServiceSelection(
        service_id=service_id,
        base_price_per_unit=price,
        quantity_units=quantity,
        name=name,
    )
