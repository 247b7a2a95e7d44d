from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Any

from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.pricing import PricedTotal, ServiceSelection
from laundry.domain.money import round2


class BookingStage(str, Enum):
    EMPTY = "empty"
    ITEMS_SELECTED = "items_selected"
    SCHEDULE_SET = "schedule_set"
    ADDRESS_SET = "address_set"
    READY = "ready"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class TimeSlot:
    start: time
    end: time

    @property
    def label(self) -> str:
        return f"{_clock(self.start)} - {_clock(self.end)}"


def _clock(value: time) -> str:
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def display_name(item_name: str) -> str:
    """Readable label for an extra item key: "bedSheets" -> "Bed Sheets"."""
    spaced = " ".join(re.sub(r"([A-Z])", r" \1", item_name).split())
    return spaced[:1].upper() + spaced[1:]


@dataclass(frozen=True)
class BookingRequest:
    service: ServiceSelection | None
    extra_items: tuple[CartLine, ...]
    extra_item_unit_price: Decimal
    pickup_date: date
    pickup_time: TimeSlot
    delivery_date: date
    address: str
    notes: str
    total: PricedTotal

    def to_payload(self) -> dict[str, Any]:
        """Order document handed to the persistence collaborator."""
        items: list[dict[str, Any]] = []
        if self.service is not None and self.service.quantity_units > 0:
            items.append(
                {
                    "name": self.service.name or self.service.service_id,
                    "serviceId": self.service.service_id,
                    "quantity": str(self.service.quantity_units),
                    "price": str(round2(self.service.base_amount)),
                }
            )
        for line in self.extra_items:
            items.append(
                {
                    "name": display_name(line.item_name),
                    "quantity": line.quantity,
                    "price": str(round2(self.extra_item_unit_price * line.quantity)),
                }
            )
        return {
            "items": items,
            "status": "pending",
            "totalAmount": str(self.total.final_amount),
            "pickupDate": self.pickup_date.isoformat(),
            "pickupTime": self.pickup_time.label,
            "deliveryDate": self.delivery_date.isoformat(),
            "address": {"street": self.address, "notes": self.notes},
        }
