from __future__ import annotations

from datetime import date, time, timedelta

from laundry.application.exceptions import UnknownTimeSlotError
from laundry.core.config import settings
from laundry.domain.entities.booking import TimeSlot

TIME_SLOTS: tuple[TimeSlot, ...] = (
    TimeSlot(time(9, 0), time(11, 0)),
    TimeSlot(time(11, 0), time(13, 0)),
    TimeSlot(time(13, 0), time(15, 0)),
    TimeSlot(time(15, 0), time(17, 0)),
    TimeSlot(time(17, 0), time(19, 0)),
)


def available_pickup_dates(today: date | None = None, days: int | None = None) -> list[date]:
    """Pickup dates offered to the customer: the next N days, starting tomorrow."""
    today = today or date.today()
    window = settings.PICKUP_WINDOW_DAYS if days is None else days
    return [today + timedelta(days=offset) for offset in range(1, window + 1)]


def find_time_slot(label: str) -> TimeSlot:
    normalized = " ".join(label.upper().split())
    for slot in TIME_SLOTS:
        if slot.label == normalized:
            return slot
    raise UnknownTimeSlotError(f"Unknown pickup slot: {label!r}")


def estimated_delivery_date(pickup_date: date, lead_days: int | None = None) -> date:
    lead = settings.DELIVERY_LEAD_DAYS if lead_days is None else lead_days
    return pickup_date + timedelta(days=lead)
