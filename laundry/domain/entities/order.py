from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    READY_FOR_DELIVERY = "ready_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderRecord:
    order_id: str
    status: str  # raw value from the store, may be outside OrderStatus
    items: list[dict[str, Any]] = field(default_factory=list)
    created_at: datetime | None = None
    total_amount: Decimal | None = None
    delivery_date: date | None = None
    cancelled_from: str | None = None  # status held when the order was cancelled


@dataclass(frozen=True)
class TimelineStep:
    label: str
    completed: bool


@dataclass(frozen=True)
class OrderTimeline:
    order_id: str | None
    status: OrderStatus | None
    steps: tuple[TimelineStep, ...]
    progress_percent: int | None
    is_terminal: bool
    unknown_status: str | None = None

    @property
    def completed_count(self) -> int:
        return sum(1 for step in self.steps if step.completed)
