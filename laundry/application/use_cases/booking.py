from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from laundry.application.exceptions import BookingLockedError
from laundry.application.ports.order_gateway import OrderGatewayPort
from laundry.application.use_cases.cart import Cart
from laundry.application.use_cases.notifications import NotificationCenter
from laundry.application.use_cases.pricing import PricingCalculator
from laundry.application.utils.schedule import estimated_delivery_date, find_time_slot
from laundry.domain.entities.booking import BookingRequest, BookingStage, TimeSlot
from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.pricing import PricedTotal, ServiceSelection
from laundry.domain.money import to_decimal


class SubmissionOutcome(str, Enum):
    SUBMITTED = "submitted"
    BLOCKED = "blocked"
    FAILED = "failed"
    IN_FLIGHT = "in_flight"
    ALREADY_SUBMITTED = "already_submitted"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: SubmissionOutcome
    order_id: str | None = None
    request: BookingRequest | None = None
    missing: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is SubmissionOutcome.SUBMITTED


class BookingAssembler:
    """One checkout session, from empty selection to a submitted booking.

    The stage is derived from what has been filled in. Submission goes
    through the order gateway exactly once: a second call while the first
    is pending is rejected, and a submitted session can no longer change.
    """

    def __init__(
        self,
        gateway: OrderGatewayPort,
        pricing: PricingCalculator | None = None,
        notifications: NotificationCenter | None = None,
        session_id: str | None = None,
        delivery_lead_days: int | None = None,
    ) -> None:
        self._gateway = gateway
        self._pricing = pricing or PricingCalculator()
        self._notifications = notifications
        self._session_id = session_id or uuid.uuid4().hex
        self._delivery_lead_days = delivery_lead_days
        self._logger = logging.getLogger(__name__)

        self._service: ServiceSelection | None = None
        self._extra_items = Cart()
        self._pickup_date: date | None = None
        self._pickup_time: TimeSlot | None = None
        self._address = ""
        self._notes = ""
        self._promotion_discount = Decimal("0")

        self._request: BookingRequest | None = None
        self._in_flight = False
        self._order_id: str | None = None

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def order_id(self) -> str | None:
        return self._order_id

    @property
    def request(self) -> BookingRequest | None:
        return self._request

    @property
    def stage(self) -> BookingStage:
        if self._order_id is not None:
            return BookingStage.SUBMITTED
        if not self._has_items():
            return BookingStage.EMPTY
        if self._pickup_date is None or self._pickup_time is None:
            return BookingStage.ITEMS_SELECTED
        if not self._address:
            return BookingStage.SCHEDULE_SET
        if self._request is None:
            return BookingStage.ADDRESS_SET
        return BookingStage.READY

    # Selection

    def select_service(self, service: ServiceSelection | None) -> None:
        self._edit()
        self._service = service

    def add_extra_item(self, item_name: str) -> int:
        self._edit()
        return self._extra_items.increment(item_name)

    def remove_extra_item(self, item_name: str) -> int:
        self._edit()
        return self._extra_items.decrement(item_name)

    def set_extra_quantity(self, item_name: str, quantity: int) -> None:
        self._edit()
        self._extra_items.set_quantity(item_name, quantity)

    def extra_items(self) -> list[CartLine]:
        return self._extra_items.lines()

    def set_schedule(self, pickup_date: date | None, pickup_time: TimeSlot | str | None) -> None:
        self._edit()
        if isinstance(pickup_time, str):
            pickup_time = find_time_slot(pickup_time) if pickup_time.strip() else None
        self._pickup_date = pickup_date
        self._pickup_time = pickup_time

    def set_address(self, address: str | None, notes: str | None = None) -> None:
        self._edit()
        self._address = (address or "").strip()
        if notes is not None:
            self._notes = notes.strip()

    def set_promotion(self, discount: Decimal | int | float | str) -> None:
        self._edit()
        self._promotion_discount = to_decimal(discount)

    # Checkout

    def quote(self) -> PricedTotal:
        return self._pricing.price(self._service, self._extra_items.lines(), self._promotion_discount)

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self._has_items():
            missing.append("items")
        if self._pickup_date is None:
            missing.append("pickup_date")
        if self._pickup_time is None:
            missing.append("pickup_time")
        if not self._address:
            missing.append("address")
        return missing

    def can_submit(self) -> bool:
        if self._order_id is not None or self._in_flight:
            return False
        return not self.missing_fields()

    def assemble(self) -> BookingRequest | None:
        """Freeze the current selection into a BookingRequest, or None if incomplete."""
        if self._request is not None:
            return self._request
        if self.missing_fields():
            return None
        assert self._pickup_date is not None and self._pickup_time is not None
        self._request = BookingRequest(
            service=self._service,
            extra_items=tuple(self._extra_items.lines()),
            extra_item_unit_price=self._pricing.extra_item_unit_price(self._service),
            pickup_date=self._pickup_date,
            pickup_time=self._pickup_time,
            delivery_date=estimated_delivery_date(self._pickup_date, self._delivery_lead_days),
            address=self._address,
            notes=self._notes,
            total=self.quote(),
        )
        return self._request

    async def submit(self) -> SubmissionResult:
        log_extra = {"session_id": self._session_id}
        if self._order_id is not None:
            return SubmissionResult(
                outcome=SubmissionOutcome.ALREADY_SUBMITTED,
                order_id=self._order_id,
                request=self._request,
            )
        if self._in_flight:
            self._logger.warning("Duplicate submission rejected", extra=log_extra)
            return SubmissionResult(outcome=SubmissionOutcome.IN_FLIGHT, request=self._request)

        request = self.assemble()
        if request is None:
            missing = tuple(self.missing_fields())
            self._logger.info("Booking not ready", extra={**log_extra, "reason": ",".join(missing)})
            return SubmissionResult(outcome=SubmissionOutcome.BLOCKED, missing=missing)

        self._in_flight = True
        try:
            order_id = await self._gateway.submit_booking(request)
        except Exception as e:
            self._logger.error("Booking submission failed", extra={**log_extra, "reason": str(e)})
            return SubmissionResult(outcome=SubmissionOutcome.FAILED, request=request, error=str(e))
        finally:
            self._in_flight = False

        self._order_id = order_id
        self._logger.info("Booking submitted", extra={**log_extra, "order_id": order_id})
        if self._notifications is not None:
            self._notifications.add(
                title="Order placed",
                body=f"Your order {order_id} has been placed. Total {request.total.final_amount}.",
                order_id=order_id,
            )
        return SubmissionResult(outcome=SubmissionOutcome.SUBMITTED, order_id=order_id, request=request)

    def _has_items(self) -> bool:
        return self._service is not None or not self._extra_items.is_empty()

    def _edit(self) -> None:
        if self._order_id is not None:
            raise BookingLockedError("Booking already submitted; start a new session")
        if self._in_flight:
            raise BookingLockedError("Booking submission in progress")
        self._request = None
