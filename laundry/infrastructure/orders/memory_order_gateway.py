from __future__ import annotations

import itertools
import logging
from dataclasses import replace
from datetime import datetime, timezone

from laundry.application.exceptions import OrderNotFoundError
from laundry.application.ports.order_gateway import OrderGatewayPort
from laundry.domain.entities.booking import BookingRequest
from laundry.domain.entities.order import OrderRecord, OrderStatus
from laundry.domain.order_state import assert_status_transition, parse_status


class MemoryOrderGateway(OrderGatewayPort):
    """Order backend kept in process memory, for dev runs and tests."""

    def __init__(self) -> None:
        self._orders: dict[str, OrderRecord] = {}
        self._ids = itertools.count(1)
        self._logger = logging.getLogger(__name__)

    async def submit_booking(self, request: BookingRequest) -> str:
        order_id = self._next_order_id()
        payload = request.to_payload()
        self._orders[order_id] = OrderRecord(
            order_id=order_id,
            status=OrderStatus.PENDING.value,
            items=payload["items"],
            created_at=datetime.now(timezone.utc),
            total_amount=request.total.final_amount,
            delivery_date=request.delivery_date,
        )
        self._logger.info("Mock order created", extra={"order_id": order_id})
        return order_id

    async def get_order(self, order_id: str) -> OrderRecord:
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def _next_order_id(self) -> str:
        # put_order may already hold ids from the sequence.
        while True:
            order_id = f"order_{next(self._ids)}"
            if order_id not in self._orders:
                return order_id

    def put_order(self, order: OrderRecord) -> None:
        self._orders[order.order_id] = order

    def update_status(self, order_id: str, target: OrderStatus) -> OrderRecord:
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        current = parse_status(order.status)
        if current is None:
            raise ValueError(f"Order {order_id} has unrecognised status {order.status!r}")
        assert_status_transition(current, target)
        cancelled_from = current.value if target is OrderStatus.CANCELLED else order.cancelled_from
        updated = replace(order, status=target.value, cancelled_from=cancelled_from)
        self._orders[order_id] = updated
        self._logger.info("Mock order status changed", extra={"order_id": order_id, "status": target.value})
        return updated
