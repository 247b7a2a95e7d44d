from __future__ import annotations

import logging

from laundry.application.ports.order_gateway import OrderGatewayPort
from laundry.domain.entities.order import OrderRecord, OrderStatus, OrderTimeline, TimelineStep
from laundry.domain.order_state import STATUS_RANK, can_transition, is_terminal, parse_status

# Each step is completed once the order reaches the status of that rank.
TIMELINE_STEPS: tuple[tuple[str, int], ...] = (
    ("Order Placed", 0),
    ("Payment Confirmed", 0),
    ("In Progress", 1),
    ("Ready for Delivery", 2),
    ("Delivered", 3),
)


class OrderLifecycleTracker:
    """Derives the order timeline and progress from an order's status.

    Nothing here is stored: the same status always yields the same
    timeline and percentage.
    """

    def __init__(self, gateway: OrderGatewayPort | None = None) -> None:
        self._gateway = gateway
        self._logger = logging.getLogger(__name__)

    def timeline_for(self, order: OrderRecord) -> OrderTimeline:
        status = parse_status(order.status)
        if status is None:
            self._logger.warning(
                "Unknown order status",
                extra={"order_id": order.order_id, "status": order.status},
            )
            return OrderTimeline(
                order_id=order.order_id,
                status=None,
                steps=tuple(TimelineStep(label, False) for label, _ in TIMELINE_STEPS),
                progress_percent=None,
                is_terminal=False,
                unknown_status=order.status,
            )

        steps = self._steps(status, order.cancelled_from)
        completed = sum(1 for step in steps if step.completed)
        return OrderTimeline(
            order_id=order.order_id,
            status=status,
            steps=steps,
            progress_percent=100 * completed // len(steps),
            is_terminal=is_terminal(status),
        )

    def progress_percent(self, order: OrderRecord) -> int | None:
        return self.timeline_for(order).progress_percent

    def is_terminal(self, status: OrderStatus | str) -> bool:
        parsed = parse_status(status)
        return parsed is not None and is_terminal(parsed)

    def can_transition(self, current: OrderStatus | str, target: OrderStatus | str) -> bool:
        src, dst = parse_status(current), parse_status(target)
        if src is None or dst is None:
            return False
        return can_transition(src, dst)

    async def timeline_for_order_id(self, order_id: str) -> OrderTimeline:
        if self._gateway is None:
            raise RuntimeError("OrderLifecycleTracker has no order gateway configured")
        order = await self._gateway.get_order(order_id)
        return self.timeline_for(order)

    def _steps(self, status: OrderStatus, cancelled_from: str | None) -> tuple[TimelineStep, ...]:
        if status is OrderStatus.CANCELLED:
            reached = parse_status(cancelled_from) if cancelled_from else None
            if reached is None or reached not in STATUS_RANK:
                reached = OrderStatus.PENDING
            # The stage under way at cancellation never finished; placement and payment did.
            reached_rank = STATUS_RANK[reached]
            return tuple(
                TimelineStep(label, rank == 0 or rank < reached_rank)
                for label, rank in TIMELINE_STEPS
            )
        current_rank = STATUS_RANK[status]
        return tuple(TimelineStep(label, rank <= current_rank) for label, rank in TIMELINE_STEPS)
