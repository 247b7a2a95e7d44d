"""Order status ordering and transition rules.

Statuses progress pending -> processing -> ready_for_delivery -> delivered.
Any non-terminal status may move to cancelled. Delivered and cancelled are
terminal.
"""

from __future__ import annotations

from laundry.domain.entities.order import OrderStatus

STATUS_RANK: dict[OrderStatus, int] = {
    OrderStatus.PENDING: 0,
    OrderStatus.PROCESSING: 1,
    OrderStatus.READY_FOR_DELIVERY: 2,
    OrderStatus.DELIVERED: 3,
}

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

STATUS_TRANSITIONS: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.READY_FOR_DELIVERY, OrderStatus.CANCELLED},
    OrderStatus.READY_FOR_DELIVERY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}

# Spellings seen in stored orders, keyed by their normalised form.
STATUS_ALIASES: dict[str, OrderStatus] = {
    "pending": OrderStatus.PENDING,
    "processing": OrderStatus.PROCESSING,
    "in_progress": OrderStatus.PROCESSING,
    "ready_for_delivery": OrderStatus.READY_FOR_DELIVERY,
    "delivered": OrderStatus.DELIVERED,
    "cancelled": OrderStatus.CANCELLED,
    "canceled": OrderStatus.CANCELLED,
}


class InvalidStatusTransition(ValueError):
    """Raised when an order is moved to a status its current one does not allow."""


def _normalise(raw: str) -> str:
    return "_".join(raw.strip().lower().replace("-", " ").split())


def parse_status(raw: str | OrderStatus | None) -> OrderStatus | None:
    """Map a stored status value to OrderStatus, or None when unrecognised."""
    if raw is None:
        return None
    if isinstance(raw, OrderStatus):
        return raw
    return STATUS_ALIASES.get(_normalise(raw))


def is_terminal(status: OrderStatus) -> bool:
    return status in TERMINAL_STATUSES


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in STATUS_TRANSITIONS.get(current, set())


def assert_status_transition(current: OrderStatus, target: OrderStatus) -> None:
    if not can_transition(current, target):
        raise InvalidStatusTransition(
            f"Invalid order transition: {current.value} → {target.value}"
        )


def next_status(current: OrderStatus) -> OrderStatus | None:
    """The forward (non-cancel) successor of a status, if any."""
    for candidate in STATUS_TRANSITIONS.get(current, set()):
        if candidate is not OrderStatus.CANCELLED:
            return candidate
    return None
