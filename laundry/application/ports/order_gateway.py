from __future__ import annotations

from abc import ABC, abstractmethod

from laundry.domain.entities.booking import BookingRequest
from laundry.domain.entities.order import OrderRecord


class OrderGatewayPort(ABC):
    @abstractmethod
    async def submit_booking(self, request: BookingRequest) -> str:
        """Hand a booking to payment/persistence. Returns the new order id."""
        raise NotImplementedError

    @abstractmethod
    async def get_order(self, order_id: str) -> OrderRecord:
        """Read an order. Raises OrderNotFoundError if there is none."""
        raise NotImplementedError
