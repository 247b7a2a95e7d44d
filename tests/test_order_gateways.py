"""
Tests for the in-memory and HTTP order gateways.
"""

from __future__ import annotations

import asyncio
import json
from datetime import date, time
from decimal import Decimal

import httpx
import pytest

from laundry.application.exceptions import OrderGatewayError, OrderNotFoundError
from laundry.application.use_cases.pricing import PricingCalculator, select_service
from laundry.core.config import settings
from laundry.domain.entities.booking import BookingRequest, TimeSlot
from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.order import OrderRecord, OrderStatus
from laundry.domain.order_state import InvalidStatusTransition
from laundry.infrastructure.orders.http_order_gateway import HttpOrderGateway
from laundry.infrastructure.orders.memory_order_gateway import MemoryOrderGateway
from laundry.wiring.dependencies import close_order_gateway, get_order_gateway

BASE_URL = "https://orders.test/api"


def _request() -> BookingRequest:
    pricing = PricingCalculator(delivery_fee=Decimal("3.99"), extra_item_rate=Decimal("0.5"))
    service = select_service("wash_fold", "14.99", 1, name="Wash & Fold")
    extras = (CartLine("tShirts", 2),)
    return BookingRequest(
        service=service,
        extra_items=extras,
        extra_item_unit_price=pricing.extra_item_unit_price(service),
        pickup_date=date(2024, 1, 26),
        pickup_time=TimeSlot(time(9, 0), time(11, 0)),
        delivery_date=date(2024, 1, 28),
        address="12 Rue de Lyon",
        notes="",
        total=pricing.price(service, extras),
    )


def _run(gateway: HttpOrderGateway, coro):
    async def runner():
        try:
            return await coro
        finally:
            await gateway.aclose()

    return asyncio.run(runner())


def test_memory_gateway_assigns_ids_and_tracks_status():
    gateway = MemoryOrderGateway()

    first = asyncio.run(gateway.submit_booking(_request()))
    second = asyncio.run(gateway.submit_booking(_request()))
    order = asyncio.run(gateway.get_order(first))

    assert (first, second) == ("order_1", "order_2")
    assert order.status == "pending"
    assert order.total_amount == Decimal("33.97")
    assert order.delivery_date == date(2024, 1, 28)

    gateway.update_status(first, OrderStatus.PROCESSING)
    cancelled = gateway.update_status(first, OrderStatus.CANCELLED)
    assert cancelled.status == "cancelled"
    assert cancelled.cancelled_from == "processing"


def test_memory_gateway_rejects_invalid_transition():
    gateway = MemoryOrderGateway()
    order_id = asyncio.run(gateway.submit_booking(_request()))

    with pytest.raises(InvalidStatusTransition):
        gateway.update_status(order_id, OrderStatus.DELIVERED)

    with pytest.raises(OrderNotFoundError):
        asyncio.run(gateway.get_order("order_404"))


def test_http_gateway_posts_payload():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"orderId": "abc123"})

    gateway = HttpOrderGateway(base_url=BASE_URL + "/", api_key="secret", transport=httpx.MockTransport(handler))

    order_id = _run(gateway, gateway.submit_booking(_request()))

    assert order_id == "abc123"
    assert seen["url"] == BASE_URL + "/orders"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["totalAmount"] == "33.97"
    assert seen["body"]["pickupTime"] == "9:00 AM - 11:00 AM"
    assert [item["name"] for item in seen["body"]["items"]] == ["Wash & Fold", "T Shirts"]


def test_http_gateway_wraps_server_errors():
    gateway = HttpOrderGateway(
        base_url=BASE_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"})),
    )

    with pytest.raises(OrderGatewayError):
        _run(gateway, gateway.submit_booking(_request()))


def test_http_gateway_requires_order_id():
    gateway = HttpOrderGateway(
        base_url=BASE_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )

    with pytest.raises(OrderGatewayError):
        _run(gateway, gateway.submit_booking(_request()))


def test_http_gateway_reads_order_document():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/orders/abc123"
        return httpx.Response(
            200,
            json={
                "id": "abc123",
                "status": "Cancelled",
                "totalAmount": "41.47",
                "deliveryDateString": "2024-01-28T10:00:00.000Z",
                "cancelledFrom": "processing",
                "unexpected": True,
            },
        )

    gateway = HttpOrderGateway(base_url=BASE_URL, transport=httpx.MockTransport(handler))

    order = _run(gateway, gateway.get_order("abc123"))

    assert order.order_id == "abc123"
    assert order.status == "Cancelled"
    assert order.total_amount == Decimal("41.47")
    assert order.delivery_date == date(2024, 1, 28)
    assert order.cancelled_from == "processing"


def test_http_gateway_missing_order():
    gateway = HttpOrderGateway(
        base_url=BASE_URL,
        transport=httpx.MockTransport(lambda request: httpx.Response(404)),
    )

    with pytest.raises(OrderNotFoundError):
        _run(gateway, gateway.get_order("nope"))


def test_http_gateway_needs_base_url(monkeypatch):
    monkeypatch.setattr(settings, "ORDER_API_BASE_URL", None)

    with pytest.raises(ValueError):
        HttpOrderGateway(base_url=None)


def test_memory_gateway_skips_ids_already_stored():
    gateway = MemoryOrderGateway()
    gateway.put_order(OrderRecord(order_id="order_1", status="delivered"))

    order_id = asyncio.run(gateway.submit_booking(_request()))

    assert order_id == "order_2"
    assert asyncio.run(gateway.get_order("order_1")).status == "delivered"


def test_cached_http_gateway_is_closed_on_shutdown(monkeypatch):
    monkeypatch.setattr(settings, "ORDER_API_BASE_URL", BASE_URL)
    get_order_gateway.cache_clear()

    gateway = get_order_gateway()
    assert isinstance(gateway, HttpOrderGateway)

    asyncio.run(close_order_gateway())

    assert gateway._client.is_closed
    assert get_order_gateway.cache_info().currsize == 0
