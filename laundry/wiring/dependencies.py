from functools import lru_cache
import logging

from laundry.core.config import settings
from laundry.application.ports.catalog import CatalogPort
from laundry.application.ports.order_gateway import OrderGatewayPort
from laundry.application.use_cases.booking import BookingAssembler
from laundry.application.use_cases.cart import CartAggregator
from laundry.application.use_cases.notifications import NotificationCenter
from laundry.application.use_cases.order_tracking import OrderLifecycleTracker
from laundry.application.use_cases.pricing import PricingCalculator
from laundry.infrastructure.catalog.catalog_store import StaticCatalogStore
from laundry.infrastructure.notifications.memory_store import MemoryNotificationStore
from laundry.infrastructure.orders.http_order_gateway import HttpOrderGateway
from laundry.infrastructure.orders.memory_order_gateway import MemoryOrderGateway


@lru_cache
def get_catalog() -> CatalogPort:
    return StaticCatalogStore()


@lru_cache
def get_order_gateway() -> OrderGatewayPort:
    logger = logging.getLogger(__name__)
    if not settings.ORDER_API_BASE_URL:
        if settings.ENV.lower() in {"dev", "local", "test"}:
            logger.info("Using MemoryOrderGateway (ORDER_API_BASE_URL missing, ENV=%s)", settings.ENV)
            return MemoryOrderGateway()
        raise ValueError("ORDER_API_BASE_URL is required outside dev/local.")
    logger.info("Using HttpOrderGateway")
    return HttpOrderGateway()


async def close_order_gateway() -> None:
    """Release the cached gateway's HTTP client, if one was created."""
    if get_order_gateway.cache_info().currsize == 0:
        return
    gateway = get_order_gateway()
    if isinstance(gateway, HttpOrderGateway):
        await gateway.aclose()
    get_order_gateway.cache_clear()


@lru_cache
def get_notification_center() -> NotificationCenter:
    return NotificationCenter(store=MemoryNotificationStore())


def get_pricing_calculator() -> PricingCalculator:
    return PricingCalculator(
        delivery_fee=settings.DELIVERY_FEE,
        extra_item_rate=settings.EXTRA_ITEM_RATE,
        default_service_rate=settings.DEFAULT_SERVICE_RATE,
    )


def get_cart_aggregator() -> CartAggregator:
    return CartAggregator(catalog=get_catalog())


def get_booking_assembler() -> BookingAssembler:
    return BookingAssembler(
        gateway=get_order_gateway(),
        pricing=get_pricing_calculator(),
        notifications=get_notification_center(),
        delivery_lead_days=settings.DELIVERY_LEAD_DAYS,
    )


def get_order_tracker() -> OrderLifecycleTracker:
    return OrderLifecycleTracker(gateway=get_order_gateway())
