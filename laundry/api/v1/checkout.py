from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query

from laundry.api.v1.schemas import (
    BookingRequestSchema,
    BookingResponseSchema,
    CartLineSchema,
    CartRequestSchema,
    CartResponseSchema,
    CatalogItemSchema,
    CatalogResponseSchema,
    PricedTotalSchema,
    QuoteRequestSchema,
    ScheduleResponseSchema,
    ServiceSchema,
)
from laundry.application.ports.catalog import CatalogPort
from laundry.application.use_cases.booking import BookingAssembler, SubmissionOutcome
from laundry.application.use_cases.cart import Cart, CartAggregator
from laundry.application.use_cases.pricing import PricingCalculator, select_service
from laundry.application.utils.schedule import TIME_SLOTS, available_pickup_dates
from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.catalog import ALL_CATEGORIES
from laundry.domain.entities.pricing import PricedTotal, ServiceSelection
from laundry.wiring.dependencies import (
    get_booking_assembler,
    get_cart_aggregator,
    get_catalog,
    get_pricing_calculator,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _priced_total_schema(total: PricedTotal) -> PricedTotalSchema:
    return PricedTotalSchema(
        base_amount=total.base_amount,
        extra_item_amount=total.extra_item_amount,
        delivery_fee=total.delivery_fee,
        promotion_discount=total.promotion_discount,
        final_amount=total.final_amount,
    )


def _resolve_service(catalog: CatalogPort, service_id: str | None, quantity_units: Decimal) -> ServiceSelection | None:
    if not service_id:
        return None
    record = catalog.get_service(service_id)
    if record is None:
        raise ValueError(f"Unknown service: {service_id}")
    return select_service(record.service_id, record.base_price_per_unit, quantity_units, name=record.name)


def _promotion(calc: PricingCalculator, service: ServiceSelection | None, req: QuoteRequestSchema) -> Decimal:
    if req.offer_percent is None:
        return req.promotion_discount
    if req.promotion_discount > 0:
        raise ValueError("An offer cannot be combined with another promotion")
    if service is None:
        return Decimal("0")
    return calc.offer_discount(service, req.offer_percent)


@router.get("/catalog", response_model=CatalogResponseSchema)
def list_catalog(
    category: str = Query(ALL_CATEGORIES),
    catalog: CatalogPort = Depends(get_catalog),
    cart: CartAggregator = Depends(get_cart_aggregator),
):
    try:
        names = set(cart.filter_by_category(category))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CatalogResponseSchema(
        items=[
            CatalogItemSchema(name=item.name, unit_price=item.unit_price, category=item.category.value)
            for item in catalog.list_items()
            if item.name in names
        ],
        services=[
            ServiceSchema(
                service_id=s.service_id,
                name=s.name,
                base_price_per_unit=s.base_price_per_unit,
                unit=s.unit,
            )
            for s in catalog.list_services()
        ],
    )


@router.post("/cart", response_model=CartResponseSchema)
def price_cart(
    req: CartRequestSchema,
    cart: CartAggregator = Depends(get_cart_aggregator),
):
    try:
        for name, quantity in req.quantities.items():
            cart.set_quantity(name, quantity)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=f"Unknown catalog item: {e.args[0]}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CartResponseSchema(
        lines=[
            CartLineSchema(item_name=line.item_name, quantity=line.quantity, line_total=cart.line_total(line.item_name))
            for line in cart.lines()
        ],
        item_count=cart.item_count(),
        total=cart.cart_total(),
    )


@router.post("/quote", response_model=PricedTotalSchema)
def quote(
    req: QuoteRequestSchema,
    catalog: CatalogPort = Depends(get_catalog),
    calc: PricingCalculator = Depends(get_pricing_calculator),
):
    try:
        service = _resolve_service(catalog, req.service_id, req.quantity_units)
        extra_items = _extra_lines(req.extra_items)
        promotion = _promotion(calc, service, req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    total = calc.price(service, extra_items, promotion)
    return _priced_total_schema(total)


@router.get("/schedule", response_model=ScheduleResponseSchema)
def schedule():
    return ScheduleResponseSchema(
        dates=available_pickup_dates(),
        time_slots=[slot.label for slot in TIME_SLOTS],
    )


@router.post("/bookings", response_model=BookingResponseSchema, status_code=201)
async def create_booking(
    req: BookingRequestSchema,
    catalog: CatalogPort = Depends(get_catalog),
    calc: PricingCalculator = Depends(get_pricing_calculator),
    booking: BookingAssembler = Depends(get_booking_assembler),
):
    try:
        service = _resolve_service(catalog, req.service_id, req.quantity_units)
        booking.select_service(service)
        for name, quantity in req.extra_items.items():
            booking.set_extra_quantity(name, quantity)
        booking.set_schedule(req.pickup_date, req.pickup_time)
        booking.set_address(req.address, req.notes)
        booking.set_promotion(_promotion(calc, service, req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = await booking.submit()
    if result.outcome is SubmissionOutcome.BLOCKED:
        raise HTTPException(status_code=422, detail={"missing": list(result.missing)})
    if result.outcome is SubmissionOutcome.FAILED:
        raise HTTPException(status_code=502, detail=result.error or "Order submission failed")
    if not result.ok or result.request is None or result.order_id is None:
        raise HTTPException(status_code=409, detail=result.outcome.value)

    return BookingResponseSchema(
        order_id=result.order_id,
        total=_priced_total_schema(result.request.total),
        delivery_date=result.request.delivery_date,
    )


def _extra_lines(quantities: dict[str, int]) -> list[CartLine]:
    extras = Cart()
    for name, quantity in quantities.items():
        extras.set_quantity(name, quantity)
    return extras.lines()
