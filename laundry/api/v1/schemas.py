from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class CatalogItemSchema(BaseModel):
    name: str
    unit_price: Decimal
    category: str


class ServiceSchema(BaseModel):
    service_id: str
    name: str
    base_price_per_unit: Decimal
    unit: str


class CatalogResponseSchema(BaseModel):
    items: list[CatalogItemSchema]
    services: list[ServiceSchema]


class CartRequestSchema(BaseModel):
    quantities: dict[str, int] = Field(default_factory=dict)


class CartLineSchema(BaseModel):
    item_name: str
    quantity: int
    line_total: Decimal


class CartResponseSchema(BaseModel):
    lines: list[CartLineSchema]
    item_count: int
    total: Decimal


class QuoteRequestSchema(BaseModel):
    service_id: str | None = None
    quantity_units: Decimal = Decimal("1")
    extra_items: dict[str, int] = Field(default_factory=dict)
    promotion_discount: Decimal = Decimal("0")
    offer_percent: Decimal | None = None


class PricedTotalSchema(BaseModel):
    base_amount: Decimal
    extra_item_amount: Decimal
    delivery_fee: Decimal
    promotion_discount: Decimal
    final_amount: Decimal


class ScheduleResponseSchema(BaseModel):
    dates: list[date]
    time_slots: list[str]


class BookingRequestSchema(QuoteRequestSchema):
    pickup_date: date | None = None
    pickup_time: str | None = None
    address: str | None = None
    notes: str = ""


class BookingResponseSchema(BaseModel):
    order_id: str
    total: PricedTotalSchema
    delivery_date: date


class TimelineStepSchema(BaseModel):
    label: str
    completed: bool


class TimelineResponseSchema(BaseModel):
    order_id: str | None
    status: str | None
    steps: list[TimelineStepSchema]
    progress_percent: int | None
    is_terminal: bool
    unknown_status: str | None = None


class NotificationSchema(BaseModel):
    notification_id: str
    title: str
    body: str
    created_at: float
    is_read: bool
    order_id: str | None = None


class NotificationsResponseSchema(BaseModel):
    notifications: list[NotificationSchema]
    unread_count: int
