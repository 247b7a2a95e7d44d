from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from laundry.domain.entities.order import OrderRecord


class OrderPayloadDTO(BaseModel):
    """Order document as returned by the order backend."""

    model_config = ConfigDict(extra="ignore")

    order_id: str = Field(validation_alias=AliasChoices("orderId", "id", "order_id"))
    status: str = "pending"
    items: list[dict[str, Any]] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, validation_alias=AliasChoices("createdAt", "created_at"))
    total_amount: Decimal | None = Field(default=None, validation_alias=AliasChoices("totalAmount", "total_amount"))
    delivery_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("deliveryDate", "deliveryDateString", "delivery_date"),
    )
    cancelled_from: str | None = Field(default=None, validation_alias=AliasChoices("cancelledFrom", "cancelled_from"))

    @field_validator("delivery_date", mode="before")
    @classmethod
    def _date_part(cls, value: Any) -> Any:
        # Older clients store the full ISO timestamp.
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value

    def to_record(self) -> OrderRecord:
        return OrderRecord(
            order_id=self.order_id,
            status=self.status,
            items=list(self.items),
            created_at=self.created_at,
            total_amount=self.total_amount,
            delivery_date=self.delivery_date,
            cancelled_from=self.cancelled_from,
        )
