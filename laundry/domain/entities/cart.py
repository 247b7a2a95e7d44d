from __future__ import annotations

from dataclasses import dataclass


class NegativeQuantityError(ValueError):
    """Raised when a caller tries to store a negative quantity in a cart."""
    pass


@dataclass(frozen=True)
class CartLine:
    item_name: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise NegativeQuantityError(f"Quantity for {self.item_name!r} cannot be negative: {self.quantity}")
