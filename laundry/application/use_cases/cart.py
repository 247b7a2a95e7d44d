from __future__ import annotations

import logging
from decimal import Decimal

from laundry.application.exceptions import NegativeQuantityError, UnknownCatalogItemError
from laundry.application.ports.catalog import CatalogPort
from laundry.domain.entities.cart import CartLine
from laundry.domain.entities.catalog import ALL_CATEGORIES, Category


class Cart:
    """Per-session item quantities.

    Only positive quantities are stored: an absent name means quantity 0.
    """

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    def quantity(self, item_name: str) -> int:
        return self._quantities.get(item_name, 0)

    def increment(self, item_name: str) -> int:
        quantity = self._quantities.get(item_name, 0) + 1
        self._quantities[item_name] = quantity
        return quantity

    def decrement(self, item_name: str) -> int:
        current = self._quantities.get(item_name, 0)
        if current <= 1:
            self._quantities.pop(item_name, None)
            return 0
        self._quantities[item_name] = current - 1
        return current - 1

    def set_quantity(self, item_name: str, quantity: int) -> None:
        if quantity < 0:
            raise NegativeQuantityError(f"Quantity for {item_name!r} cannot be negative: {quantity}")
        if quantity == 0:
            self._quantities.pop(item_name, None)
            return
        self._quantities[item_name] = quantity

    def lines(self) -> list[CartLine]:
        return [CartLine(item_name=name, quantity=qty) for name, qty in self._quantities.items()]

    def item_count(self) -> int:
        return sum(self._quantities.values())

    def is_empty(self) -> bool:
        return not self._quantities

    def clear(self) -> None:
        self._quantities.clear()


class CartAggregator:
    """Catalog-backed cart: category filtering and priced totals."""

    def __init__(self, catalog: CatalogPort, cart: Cart | None = None) -> None:
        self._catalog = catalog
        self._cart = cart if cart is not None else Cart()
        self._logger = logging.getLogger(__name__)

    @property
    def cart(self) -> Cart:
        return self._cart

    def increment(self, item_name: str) -> int:
        self._require_item(item_name)
        return self._cart.increment(item_name)

    def decrement(self, item_name: str) -> int:
        return self._cart.decrement(item_name)

    def set_quantity(self, item_name: str, quantity: int) -> None:
        if quantity > 0:
            self._require_item(item_name)
        self._cart.set_quantity(item_name, quantity)

    def filter_by_category(self, category: Category | str) -> list[str]:
        items = self._catalog.list_items()
        if category == ALL_CATEGORIES:
            return [item.name for item in items]
        wanted = Category(category)
        return [item.name for item in items if item.category is wanted]

    def line_total(self, item_name: str) -> Decimal:
        quantity = self._cart.quantity(item_name)
        if quantity == 0:
            return Decimal("0")
        return quantity * self._require_item(item_name).unit_price

    def cart_total(self) -> Decimal:
        return sum(
            (self.line_total(line.item_name) for line in self._cart.lines()),
            Decimal("0"),
        )

    def lines(self) -> list[CartLine]:
        return self._cart.lines()

    def item_count(self) -> int:
        return self._cart.item_count()

    def clear(self) -> None:
        self._cart.clear()

    def _require_item(self, item_name: str):
        item = self._catalog.get_item(item_name)
        if item is None:
            self._logger.warning("Unknown catalog item", extra={"item": item_name})
            raise UnknownCatalogItemError(item_name)
        return item
