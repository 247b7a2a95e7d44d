"""
Tests for cart quantities, category filtering and cart totals.
"""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from laundry.application.exceptions import NegativeQuantityError, UnknownCatalogItemError
from laundry.application.use_cases.cart import Cart, CartAggregator
from laundry.domain.entities.catalog import Category


def test_cart_total_for_shirts_and_pant(cart: CartAggregator):
    """Shirt x2 at 2000 and Pant x1 at 2500 total 6500."""
    cart.increment("Shirt")
    cart.increment("Shirt")
    cart.increment("Pant")

    assert cart.cart_total() == Decimal("6500")
    assert cart.item_count() == 3


def test_empty_cart_total_is_zero(cart: CartAggregator):
    assert cart.cart_total() == Decimal("0")
    assert cart.lines() == []


def test_decrement_at_one_removes_line(cart: CartAggregator):
    """Decrementing Shirt from 1 drops the line and its price from the total."""
    cart.increment("Shirt")
    cart.increment("Pant")

    assert cart.decrement("Shirt") == 0

    assert [line.item_name for line in cart.lines()] == ["Pant"]
    assert cart.cart_total() == Decimal("2500")


def test_decrement_absent_item_is_noop(cart: CartAggregator):
    cart.increment("Pant")
    cart.decrement("Shirt")

    assert cart.cart.quantity("Shirt") == 0
    assert cart.cart_total() == Decimal("2500")


def test_random_sequences_never_expose_non_positive_lines(cart: CartAggregator):
    """Every observable line stays >= 1 and the total matches the lines exactly."""
    prices = {"Shirt": Decimal("2000"), "Pant": Decimal("2500"), "Suit": Decimal("8000")}
    rng = random.Random(7)
    for _ in range(500):
        name = rng.choice(list(prices))
        if rng.random() < 0.5:
            cart.increment(name)
        else:
            cart.decrement(name)

        lines = cart.lines()
        assert all(line.quantity >= 1 for line in lines)
        assert cart.cart_total() == sum((prices[l.item_name] * l.quantity for l in lines), Decimal("0"))


def test_set_negative_quantity_fails_fast(cart: CartAggregator):
    cart.increment("Shirt")

    with pytest.raises(NegativeQuantityError):
        cart.set_quantity("Shirt", -1)

    assert cart.cart.quantity("Shirt") == 1


def test_set_quantity_zero_removes_line(cart: CartAggregator):
    cart.set_quantity("Suit", 3)
    cart.set_quantity("Suit", 0)

    assert cart.lines() == []


def test_unknown_item_is_rejected(cart: CartAggregator):
    with pytest.raises(UnknownCatalogItemError):
        cart.increment("Hat")

    assert cart.lines() == []


def test_filter_by_category(cart: CartAggregator):
    assert cart.filter_by_category("All") == ["Shirt", "Pant", "Suit", "Blouse"]
    assert cart.filter_by_category(Category.WASH) == ["Shirt", "Pant"]
    assert cart.filter_by_category("dry_clean") == ["Suit"]

    with pytest.raises(ValueError):
        cart.filter_by_category("Shoes")


def test_clear_empties_cart(cart: CartAggregator):
    cart.increment("Shirt")
    cart.set_quantity("Pant", 4)

    cart.clear()

    assert cart.item_count() == 0
    assert cart.cart_total() == Decimal("0")


def test_plain_cart_keeps_insertion_order():
    extras = Cart()
    extras.increment("towels")
    extras.increment("suits")
    extras.increment("towels")

    assert [(l.item_name, l.quantity) for l in extras.lines()] == [("towels", 2), ("suits", 1)]
    assert extras.item_count() == 3
