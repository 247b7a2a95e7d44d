"""
Tests for booking price computation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from laundry.application.exceptions import NegativeQuantityError
from laundry.application.use_cases.pricing import PricingCalculator, select_service
from laundry.domain.entities.cart import CartLine
from laundry.domain.money import round2, to_decimal


def _calc() -> PricingCalculator:
    return PricingCalculator(
        delivery_fee=Decimal("3.99"),
        extra_item_rate=Decimal("0.5"),
        default_service_rate=Decimal("14.99"),
    )


def test_wash_and_fold_with_three_extra_items():
    """14.99 base, three extra units at half rate, 3.99 delivery -> 41.47."""
    service = select_service("wash_fold", "14.99", 1)
    extras = [CartLine("tShirts", 2), CartLine("towels", 1)]

    total = _calc().price(service, extras)

    assert total.base_amount == Decimal("14.99")
    assert total.extra_item_amount == Decimal("22.485")
    assert total.delivery_fee == Decimal("3.99")
    assert total.final_amount == Decimal("41.47")


def test_surcharge_counts_units_not_item_types():
    service = select_service("wash_fold", "10", 1)

    one_type = _calc().price(service, [CartLine("towels", 4)])
    four_types = _calc().price(service, [CartLine(n, 1) for n in ("a", "b", "c", "d")])

    assert one_type.extra_item_amount == four_types.extra_item_amount == Decimal("20.0")


def test_pricing_is_deterministic():
    service = select_service("wash_fold", "14.99", "2.5")
    extras = [CartLine("suits", 2)]

    first = _calc().price(service, extras, "1.25")
    second = _calc().price(service, extras, "1.25")

    assert first == second
    assert first.final_amount == second.final_amount


def test_zero_quantity_still_pays_delivery():
    service = select_service("wash_fold", "14.99", 0)

    total = _calc().price(service, [])

    assert total.base_amount == Decimal("0")
    assert total.extra_item_amount == Decimal("0")
    assert total.final_amount == Decimal("3.99")


def test_discount_larger_than_total_clamps_to_zero():
    service = select_service("wash_fold", "14.99", 1)

    total = _calc().price(service, [CartLine("towels", 1)], promotion_discount=1000)

    assert total.final_amount == Decimal("0.00")


def test_negative_discount_is_ignored():
    service = select_service("wash_fold", "14.99", 1)

    total = _calc().price(service, [], promotion_discount=-5)

    assert total.promotion_discount == Decimal("0")
    assert total.final_amount == Decimal("18.98")


def test_offer_percent_discount():
    service = select_service("wash_fold", "20.00", 2)
    calc = _calc()

    discount = calc.offer_discount(service, 10)
    total = calc.price(service, [], discount)

    assert discount == Decimal("4.0000")
    assert total.final_amount == Decimal("39.99")
    assert calc.offer_discount(service, 150) == Decimal("40.00")


def test_extra_items_without_service_use_standard_wash_rate():
    total = _calc().price(None, [CartLine("towels", 3)])

    assert total.base_amount == Decimal("0")
    assert total.extra_item_amount == Decimal("22.485")
    assert total.final_amount == Decimal("26.48")
    assert _calc().extra_item_unit_price(None) == Decimal("7.495")


def test_negative_extra_line_fails_fast():
    with pytest.raises(NegativeQuantityError):
        _calc().price(select_service("wash_fold", "14.99", 1), [CartLine("towels", -3)])


def test_select_service_rejects_negative_values():
    with pytest.raises(ValueError):
        select_service("wash_fold", "-1", 1)
    with pytest.raises(ValueError):
        select_service("wash_fold", "14.99", -2)


def test_round2_is_half_up():
    assert round2(Decimal("41.465")) == Decimal("41.47")
    assert round2(Decimal("0.005")) == Decimal("0.01")
    assert round2(Decimal("2.344")) == Decimal("2.34")


def test_to_decimal_keeps_float_text():
    assert to_decimal(14.99) == Decimal("14.99")
    with pytest.raises(TypeError):
        to_decimal(True)
