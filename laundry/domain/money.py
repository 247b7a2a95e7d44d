"""Currency arithmetic helpers.

Amounts are carried as ``Decimal`` end to end; floats only enter at the
boundary and are converted through ``str`` so ``14.99`` stays ``14.99``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary amount")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round2(amount: Decimal) -> Decimal:
    """Round to two places, half-up, as shown on receipts."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
