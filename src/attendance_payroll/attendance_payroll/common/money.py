from __future__ import annotations

import math
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from ..core.exceptions import ValidationError

_HALF = Decimal("0.5")


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves towards +infinity (-100.5 -> -100)."""
    amount = Decimal(repr(float(value)))
    if amount >= 0:
        return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return int((amount + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def require_finite_amount(value: float, field_name: str) -> float:
    """Reject NaN/inf and negative monetary values."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a number: {value!r}")
    if not math.isfinite(amount):
        raise ValidationError(f"{field_name} must be finite")
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount
