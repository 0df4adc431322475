"""Temperature unit conversion."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

# Every float at or above this magnitude is already a whole number.
_INTEGRAL_THRESHOLD = 2.0**52


def round_half_away(value: float, precision: int = 2) -> float:
    """Round ``value`` to ``precision`` decimals, ties away from zero.

    The built-in :func:`round` rounds ties to even, so the scaled value is
    rounded through :class:`~decimal.Decimal` instead. ``Decimal(float)`` is
    exact, which keeps the result identical to ``round(value * 10**p) / 10**p``
    with conventional rounding.
    """
    ratio = 10**precision
    scaled = value * ratio
    if not math.isfinite(scaled) or abs(scaled) >= _INTEGRAL_THRESHOLD:
        return value
    rounded = Decimal(scaled).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(rounded) / ratio


def to_fahrenheit(celsius: float) -> float:
    return round_half_away(celsius * 1.8 + 32)


def to_kelvin(celsius: float) -> float:
    return round_half_away(celsius + 273)
