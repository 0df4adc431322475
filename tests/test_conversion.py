"""Unit tests for temperature conversion and rounding."""

from __future__ import annotations

import math

import pytest

from services.conversion import round_half_away, to_fahrenheit, to_kelvin


def test_converts_twenty_five_celsius() -> None:
    assert to_fahrenheit(25.0) == 77.0
    assert to_kelvin(25.0) == 298.0


def test_converts_negative_and_fractional_values() -> None:
    assert to_fahrenheit(-40.0) == -40.0
    assert to_fahrenheit(21.3) == 70.34
    assert to_kelvin(-273.0) == 0.0
    assert to_kelvin(18.456) == 291.46


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.125, 0.13),
        (-0.125, -0.13),
        (2.5, 2.5),
        (1.005, 1.0),
    ],
)
def test_round_half_away_from_zero(value: float, expected: float) -> None:
    # 1.005 is stored as 1.00499999..., so it rounds down.
    assert round_half_away(value) == expected


def test_round_half_away_breaks_ties_away_from_zero_unlike_builtin() -> None:
    assert round(0.5) == 0
    assert round_half_away(0.5, precision=0) == 1.0
    assert round_half_away(-0.5, precision=0) == -1.0


@pytest.mark.parametrize(
    "value",
    [0.0, 1.0 / 3.0, -12.345, 98.765432, 1e-9, 123456789.987654, 1e300, -7.005],
)
def test_rounding_is_idempotent(value: float) -> None:
    once = round_half_away(value)
    assert round_half_away(once) == once


def test_non_finite_values_pass_through() -> None:
    assert math.isnan(round_half_away(math.nan))
    assert round_half_away(math.inf) == math.inf
