from __future__ import annotations

import pytest

from backend.core.severity import EXTREME, HIGH, LOW, MODERATE, UNKNOWN, classify


@pytest.mark.parametrize("value", [0, 1, 1.0, 0.5])
def test_low_band(value) -> None:
    band = classify(value)

    assert band is LOW
    assert band.colour == "#22c55e"
    assert band.label == "Low pollen"


@pytest.mark.parametrize("value", [2, 3, 2.0])
def test_moderate_band(value) -> None:
    assert classify(value) is MODERATE
    assert classify(value).colour == "#eab308"


def test_high_band() -> None:
    assert classify(4) is HIGH
    assert HIGH.colour == "#f97316"
    assert HIGH.label == "High pollen"


@pytest.mark.parametrize("value", [5, 6, 100])
def test_extreme_band(value) -> None:
    assert classify(value) is EXTREME
    assert classify(value).colour == "#ef4444"


def test_non_integer_between_steps_is_extreme() -> None:
    # Only exact 2/3/4 match the middle of the ladder.
    assert classify(1.5) is EXTREME
    assert classify(2.5) is EXTREME
    assert classify(4.2) is EXTREME


def test_negative_values_are_low() -> None:
    assert classify(-1) is LOW


@pytest.mark.parametrize("value", [None, "3", True, float("nan")])
def test_unexpected_values_fall_through_to_extreme(value) -> None:
    assert classify(value) is EXTREME


def test_unknown_band_constants() -> None:
    assert UNKNOWN.level == "unknown"
    assert UNKNOWN.label == "Pollen level unknown"
    assert UNKNOWN.colour == "#64748b"
