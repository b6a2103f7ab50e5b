"""Severity bands shown to the client UI and the index → band ladder."""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SeverityBand:
    level: str
    label: str
    colour: str


LOW = SeverityBand(level="low", label="Low pollen", colour="#22c55e")
MODERATE = SeverityBand(level="moderate", label="Moderate pollen", colour="#eab308")
HIGH = SeverityBand(level="high", label="High pollen", colour="#f97316")
EXTREME = SeverityBand(level="extreme", label="Extreme pollen", colour="#ef4444")
UNKNOWN = SeverityBand(level="unknown", label="Pollen level unknown", colour="#64748b")


def classify(value: Any) -> SeverityBand:
    """Map a provider pollen index (nominally 0-5) to a severity band.

    The ladder matches exact integers only: ``1.5`` is neither ``<= 1`` nor
    equal to 2 or 3, so it falls through to :data:`EXTREME` like any value the
    provider is not expected to send (missing, non-numeric, NaN).
    """

    if not _is_number(value):
        return EXTREME
    if value <= 1:
        return LOW
    if value == 2 or value == 3:
        return MODERATE
    if value == 4:
        return HIGH
    return EXTREME


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


__all__ = ["SeverityBand", "LOW", "MODERATE", "HIGH", "EXTREME", "UNKNOWN", "classify"]
