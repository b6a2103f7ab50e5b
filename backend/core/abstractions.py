"""Core abstractions for the pollen domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A validated latitude/longitude pair. No range checks are applied."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class UpstreamReply:
    """Raw reply from the forecast provider, before any parsing."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def preview(self, limit: int = 300) -> str:
        return self.text[:limit]


@dataclass(frozen=True, slots=True)
class IndexInfo:
    """Grass pollen index for today, as reported by the provider."""

    value: Any
    category: Optional[str]
    description: str
    raw: Dict[str, Any] = field(default_factory=dict)


class PollenForecastProvider(Protocol):
    """A data source capable of returning a raw pollen forecast."""

    name: str

    def fetch_forecast(self, coordinate: Coordinate) -> UpstreamReply:
        """Fetch today's forecast for the provided coordinate."""
        ...


__all__ = ["Coordinate", "IndexInfo", "PollenForecastProvider", "UpstreamReply"]
