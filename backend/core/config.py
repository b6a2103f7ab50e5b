"""Gateway configuration resolved once at startup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_POLLEN_API_URL = "https://pollen.googleapis.com/v1/forecast:lookup"


@dataclass(frozen=True)
class GatewayConfig:
    api_key: str = ""
    base_url: str = DEFAULT_POLLEN_API_URL
    timeout: Optional[float] = None
    language_code: str = "en"
    days: int = 1

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_settings(cls, settings: Any) -> "GatewayConfig":
        return cls(
            api_key=getattr(settings, "POLLEN_API_KEY", "") or "",
            base_url=getattr(settings, "POLLEN_API_URL", None) or DEFAULT_POLLEN_API_URL,
            timeout=getattr(settings, "POLLEN_API_TIMEOUT", None),
        )


__all__ = ["DEFAULT_POLLEN_API_URL", "GatewayConfig"]
