"""Google Pollen API ``forecast:lookup`` provider."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from backend.core.abstractions import Coordinate, PollenForecastProvider, UpstreamReply
from backend.core.config import GatewayConfig

from .base import HTTPProvider


logger = logging.getLogger(__name__)


class GooglePollenProvider(HTTPProvider, PollenForecastProvider):
    """Fetch the raw one-day forecast; status handling is left to the caller."""

    name = "google-pollen"

    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None) -> None:
        super().__init__(session=session, timeout=config.timeout)
        self.config = config

    def fetch_forecast(self, coordinate: Coordinate) -> UpstreamReply:
        params = {
            "key": self.config.api_key,
            "languageCode": self.config.language_code,
            "days": str(self.config.days),
            "location.latitude": str(coordinate.lat),
            "location.longitude": str(coordinate.lng),
        }
        response = self._request("GET", self.config.base_url, params=params)
        logger.info("Google Pollen status: %s", response.status_code)
        return UpstreamReply(status_code=response.status_code, text=response.text)


__all__ = ["GooglePollenProvider"]
