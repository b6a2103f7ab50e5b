"""Application config for the pollen API."""
from __future__ import annotations

import logging

from django.apps import AppConfig
from django.conf import settings

from backend.core.config import GatewayConfig


logger = logging.getLogger(__name__)


class ApiConfig(AppConfig):
    name = "backend.api"
    label = "api"

    def ready(self) -> None:
        if not GatewayConfig.from_settings(settings).has_api_key:
            logger.warning("No API_KEY configured – Google Pollen API calls will fail.")
