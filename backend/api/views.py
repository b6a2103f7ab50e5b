"""REST API views for pollen severity."""
from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.core.config import GatewayConfig
from backend.core.errors import PollenGatewayError, UnexpectedError
from backend.core.providers.google_pollen import GooglePollenProvider
from backend.core.services.pollen_service import PollenGateway


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_pollen_gateway() -> PollenGateway:
    config = GatewayConfig.from_settings(settings)
    return PollenGateway(GooglePollenProvider(config))


class PollenView(APIView):
    """Classify today's grass pollen level for the requested coordinates."""

    permission_classes = [AllowAny]
    authentication_classes: list = []

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the severity payload, or a JSON error body."""
        try:
            payload = get_pollen_gateway().get_pollen_severity(
                request.query_params.get("lat"),
                request.query_params.get("lng"),
            )
        except PollenGatewayError as exc:
            return Response(exc.as_payload(), status=exc.status_code)
        except Exception as exc:  # noqa: BLE001 - every failure must become JSON
            logger.exception("Server error")
            error = UnexpectedError(exc)
            return Response(error.as_payload(), status=error.status_code)
        return Response(payload)
