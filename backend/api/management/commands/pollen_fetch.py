"""Management command to fetch pollen severity using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_pollen_gateway
from backend.core.errors import PollenGatewayError
from backend.core.providers.base import ProviderError


class Command(BaseCommand):
    help = "Fetch today's grass pollen severity for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=str, help="Latitude")
        parser.add_argument("--lng", type=str, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            payload = get_pollen_gateway().get_pollen_severity(options.get("lat"), options.get("lng"))
        except PollenGatewayError as exc:
            raise CommandError(json.dumps(exc.as_payload())) from exc
        except ProviderError as exc:
            raise CommandError(f"Pollen API unreachable: {exc}") from exc

        self.stdout.write(json.dumps(payload))
