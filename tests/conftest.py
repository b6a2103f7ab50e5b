from __future__ import annotations

import pytest
from django.test import override_settings

from backend.api.views import get_pollen_gateway


POLLEN_TEST_URL = "https://pollen.test/v1/forecast:lookup"


@pytest.fixture
def pollen_settings():
    get_pollen_gateway.cache_clear()
    with override_settings(POLLEN_API_KEY="test-key", POLLEN_API_URL=POLLEN_TEST_URL, POLLEN_API_TIMEOUT=None):
        yield POLLEN_TEST_URL
    get_pollen_gateway.cache_clear()


def forecast_body(value=3, category="Moderate", description="Grass pollen is moderate.", code="GRASS"):
    return {
        "regionCode": "au",
        "dailyInfo": [
            {
                "date": {"year": 2024, "month": 10, "day": 18},
                "pollenTypeInfo": [
                    {"code": "TREE", "indexInfo": {"value": 1, "category": "Very Low"}},
                    {
                        "code": code,
                        "indexInfo": {
                            "code": "UPI",
                            "value": value,
                            "category": category,
                            "indexDescription": description,
                        },
                    },
                ],
            }
        ],
    }


@pytest.fixture
def make_forecast():
    return forecast_body
