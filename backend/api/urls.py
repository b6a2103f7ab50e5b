"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import PollenView

urlpatterns = [
    path("pollen", PollenView.as_view(), name="pollen"),
]
