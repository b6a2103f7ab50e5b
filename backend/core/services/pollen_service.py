"""Pollen gateway: validate, fetch, parse and classify a single request."""
from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Dict, Optional

from backend.core.abstractions import Coordinate, IndexInfo, PollenForecastProvider
from backend.core.errors import BadRequest, ParseError, UpstreamError
from backend.core.severity import UNKNOWN, SeverityBand, classify


logger = logging.getLogger(__name__)

GRASS_CODE = "GRASS"
BODY_PREVIEW_LIMIT = 300


class PollenGateway:
    """Turn a coordinate into a grass pollen severity payload for the UI."""

    def __init__(self, provider: PollenForecastProvider) -> None:
        self.provider = provider

    def get_pollen_severity(self, lat: Any, lng: Any) -> Dict[str, Any]:
        coordinate = parse_coordinate(lat, lng)
        reply = self.provider.fetch_forecast(coordinate)
        if not reply.ok:
            raise UpstreamError(reply.status_code, reply.preview(BODY_PREVIEW_LIMIT))

        try:
            data = _loads_strict(reply.text)
        except ValueError as exc:
            logger.warning("Invalid JSON from %s: %s", self.provider.name, exc)
            raise ParseError(reply.preview(BODY_PREVIEW_LIMIT)) from exc

        index_info = extract_grass_index(data)
        if index_info is None:
            return _build_payload(coordinate, UNKNOWN, None, data)
        return _build_payload(coordinate, classify(index_info.value), index_info, data)


def parse_coordinate(lat: Any, lng: Any) -> Coordinate:
    """Parse raw query values into a :class:`Coordinate`, or raise :class:`BadRequest`."""

    latitude = _parse_float(lat)
    longitude = _parse_float(lng)
    if latitude is None or longitude is None:
        raise BadRequest()
    return Coordinate(lat=latitude, lng=longitude)


def extract_grass_index(data: Any) -> Optional[IndexInfo]:
    """Return today's grass index, or ``None`` when any link is missing."""

    if not isinstance(data, dict):
        return None
    daily = data.get("dailyInfo")
    if not isinstance(daily, list) or not daily:
        return None
    today = daily[0]
    if not isinstance(today, dict):
        return None
    pollen_types = today.get("pollenTypeInfo")
    if not isinstance(pollen_types, list):
        return None
    grass = next(
        (entry for entry in pollen_types if isinstance(entry, dict) and entry.get("code") == GRASS_CODE),
        None,
    )
    if grass is None:
        return None
    raw_index = grass.get("indexInfo")
    if not isinstance(raw_index, dict):
        return None
    return IndexInfo(
        value=raw_index.get("value"),
        category=raw_index.get("category"),
        description=raw_index.get("indexDescription") or "",
        raw=raw_index,
    )


# helpers ------------------------------------------------------------
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_float(value: Any) -> Optional[float]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    result = float(text)
    if not math.isfinite(result):
        return None
    return result


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token!r}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number out of range {token!r}")
    return value


def _loads_strict(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)


def _build_payload(
    coordinate: Coordinate,
    band: SeverityBand,
    index_info: Optional[IndexInfo],
    data: Any,
) -> Dict[str, Any]:
    return {
        "lat": coordinate.lat,
        "lng": coordinate.lng,
        "level": band.level,
        "label": band.label,
        "colour": band.colour,
        "indexValue": index_info.value if index_info else None,
        "category": index_info.category if index_info else None,
        "description": index_info.description if index_info else None,
        "grassIndex": index_info.raw if index_info else None,
        "raw": data,
    }


__all__ = ["PollenGateway", "extract_grass_index", "parse_coordinate"]
