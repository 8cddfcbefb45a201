"""Access current and historical readings from the IQAir AirVisual API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pandas as pd
import requests

from ..services.advisory import InvalidReading, normalize_reading
from .models import Coordinates, CurrentReading, HourlyReading

LOGGER = logging.getLogger(__name__)

AIRVISUAL_BASE_URL = "https://api.airvisual.com/v2"


class AirVisualError(RuntimeError):
    """Raised when the API answers without usable pollution data."""


def _parse_timestamp(value: object) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    try:
        return pd.to_datetime(value, utc=True).to_pydatetime()
    except (TypeError, ValueError) as exc:
        raise AirVisualError(f"AirVisual timestamp {value!r} is not a valid time") from exc


def _parse_secondary_aqi(value: object) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        LOGGER.warning("Ignoring non-numeric aqicn value %r", value)
        return 0


def format_city_label(data: Dict[str, object]) -> str:
    city = data.get("city") or ""
    state = data.get("state") or ""
    country = data.get("country") or ""
    region = " ".join(part for part in (state, country) if part)
    return ", ".join(part for part in (city, region) if part)


class AirVisualClient:
    """Thin wrapper around the AirVisual nearest-city and history endpoints."""

    def __init__(self, api_key: str, base_url: str = AIRVISUAL_BASE_URL, timeout: float = 30) -> None:
        if not api_key:
            raise ValueError("AirVisual API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, endpoint: str, location: Coordinates) -> dict:
        LOGGER.debug(
            "Requesting AirVisual %s lat=%s lon=%s", endpoint, location.latitude, location.longitude
        )
        params = {"lat": location.latitude, "lon": location.longitude, "key": self.api_key}
        response = requests.get(f"{self.base_url}/{endpoint}", params=params, timeout=self.timeout)
        response.raise_for_status()
        payload = response.json()
        if payload.get("status") != "success":
            detail = (payload.get("data") or {}).get("message") or payload.get("status")
            raise AirVisualError(f"AirVisual {endpoint} request failed: {detail}")
        return payload

    def nearest_city(self, location: Coordinates) -> CurrentReading:
        """Fetch the current reading for the city nearest to ``location``."""
        data = self._request("nearest_city", location).get("data") or {}
        try:
            pollution = data["current"]["pollution"]
            aqi = normalize_reading(pollution["aqius"])
        except (KeyError, TypeError, InvalidReading) as exc:
            raise AirVisualError(f"AirVisual nearest_city payload has no usable pollution data: {exc}") from exc
        return CurrentReading(
            aqi=aqi,
            aqi_cn=_parse_secondary_aqi(pollution.get("aqicn")),
            city_label=format_city_label(data),
            captured_at=_parse_timestamp(pollution.get("ts")),
            main_pollutant=pollution.get("mainus"),
        )

    def history(self, location: Coordinates) -> List[HourlyReading]:
        """Fetch hourly readings for the last 24 hours, oldest first."""
        entries = self._request("history", location).get("data") or []
        readings: List[HourlyReading] = []
        for entry in entries:
            try:
                pollution = entry["pollution"]
                aqi = normalize_reading(pollution["aqius"])
                stamp: Optional[object] = entry.get("timestamp") or pollution.get("ts")
            except (KeyError, TypeError, InvalidReading) as exc:
                raise AirVisualError(f"AirVisual history entry malformed: {exc}") from exc
            readings.append(HourlyReading(aqi=aqi, captured_at=_parse_timestamp(stamp)))
        readings.sort(key=lambda reading: reading.captured_at)
        LOGGER.debug("Received %d hourly readings", len(readings))
        return readings
