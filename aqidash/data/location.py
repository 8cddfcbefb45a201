"""Location providers standing in for browser geolocation."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from .models import Coordinates

LOGGER = logging.getLogger(__name__)

IP_LOCATION_URL = "https://ipapi.co/json/"


class LocationUnavailable(RuntimeError):
    """Raised when no coordinates can be determined."""


class LocationProvider(Protocol):
    def current(self) -> Coordinates:
        ...


class StaticLocationProvider:
    """Always reports the configured coordinates."""

    def __init__(self, location: Coordinates) -> None:
        self.location = location

    def current(self) -> Coordinates:
        return self.location


class IpLocationProvider:
    """Approximate the caller's position from their public IP address."""

    def __init__(self, url: str = IP_LOCATION_URL, timeout: float = 10) -> None:
        self.url = url
        self.timeout = timeout

    def current(self) -> Coordinates:
        LOGGER.debug("Requesting IP geolocation from %s", self.url)
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
            return Coordinates(float(payload["latitude"]), float(payload["longitude"]))
        except (requests.RequestException, KeyError, TypeError, ValueError) as exc:
            raise LocationUnavailable(f"IP geolocation failed: {exc}") from exc


def build_location_provider(
    default: Optional[Coordinates] = None,
    timeout: float = 10,
) -> LocationProvider:
    if default is not None:
        return StaticLocationProvider(default)
    return IpLocationProvider(timeout=timeout)
