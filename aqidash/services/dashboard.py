"""Wire location, fetch and notification collaborators into state transitions."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..data.airvisual import AirVisualClient, AirVisualError
from ..data.location import LocationProvider, LocationUnavailable
from .alerts import AlertPolicy
from .notifications import Notifier, push_alert
from .state import (
    DashboardState,
    history_received,
    location_acquired,
    location_failed,
    reading_failed,
    reading_received,
)

LOGGER = logging.getLogger(__name__)

LOCATION_ERROR_MESSAGE = "Unable to retrieve your location"
LOCATION_UNSUPPORTED_MESSAGE = "Location lookup is not available"


def acquire_location(state: DashboardState, provider: Optional[LocationProvider]) -> DashboardState:
    if provider is None:
        return location_failed(state, LOCATION_UNSUPPORTED_MESSAGE)
    try:
        location = provider.current()
    except LocationUnavailable as exc:
        LOGGER.warning("Location lookup failed: %s", exc)
        return location_failed(state, LOCATION_ERROR_MESSAGE)
    LOGGER.info("Using location lat=%s lon=%s", location.latitude, location.longitude)
    return location_acquired(state, location)


def refresh(
    state: DashboardState,
    client: AirVisualClient,
    policy: AlertPolicy = AlertPolicy.LATEST,
    notifier: Optional[Notifier] = None,
) -> DashboardState:
    """Fetch the current reading and the 24 hour history for the state's location."""
    if state.location is None:
        return state

    try:
        reading = client.nearest_city(state.location)
    except (requests.RequestException, AirVisualError) as exc:
        LOGGER.error("Error fetching AQI data: %s", exc)
        state = reading_failed(state)
    else:
        LOGGER.info("AQI %s at %s", reading.aqi, reading.city_label)
        state = reading_received(state, reading, policy)
        if notifier is not None:
            push_alert(state, notifier)

    try:
        history = client.history(state.location)
    except (requests.RequestException, AirVisualError) as exc:
        LOGGER.error("Error fetching hourly AQI data: %s", exc)
    else:
        state = history_received(state, history)
    return state
