"""Dashboard view state and the pure transitions that update it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from ..data.models import Coordinates, CurrentReading, HourlyReading
from .alerts import AlertPolicy, update_alerts

FETCH_ERROR_MESSAGE = "Error fetching AQI data. Please try again later."


@dataclass(frozen=True)
class DashboardState:
    location: Optional[Coordinates] = None
    reading: Optional[CurrentReading] = None
    history: Tuple[HourlyReading, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    notifications_enabled: bool = False
    dark_mode: bool = False
    custom_location_name: str = ""
    show_custom_location: bool = False
    alerts: Tuple[str, ...] = ()


def location_acquired(state: DashboardState, location: Coordinates) -> DashboardState:
    return replace(state, location=location, error=None, loading=True)


def location_failed(state: DashboardState, message: str) -> DashboardState:
    return replace(state, error=message, loading=False)


def refresh_requested(state: DashboardState) -> DashboardState:
    if state.location is None:
        return state
    return replace(state, loading=True)


def reading_received(
    state: DashboardState,
    reading: CurrentReading,
    policy: AlertPolicy = AlertPolicy.LATEST,
) -> DashboardState:
    return replace(
        state,
        reading=reading,
        loading=False,
        error=None,
        alerts=update_alerts(state.alerts, reading.aqi, policy),
    )


def reading_failed(state: DashboardState, message: str = FETCH_ERROR_MESSAGE) -> DashboardState:
    return replace(state, error=message, loading=False)


def history_received(state: DashboardState, history: Sequence[HourlyReading]) -> DashboardState:
    return replace(state, history=tuple(history))


def notifications_granted(state: DashboardState) -> DashboardState:
    return replace(state, notifications_enabled=True)


def toggle_dark_mode(state: DashboardState) -> DashboardState:
    return replace(state, dark_mode=not state.dark_mode)


def select_city(state: DashboardState, name: str) -> DashboardState:
    return replace(state, custom_location_name=name)


def save_custom_location(state: DashboardState) -> DashboardState:
    """Show the selected city name in place of the API's label and refetch."""
    if not state.custom_location_name.strip():
        return state
    return refresh_requested(replace(state, show_custom_location=True))


def location_label(state: DashboardState) -> str:
    if state.show_custom_location and state.custom_location_name:
        return state.custom_location_name
    if state.reading is not None:
        return state.reading.city_label
    return ""
