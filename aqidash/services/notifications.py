"""Push alerts to the user through an injected notifier."""

from __future__ import annotations

import logging
from typing import Protocol

from .alerts import alert_message
from .state import DashboardState, location_label, notifications_granted

LOGGER = logging.getLogger(__name__)


class Notifier(Protocol):
    def request_permission(self) -> bool:
        ...

    def notify(self, title: str, body: str) -> None:
        ...


def enable_notifications(state: DashboardState, notifier: Notifier) -> DashboardState:
    if not notifier.request_permission():
        LOGGER.info("Notification permission denied")
        return state
    state = notifications_granted(state)
    notifier.notify(
        "AQI Alert Enabled",
        "You will now receive alerts when air quality changes significantly in "
        f"{location_label(state)}.",
    )
    return state


def push_alert(state: DashboardState, notifier: Notifier) -> bool:
    """Send the alert for the latest reading, if any. Returns whether one was sent."""
    if not state.notifications_enabled or state.reading is None:
        return False
    message = alert_message(state.reading.aqi)
    if message is None:
        return False
    notifier.notify("AQI Alert", message)
    return True
