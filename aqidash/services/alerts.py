"""Alert rules for unhealthy readings."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple

from .advisory import normalize_reading

ALERT_THRESHOLD = 100


class AlertPolicy(str, Enum):
    """How a new reading updates the list of visible alerts.

    ``LATEST`` keeps at most the alert for the most recent reading.
    ``ACCUMULATE`` appends every unhealthy reading without de-duplication and
    clears the whole list as soon as a reading is back at or below the
    threshold.
    """

    LATEST = "latest"
    ACCUMULATE = "accumulate"


def alert_message(aqi: object) -> Optional[str]:
    value = normalize_reading(aqi)
    if value > ALERT_THRESHOLD:
        return f"Alert: AQI is {value}, which is unhealthy!"
    return None


def update_alerts(
    alerts: Sequence[str],
    aqi: object,
    policy: AlertPolicy = AlertPolicy.LATEST,
) -> Tuple[str, ...]:
    message = alert_message(aqi)
    if message is None:
        return ()
    if AlertPolicy(policy) is AlertPolicy.ACCUMULATE:
        return tuple(alerts) + (message,)
    return (message,)
