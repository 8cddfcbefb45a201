"""Shared fixtures for the aqidash test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Tuple

import pytest
import requests

from aqidash.data.models import Coordinates, CurrentReading, HourlyReading


class DummyResp:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._payload


class FakeClient:
    """Stands in for AirVisualClient; raises the given errors instead of returning."""

    def __init__(self, reading=None, history=None, reading_error=None, history_error=None):
        self.reading = reading
        self.history_readings = history or []
        self.reading_error = reading_error
        self.history_error = history_error
        self.calls: List[str] = []

    def nearest_city(self, location):
        self.calls.append("nearest_city")
        if self.reading_error is not None:
            raise self.reading_error
        return self.reading

    def history(self, location):
        self.calls.append("history")
        if self.history_error is not None:
            raise self.history_error
        return self.history_readings


class RecordingNotifier:
    def __init__(self, granted: bool = True):
        self.granted = granted
        self.sent: List[Tuple[str, str]] = []

    def request_permission(self) -> bool:
        return self.granted

    def notify(self, title: str, body: str) -> None:
        self.sent.append((title, body))


def make_reading(aqi: int, city_label: str = "Los Angeles, California USA", aqi_cn: int = 0) -> CurrentReading:
    return CurrentReading(
        aqi=aqi,
        city_label=city_label,
        captured_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        aqi_cn=aqi_cn,
    )


def make_history(values, start_hour: int = 0) -> List[HourlyReading]:
    return [
        HourlyReading(aqi=value, captured_at=datetime(2024, 5, 1, start_hour + i, 0, tzinfo=timezone.utc))
        for i, value in enumerate(values)
    ]


@pytest.fixture
def location() -> Coordinates:
    return Coordinates(34.05, -118.24)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
