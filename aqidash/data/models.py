"""Reading and location records exchanged with external collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentReading:
    """Latest pollution reading for the city nearest to a location."""

    aqi: float
    city_label: str
    captured_at: datetime
    aqi_cn: int = 0
    main_pollutant: Optional[str] = None


@dataclass(frozen=True)
class HourlyReading:
    aqi: float
    captured_at: datetime
