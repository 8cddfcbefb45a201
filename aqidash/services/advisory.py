"""AQI classification and health advisories."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Dict, List, Optional, Tuple


class InvalidReading(ValueError):
    """Raised when an AQI value is absent, non-numeric or negative."""


class UnreachableBand(RuntimeError):
    """Raised if the band table fails to cover a validated reading."""


class Band(str, Enum):
    GOOD = "good"
    MODERATE = "moderate"
    UNHEALTHY_FOR_SENSITIVE_GROUPS = "unhealthy_for_sensitive_groups"
    UNHEALTHY = "unhealthy"
    VERY_UNHEALTHY = "very_unhealthy"
    HAZARDOUS = "hazardous"


@dataclass(frozen=True)
class Advisory:
    band: Band
    label: str
    upper_bound: Optional[int]
    recommendation: str
    instructions: Tuple[str, ...]
    color: str


# Ordered by ascending upper bound; the last entry is unbounded.
ADVISORIES: Tuple[Advisory, ...] = (
    Advisory(
        Band.GOOD,
        "Good",
        50,
        "Air quality is good. Enjoy outdoor activities.",
        (
            "Enjoy outdoor activities",
            "Perfect air quality for exercising outside",
            "No restrictions needed",
            "Great day for outdoor picnics and gatherings",
        ),
        "#48bb78",
    ),
    Advisory(
        Band.MODERATE,
        "Moderate",
        100,
        "Air quality is acceptable. Unusually sensitive people should consider reducing prolonged outdoor exertion.",
        (
            "Consider reducing prolonged outdoor exertion if you have respiratory issues",
            "Keep windows closed during peak traffic hours",
            "Stay hydrated when outside",
            "Monitor symptoms if you have asthma or allergies",
        ),
        "#ecc94b",
    ),
    Advisory(
        Band.UNHEALTHY_FOR_SENSITIVE_GROUPS,
        "Unhealthy for Sensitive Groups",
        150,
        "Members of sensitive groups may experience health effects. Consider reducing prolonged outdoor activities.",
        (
            "Sensitive groups should limit outdoor activities",
            "Consider wearing a mask if you have respiratory conditions",
            "Keep windows closed",
            "Use air purifiers indoors if available",
            "Avoid exercising near busy roads",
        ),
        "#ed8936",
    ),
    Advisory(
        Band.UNHEALTHY,
        "Unhealthy",
        200,
        "Everyone may begin to experience health effects. Limit outdoor activities.",
        (
            "Everyone should reduce outdoor activities",
            "Wear masks when outside (N95 or equivalent recommended)",
            "Keep windows and doors closed",
            "Use air purifiers indoors",
            "Consider rescheduling outdoor events",
            "Stay hydrated and watch for symptoms",
        ),
        "#f56565",
    ),
    Advisory(
        Band.VERY_UNHEALTHY,
        "Very Unhealthy",
        300,
        "Health alert: everyone may experience more serious health effects. Avoid outdoor activities.",
        (
            "Avoid all outdoor activities",
            "Wear masks when outside (N95 required)",
            "Keep all windows and doors closed",
            "Run air purifiers continuously",
            "Create a clean air room in your home",
            "Check on elderly neighbors and those with health conditions",
            "Follow local health advisories",
        ),
        "#9f7aea",
    ),
    Advisory(
        Band.HAZARDOUS,
        "Hazardous",
        None,
        "Health warning: everyone may experience serious health effects. Stay indoors and keep activity levels low.",
        (
            "Stay indoors and keep activity levels low",
            "Create a sealed clean air room with purifiers",
            "Wear N95 masks if you must go outside",
            "Follow emergency instructions from local authorities",
            "Seek medical help if experiencing difficulty breathing",
            "Evacuate area if advised by officials",
            "Minimize all physical exertion",
        ),
        "#e53e3e",
    ),
)

ADVISORY_BY_BAND: Dict[Band, Advisory] = {advisory.band: advisory for advisory in ADVISORIES}


def validate_reading(aqi: object) -> Real:
    """Return ``aqi`` unchanged if it is a usable AQI value, else raise InvalidReading."""
    if aqi is None:
        raise InvalidReading("AQI reading is missing")
    if isinstance(aqi, bool) or not isinstance(aqi, Real):
        raise InvalidReading(f"AQI reading must be numeric, got {aqi!r}")
    if not math.isfinite(aqi):
        raise InvalidReading(f"AQI reading must be finite, got {aqi!r}")
    if aqi < 0:
        raise InvalidReading(f"AQI reading must be non-negative, got {aqi!r}")
    return aqi


def normalize_reading(aqi: object) -> Real:
    """Validate ``aqi`` and return whole-number values as ``int``."""
    value = validate_reading(aqi)
    if isinstance(value, int):
        return value
    return int(value) if value == int(value) else value


def classify(aqi: object) -> Band:
    """Return the band of ``aqi``, testing thresholds in ascending order."""
    value = validate_reading(aqi)
    for advisory in ADVISORIES:
        if advisory.upper_bound is None or value <= advisory.upper_bound:
            return advisory.band
    raise UnreachableBand(f"No band covers AQI {value!r}")


def advisory_for_band(band: Band) -> Advisory:
    return ADVISORY_BY_BAND[Band(band)]


def assess_aqi(aqi: object) -> Advisory:
    return advisory_for_band(classify(aqi))


def get_aqi_category(aqi: object) -> str:
    return assess_aqi(aqi).label


def get_health_recommendation(aqi: object) -> str:
    return assess_aqi(aqi).recommendation


def get_detailed_instructions(aqi: object) -> List[str]:
    return list(assess_aqi(aqi).instructions)


def get_display_color(aqi: object) -> str:
    return assess_aqi(aqi).color
