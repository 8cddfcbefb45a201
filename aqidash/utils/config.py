"""Configuration helpers for credentials and defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from ..data.models import Coordinates
from ..services.alerts import AlertPolicy


def _get_setting(name: str, env_path: Path | None = None) -> Optional[str]:
    value = os.environ.get(name)
    if value:
        return value
    env_path = env_path or Path(".env")
    if env_path.exists():
        return dotenv_values(str(env_path)).get(name) or None
    return None


def load_airvisual_api_key(env_path: Path | None = None) -> str:
    """Load the AirVisual API key from the environment or a .env file."""
    api_key = _get_setting("AIRVISUAL_API_KEY", env_path)
    if not api_key:
        raise RuntimeError("AIRVISUAL_API_KEY must be set in environment variables or .env")
    return api_key


def get_default_location(env_path: Path | None = None) -> Optional[Coordinates]:
    """Return fixed coordinates when both AQIDASH_LATITUDE and AQIDASH_LONGITUDE are set."""
    latitude = _get_setting("AQIDASH_LATITUDE", env_path)
    longitude = _get_setting("AQIDASH_LONGITUDE", env_path)
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise ValueError("AQIDASH_LATITUDE and AQIDASH_LONGITUDE must be set together")
    return Coordinates(float(latitude), float(longitude))


def get_alert_policy(env_path: Path | None = None) -> AlertPolicy:
    value = _get_setting("AQIDASH_ALERT_POLICY", env_path) or AlertPolicy.LATEST.value
    return AlertPolicy(value.strip().lower())


def get_request_timeout(env_path: Path | None = None) -> float:
    return float(_get_setting("AQIDASH_REQUEST_TIMEOUT", env_path) or 30)


def get_log_level(env_path: Path | None = None) -> str:
    return (_get_setting("AQIDASH_LOG_LEVEL", env_path) or "INFO").upper()
