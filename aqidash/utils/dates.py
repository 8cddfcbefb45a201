"""Date utilities."""

from __future__ import annotations

from datetime import datetime


def to_local_time(dt: datetime) -> str:
    """Render ``dt`` as a local wall-clock time, e.g. ``14:05:09``."""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%H:%M:%S")
