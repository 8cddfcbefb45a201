"""Summaries of the 24 hour reading history."""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from ..data.models import HourlyReading
from .advisory import assess_aqi

HISTORY_COLUMNS = ["time", "aqi", "category", "color"]


def history_frame(readings: Sequence[HourlyReading]) -> pd.DataFrame:
    if not readings:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    rows = []
    for reading in readings:
        advisory = assess_aqi(reading.aqi)
        rows.append(
            {
                "time": pd.Timestamp(reading.captured_at),
                "aqi": reading.aqi,
                "category": advisory.label,
                "color": advisory.color,
            }
        )
    return pd.DataFrame(rows).sort_values("time").reset_index(drop=True)


def summarize_history(readings: Sequence[HourlyReading]) -> Dict[str, object]:
    frame = history_frame(readings)
    if frame.empty:
        return {"message": "No hourly readings available for this location."}
    latest = frame.iloc[-1]
    peak = frame.loc[frame["aqi"].idxmax()]
    return {
        "latest_time": latest["time"],
        "latest_aqi": int(latest["aqi"]),
        "latest_category": latest["category"],
        "peak_time": peak["time"],
        "peak_aqi": int(peak["aqi"]),
        "peak_category": peak["category"],
        "mean_aqi": float(frame["aqi"].mean()),
        "record_count": int(len(frame)),
    }
