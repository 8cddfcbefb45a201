"""Light and dark palettes for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Theme:
    background: str
    surface: str
    text: str
    muted: str
    panel: str
    border: str
    error_background: str
    error_text: str
    button_disabled: str
    toggle_icon: str


LIGHT_THEME = Theme(
    background="#f7fafc",
    surface="#fff",
    text="#1a202c",
    muted="#718096",
    panel="#f7fafc",
    border="#e2e8f0",
    error_background="#fff5f5",
    error_text="#c53030",
    button_disabled="#edf2f7",
    toggle_icon="🌙",
)

DARK_THEME = Theme(
    background="#1a202c",
    surface="#2d3748",
    text="#fff",
    muted="#a0aec0",
    panel="#4a5568",
    border="#4a5568",
    error_background="#742a2a",
    error_text="#feb2b2",
    button_disabled="#4a5568",
    toggle_icon="☀️",
)


def theme_for(dark_mode: bool) -> Theme:
    return DARK_THEME if dark_mode else LIGHT_THEME


def prefers_dark(base: Optional[str]) -> bool:
    """Map a host color-scheme hint such as Streamlit's ``theme.base`` to dark mode."""
    return (base or "").strip().lower() == "dark"
