#!/usr/bin/env python3
"""Air Quality Index dashboard."""

from __future__ import annotations

import html
import logging
from typing import Optional

import plotly.graph_objects as go
import streamlit as st

from aqidash.data.airvisual import AirVisualClient
from aqidash.data.location import LocationProvider, build_location_provider
from aqidash.services.advisory import assess_aqi
from aqidash.services.alerts import AlertPolicy
from aqidash.services.dashboard import acquire_location, refresh
from aqidash.services.insights import history_frame, summarize_history
from aqidash.services.notifications import enable_notifications
from aqidash.services.state import (
    DashboardState,
    location_label,
    refresh_requested,
    save_custom_location,
    select_city,
    toggle_dark_mode,
)
from aqidash.services.theme import Theme, prefers_dark, theme_for
from aqidash.utils.config import (
    get_alert_policy,
    get_default_location,
    get_log_level,
    get_request_timeout,
    load_airvisual_api_key,
)
from aqidash.utils.dates import to_local_time
from aqidash.utils.logging import configure_logging

configure_logging(get_log_level())
LOGGER = logging.getLogger(__name__)

STATE_KEY = "dashboard_state"
CITY_OPTIONS = ["", "New York", "Los Angeles", "Chicago"]


class StreamlitNotifier:
    """Show notifications as Streamlit toasts.

    Clicking the enable button is the user's consent, so permission is always granted.
    """

    def request_permission(self) -> bool:
        return True

    def notify(self, title: str, body: str) -> None:
        st.toast(f"**{title}**\n\n{body}", icon="🔔")


def get_state() -> DashboardState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState(dark_mode=prefers_dark(st.get_option("theme.base")))
    return st.session_state[STATE_KEY]


def set_state(state: DashboardState) -> None:
    st.session_state[STATE_KEY] = state


@st.cache_resource(show_spinner=False)
def get_client(api_key: str, timeout: float) -> AirVisualClient:
    return AirVisualClient(api_key, timeout=timeout)


@st.cache_resource(show_spinner=False)
def get_location_provider(timeout: float) -> LocationProvider:
    return build_location_provider(get_default_location(), timeout=timeout)


def inject_theme(theme: Theme) -> None:
    st.markdown(
        f"""
        <style>
        .stApp {{ background-color: {theme.background}; color: {theme.text}; }}
        .block-container {{
            max-width: 500px; background-color: {theme.surface};
            border-radius: 0.5rem; box-shadow: 0 1px 3px 0 rgba(0, 0, 0, 0.1);
        }}
        .aqi-panel {{ background-color: {theme.panel}; padding: 1rem; border-radius: 0.375rem; margin-bottom: 1rem; }}
        .aqi-muted {{ color: {theme.muted}; font-size: 0.875rem; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_alerts(state: DashboardState) -> None:
    if not state.alerts:
        return
    body = "".join(f"<p>{html.escape(alert)}</p>" for alert in state.alerts)
    st.markdown(
        '<div style="background-color: #f56565; color: #fff; padding: 1rem; '
        f'border-radius: 0.375rem; margin-bottom: 1rem"><h4>Alerts</h4>{body}</div>',
        unsafe_allow_html=True,
    )


def render_error(message: str, theme: Theme) -> None:
    st.markdown(
        f'<div style="background-color: {theme.error_background}; border-left: 4px solid #f56565; '
        f'padding: 1rem; margin-bottom: 1rem; color: {theme.error_text}">⚠️ {html.escape(message)}</div>',
        unsafe_allow_html=True,
    )


def render_reading(state: DashboardState) -> None:
    reading = state.reading
    advisory = assess_aqi(reading.aqi)

    st.markdown(f'<div class="aqi-muted">📍 {html.escape(location_label(state))}</div>', unsafe_allow_html=True)
    st.markdown(
        f'<div style="width: 150px; height: 150px; margin: 1rem auto; border-radius: 9999px; '
        f"display: flex; align-items: center; justify-content: center; background-color: {advisory.color}\">"
        f'<div style="text-align: center; color: #fff"><div style="font-size: 2.25rem; font-weight: bold">'
        f"{reading.aqi}</div><div style=\"font-size: 0.875rem\">{advisory.label}</div></div></div>",
        unsafe_allow_html=True,
    )

    st.markdown(
        f'<div class="aqi-panel"><h4>Health Recommendations</h4><p>{advisory.recommendation}</p></div>',
        unsafe_allow_html=True,
    )
    items = "".join(f"<li>{instruction}</li>" for instruction in advisory.instructions)
    st.markdown(
        f'<div class="aqi-panel"><h4>ℹ️ What to Do</h4><ul>{items}</ul></div>',
        unsafe_allow_html=True,
    )

    us_col, cn_col = st.columns(2)
    us_col.metric("US AQI (PM2.5)", reading.aqi)
    cn_col.metric("China AQI", reading.aqi_cn)

    st.divider()
    label = "Notifications Enabled" if state.notifications_enabled else "Enable Notifications"
    if st.button(f"🔔 {label}", disabled=state.notifications_enabled, use_container_width=True):
        set_state(enable_notifications(state, StreamlitNotifier()))
        st.rerun()

    st.markdown(
        f'<div class="aqi-muted" style="text-align: center">Last updated: {to_local_time(reading.captured_at)}</div>',
        unsafe_allow_html=True,
    )


def build_history_chart(state: DashboardState) -> go.Figure:
    frame = history_frame(state.history)
    figure = go.Figure(
        data=[
            go.Bar(
                x=frame["time"],
                y=frame["aqi"],
                marker_color=frame["color"],
                customdata=frame["category"],
                hovertemplate="%{x}<br>AQI %{y} (%{customdata})<extra></extra>",
            )
        ]
    )
    figure.update_layout(xaxis_title="Time", yaxis_title="US AQI", height=300, margin=dict(l=0, r=0, t=20, b=0))
    return figure


def render_history(state: DashboardState) -> None:
    if not state.history:
        return
    st.subheader("24-Hour AQI Data")
    summary = summarize_history(state.history)
    st.caption(
        f"Peak AQI {summary['peak_aqi']} ({summary['peak_category']}) at "
        f"{to_local_time(summary['peak_time'].to_pydatetime())}, "
        f"average {summary['mean_aqi']:.0f}."
    )
    st.plotly_chart(build_history_chart(state), use_container_width=True)
    lines = "\n".join(
        f"- **{to_local_time(reading.captured_at)}**: AQI {reading.aqi}" for reading in state.history
    )
    st.markdown(lines)


def load_data(state: DashboardState, policy: AlertPolicy) -> Optional[DashboardState]:
    try:
        api_key = load_airvisual_api_key()
    except RuntimeError as exc:
        LOGGER.error("%s", exc)
        st.error(str(exc))
        return None
    timeout = get_request_timeout()
    if state.location is None and state.error is None:
        state = acquire_location(state, get_location_provider(timeout))
    if state.location is not None and state.loading:
        with st.spinner("Loading air quality data..."):
            state = refresh(state, get_client(api_key, timeout), policy, StreamlitNotifier())
    return state


def main() -> None:
    st.set_page_config(page_title="Air Quality Index", page_icon="🌫️", layout="centered")
    state = get_state()
    theme = theme_for(state.dark_mode)
    inject_theme(theme)

    title_col, toggle_col = st.columns([5, 1])
    title_col.title("Air Quality Index")
    if toggle_col.button(theme.toggle_icon, help="Toggle dark/light mode"):
        set_state(toggle_dark_mode(state))
        st.rerun()

    city = st.selectbox(
        "City",
        CITY_OPTIONS,
        format_func=lambda name: name or "Select a city",
        label_visibility="collapsed",
    )
    select_col, refresh_col = st.columns(2)
    if select_col.button("Select", type="primary"):
        state = save_custom_location(select_city(state, city))
    if refresh_col.button("Refresh"):
        state = refresh_requested(state)

    loaded = load_data(state, get_alert_policy())
    if loaded is None:
        return
    state = loaded
    set_state(state)

    render_alerts(state)
    if state.loading:
        st.info("Loading air quality data...")
    if state.error:
        render_error(state.error, theme)
    if state.reading is not None and not state.loading:
        render_reading(state)
    render_history(state)


if __name__ == "__main__":
    main()
