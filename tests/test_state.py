from aqidash.data.models import Coordinates
from aqidash.services.alerts import AlertPolicy
from aqidash.services.state import (
    FETCH_ERROR_MESSAGE,
    DashboardState,
    history_received,
    location_acquired,
    location_failed,
    location_label,
    reading_failed,
    reading_received,
    refresh_requested,
    save_custom_location,
    select_city,
    toggle_dark_mode,
)

from conftest import make_history, make_reading


class TestDashboardState:
    def test_initial_state(self):
        state = DashboardState()
        assert state.loading is True
        assert state.alerts == ()
        assert state.reading is None

    def test_location_acquired_clears_error(self):
        state = DashboardState(error="boom")
        state = location_acquired(state, Coordinates(1.0, 2.0))
        assert state.location == Coordinates(1.0, 2.0)
        assert state.error is None
        assert state.loading is True

    def test_location_failed(self):
        state = location_failed(DashboardState(), "Unable to retrieve your location")
        assert state.error == "Unable to retrieve your location"
        assert state.loading is False

    def test_reducers_do_not_mutate(self):
        state = DashboardState()
        toggle_dark_mode(state)
        assert state.dark_mode is False


class TestReadings:
    def test_reading_received(self):
        state = DashboardState(error="old", location=Coordinates(0, 0))
        state = reading_received(state, make_reading(42))
        assert state.reading.aqi == 42
        assert state.loading is False
        assert state.error is None
        assert state.alerts == ()

    def test_unhealthy_then_healthy_clears_alerts(self):
        state = reading_received(DashboardState(), make_reading(101), AlertPolicy.ACCUMULATE)
        assert state.alerts == ("Alert: AQI is 101, which is unhealthy!",)
        state = reading_received(state, make_reading(80), AlertPolicy.ACCUMULATE)
        assert state.alerts == ()

    def test_no_alert_at_100(self):
        state = reading_received(DashboardState(), make_reading(100))
        assert state.alerts == ()

    def test_latest_policy_replaces(self):
        state = reading_received(DashboardState(), make_reading(180))
        state = reading_received(state, make_reading(220))
        assert state.alerts == ("Alert: AQI is 220, which is unhealthy!",)

    def test_reading_failed_keeps_previous_reading(self):
        state = reading_received(DashboardState(), make_reading(42))
        state = reading_failed(refresh_requested(state))
        assert state.error == FETCH_ERROR_MESSAGE
        assert state.loading is False
        assert state.reading.aqi == 42

    def test_history_received(self):
        state = history_received(DashboardState(), make_history([10, 20, 30]))
        assert [reading.aqi for reading in state.history] == [10, 20, 30]
        assert isinstance(state.history, tuple)


class TestCustomLocation:
    def test_refresh_requires_location(self):
        state = DashboardState(loading=False)
        assert refresh_requested(state) is state

    def test_save_blank_name_is_noop(self):
        state = select_city(DashboardState(loading=False), "   ")
        assert save_custom_location(state) is state

    def test_save_name_overrides_label_and_refreshes(self):
        state = DashboardState(location=Coordinates(0, 0), loading=False)
        state = reading_received(state, make_reading(30))
        assert location_label(state) == "Los Angeles, California USA"
        state = save_custom_location(select_city(state, "Chicago"))
        assert state.show_custom_location is True
        assert state.loading is True
        assert location_label(state) == "Chicago"

    def test_label_empty_without_reading(self):
        assert location_label(DashboardState()) == ""
