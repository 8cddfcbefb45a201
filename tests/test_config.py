import pytest

from aqidash.data.models import Coordinates
from aqidash.services.alerts import AlertPolicy
from aqidash.utils.config import (
    get_alert_policy,
    get_default_location,
    get_log_level,
    get_request_timeout,
    load_airvisual_api_key,
)

ENV_NAMES = [
    "AIRVISUAL_API_KEY",
    "AQIDASH_LATITUDE",
    "AQIDASH_LONGITUDE",
    "AQIDASH_ALERT_POLICY",
    "AQIDASH_REQUEST_TIMEOUT",
    "AQIDASH_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_api_key_from_env(monkeypatch):
    monkeypatch.setenv("AIRVISUAL_API_KEY", "abc")
    assert load_airvisual_api_key() == "abc"


def test_api_key_from_dotenv(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("AIRVISUAL_API_KEY=from-file\n", encoding="utf-8")
    assert load_airvisual_api_key(env_file) == "from-file"


def test_api_key_default_dotenv_in_cwd(tmp_path):
    (tmp_path / ".env").write_text("AIRVISUAL_API_KEY=cwd-key\n", encoding="utf-8")
    assert load_airvisual_api_key() == "cwd-key"


def test_api_key_missing():
    with pytest.raises(RuntimeError):
        load_airvisual_api_key()


def test_defaults():
    assert get_default_location() is None
    assert get_alert_policy() is AlertPolicy.LATEST
    assert get_request_timeout() == 30
    assert get_log_level() == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("AQIDASH_LATITUDE", "40.7")
    monkeypatch.setenv("AQIDASH_LONGITUDE", "-74.0")
    monkeypatch.setenv("AQIDASH_ALERT_POLICY", "Accumulate")
    monkeypatch.setenv("AQIDASH_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("AQIDASH_LOG_LEVEL", "debug")
    assert get_default_location() == Coordinates(40.7, -74.0)
    assert get_alert_policy() is AlertPolicy.ACCUMULATE
    assert get_request_timeout() == 5.0
    assert get_log_level() == "DEBUG"


def test_partial_location(monkeypatch):
    monkeypatch.setenv("AQIDASH_LATITUDE", "40.7")
    with pytest.raises(ValueError):
        get_default_location()


def test_unknown_policy(monkeypatch):
    monkeypatch.setenv("AQIDASH_ALERT_POLICY", "sometimes")
    with pytest.raises(ValueError):
        get_alert_policy()
