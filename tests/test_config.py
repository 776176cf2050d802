import pytest

from moonriset import config
from moonriset.config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    ConfigError,
    Settings,
    load_settings,
    resolve_timezone,
)

pytestmark = pytest.mark.usefixtures("clean_env")


def test_defaults_to_greenwich() -> None:
    settings = load_settings(dotenv=False)
    assert settings == Settings(DEFAULT_LATITUDE, DEFAULT_LONGITUDE, "Europe/London")


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_LATITUDE", "-33.87")
    monkeypatch.setenv("MOONRISET_LONGITUDE", "151.21")
    monkeypatch.setenv("MOONRISET_TIMEZONE", "Australia/Sydney")
    settings = load_settings(dotenv=False)
    assert settings == Settings(-33.87, 151.21, "Australia/Sydney")


def test_timezone_resolved_from_coordinates(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_LATITUDE", "50.08")
    monkeypatch.setenv("MOONRISET_LONGITUDE", "14.42")
    assert load_settings(dotenv=False).timezone == "Europe/Prague"


def test_timezone_resolved_from_explicit_coordinates(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_LATITUDE", "north")
    settings = load_settings(dotenv=False, latitude=35.68, longitude=139.69)
    assert settings == Settings(35.68, 139.69, "Asia/Tokyo")


def test_explicit_latitude_keeps_environment_longitude(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_LONGITUDE", "14.42")
    settings = load_settings(dotenv=False, latitude=50.08)
    assert settings == Settings(50.08, 14.42, "Europe/Prague")


def test_environment_timezone_wins_over_coordinates(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_TIMEZONE", "Etc/GMT")
    assert load_settings(dotenv=False, latitude=35.68, longitude=139.69).timezone == "Etc/GMT"


def test_reads_dotenv_file(monkeypatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("MOONRISET_LATITUDE=66.5\nMOONRISET_TIMEZONE=Etc/GMT\n")
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings.latitude == 66.5
    assert settings.timezone == "Etc/GMT"


def test_bad_number(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_LATITUDE", "north")
    with pytest.raises(ConfigError, match="MOONRISET_LATITUDE"):
        load_settings(dotenv=False)


def test_unknown_timezone(monkeypatch) -> None:
    monkeypatch.setenv("MOONRISET_TIMEZONE", "Europe/Atlantis")
    with pytest.raises(ConfigError, match="Unknown timezone"):
        load_settings(dotenv=False)


def test_fallback_when_no_timezone_found(monkeypatch) -> None:
    class _NoTimezone:
        def timezone_at(self, lat, lng):
            return None

    monkeypatch.setattr(config, "TimezoneFinder", _NoTimezone)
    assert resolve_timezone(0.0, -140.0) == "UTC"
