"""Default observer settings, read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from pytz import UnknownTimeZoneError, timezone
from timezonefinder import TimezoneFinder

_LOGGER = logging.getLogger(__name__)

DEFAULT_LATITUDE = 51.48  # Royal Observatory, Greenwich
DEFAULT_LONGITUDE = 0.0
FALLBACK_TIMEZONE = "UTC"


class ConfigError(Exception):
    """Invalid configuration value."""


@dataclass(frozen=True)
class Settings:
    """Observer defaults used when the caller does not pass them explicitly."""

    latitude: float
    longitude: float
    timezone: str


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def resolve_timezone(latitude: float, longitude: float) -> str:
    """Timezone name for a location, or UTC when none can be determined (open sea, poles)."""
    tz_name = TimezoneFinder().timezone_at(lat=latitude, lng=longitude)
    if tz_name is None:
        _LOGGER.debug("No timezone at (%s, %s); using %s", latitude, longitude, FALLBACK_TIMEZONE)
        return FALLBACK_TIMEZONE
    return tz_name


def load_settings(
    dotenv: bool = True,
    latitude: float | None = None,
    longitude: float | None = None,
) -> Settings:
    """Read MOONRISET_LATITUDE, MOONRISET_LONGITUDE and MOONRISET_TIMEZONE.

    Coordinates passed in take precedence over the environment, and a timezone
    missing from the environment is looked up from the resulting coordinates.

    Args:
        dotenv: Load a .env file found from the working directory upwards first.
        latitude: Observer latitude overriding MOONRISET_LATITUDE.
        longitude: Observer longitude overriding MOONRISET_LONGITUDE.

    Returns:
        Settings with every field filled in.

    Raises:
        ConfigError: On an unparsable number or an unknown timezone name.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    if latitude is None:
        latitude = _float_env("MOONRISET_LATITUDE", DEFAULT_LATITUDE)
    if longitude is None:
        longitude = _float_env("MOONRISET_LONGITUDE", DEFAULT_LONGITUDE)

    tz_name = os.environ.get("MOONRISET_TIMEZONE", "").strip()
    if tz_name:
        try:
            timezone(tz_name)
        except UnknownTimeZoneError as e:
            raise ConfigError(f"Unknown timezone: {tz_name}") from e
    else:
        tz_name = resolve_timezone(latitude, longitude)

    return Settings(latitude=latitude, longitude=longitude, timezone=tz_name)
