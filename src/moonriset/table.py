"""Day table — the Moon sampled across one local calendar day."""

import logging
import math

from moonriset.lunar import julian_centuries, mini_moon
from moonriset.models import DayTable, Observer, Sample
from moonriset.timekeeping import Calendar, julian_date

_LOGGER = logging.getLogger(__name__)

PREC = 24  # Sub-intervals per day; samples = PREC + 1


def _range(x: float, period: float = 360.0) -> float:
    """Reduce x into [0, period)."""
    return x - period * math.floor(x / period)


def local_sidereal_time(jd: float, longitude: float) -> float:
    """Local Sidereal Time in hours [0, 24).

    Args:
        jd: Julian Date (UT).
        longitude: Observer longitude in degrees, east positive.
    """
    gmst = _range(280.46061837 + 360.98564736629 * (jd - 2451545.0))
    return _range((gmst + longitude) / 15.0, 24.0)


def hour_angle(lst: float, ra: float) -> float:
    """Hour angle in hours, normalized into (-12, 12]."""
    ha = lst - ra
    if ha <= -12:
        ha += 24
    if ha > 12:
        ha -= 24
    return ha


def build_day_table(
    year: int, month: int, day: int, observer: Observer, calendar: Calendar
) -> DayTable:
    """Sample the Moon PREC + 1 times from local midnight to the next local midnight.

    The date is expected to be valid; range checks happen in the caller.

    Args:
        year, month, day: Local calendar date.
        observer: Latitude and longitude of the observer.
        calendar: Calendar for the observer's timezone.

    Returns:
        DayTable with equally spaced samples.
    """
    start, end = calendar.day_bounds(year, month, day)
    tdiff = (end - start) / PREC
    sin_lat = math.sin(math.radians(observer.latitude))
    cos_lat = math.cos(math.radians(observer.latitude))

    samples: list[Sample] = []
    for i in range(PREC + 1):
        timestamp = int(start + i * tdiff)
        jd = julian_date(timestamp)
        lst = local_sidereal_time(jd, observer.longitude)
        ra, dec = mini_moon(julian_centuries(jd))
        ha = hour_angle(lst, ra)
        sin_alt = sin_lat * math.sin(math.radians(dec)) + cos_lat * math.cos(
            math.radians(dec)
        ) * math.cos(math.radians(15.0 * ha))
        samples.append(
            Sample(timestamp=timestamp, lst=lst, ra=ra, dec=dec, ha=ha, sin_alt=sin_alt)
        )

    _LOGGER.debug(
        "Built day table for %04d-%02d-%02d at (%.4f, %.4f): %d samples, tdiff=%.1fs",
        year,
        month,
        day,
        observer.latitude,
        observer.longitude,
        len(samples),
        tdiff,
    )
    return DayTable(
        start=start,
        end=end,
        tdiff=tdiff,
        samples=tuple(samples),
        sin_latitude=sin_lat,
        cos_latitude=cos_lat,
    )
