"""Civil calendar and timezone services used by the rise/set computation.

The computation only needs a handful of calendar operations, collected in the
``Calendar`` protocol so tests can swap in a synthetic time source.
``TimeZoneCalendar`` is the pytz-backed implementation used everywhere else.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Protocol

from pytz import AmbiguousTimeError, NonExistentTimeError, timezone, utc

# Julian Day Number of proleptic Gregorian ordinal 0 (0000-12-31)
_JDN_ORDINAL_OFFSET = 1721425


class Calendar(Protocol):
    """Local-time operations for one timezone."""

    def day_bounds(self, year: int, month: int, day: int) -> tuple[int, int]:
        """Epoch seconds of local midnight and of the following local midnight."""
        ...

    def local_date(self, timestamp: float) -> date:
        """Local calendar date of an instant."""
        ...

    def strftime(self, timestamp: float, fmt: str) -> str:
        """Format an instant in local time."""
        ...

    def today(self) -> date:
        """Current local calendar date."""
        ...


class TimeZoneCalendar:
    """Calendar for an IANA timezone, backed by pytz.

    Raises:
        pytz.UnknownTimeZoneError: If ``tz_name`` is not a known timezone.
    """

    def __init__(self, tz_name: str) -> None:
        self.tz_name = tz_name
        self._tz = timezone(tz_name)

    def __repr__(self) -> str:
        return f"TimeZoneCalendar({self.tz_name!r})"

    def _midnight(self, day: date) -> int:
        naive = datetime(day.year, day.month, day.day)
        try:
            local = self._tz.localize(naive, is_dst=None)
        except AmbiguousTimeError:
            # Midnight repeated by a DST fall-back: the day starts at the first one
            local = self._tz.localize(naive, is_dst=True)
        except NonExistentTimeError:
            # Midnight skipped by a DST gap: the day starts at the first valid instant
            local = self._tz.localize(naive, is_dst=False)
        return int(local.timestamp())

    def day_bounds(self, year: int, month: int, day: int) -> tuple[int, int]:
        start_day = date(year, month, day)
        return self._midnight(start_day), self._midnight(start_day + timedelta(days=1))

    def local_date(self, timestamp: float) -> date:
        return datetime.fromtimestamp(timestamp, self._tz).date()

    def strftime(self, timestamp: float, fmt: str) -> str:
        return datetime.fromtimestamp(timestamp, self._tz).strftime(fmt)

    def today(self) -> date:
        return datetime.now(self._tz).date()


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month."""
    return calendar.monthrange(year, month)[1]


def julian_day_number(day: date) -> int:
    """Gregorian calendar date to Julian Day Number (the JD at noon of that day)."""
    return day.toordinal() + _JDN_ORDINAL_OFFSET


def julian_date(timestamp: int) -> float:
    """Julian Date of a Unix timestamp."""
    dt = datetime.fromtimestamp(timestamp, utc)
    jd = julian_day_number(dt.date()) - 0.5
    jd += dt.hour / 24.0 + dt.minute / 1440.0 + dt.second / 86400.0
    return jd
