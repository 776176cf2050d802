"""Moonrise, moon transit and moonset for an observer and a calendar date.

Algorithm: O. Montenbruck & T. Pfleger, *Astronomy on the Personal Computer*,
Springer 1994. The day is sampled PREC + 1 times, and horizon and meridian
crossings are located by quadratic interpolation between samples.
"""

import logging
from datetime import date

from moonriset.config import load_settings
from moonriset.events import find_rise_set, find_transit
from moonriset.models import DayTable, Event, Observer, RiseSetResult
from moonriset.table import build_day_table
from moonriset.timekeeping import Calendar, TimeZoneCalendar, days_in_month

_LOGGER = logging.getLogger(__name__)

MIN_YEAR = 1583
MAX_YEAR = 2500


class MoonrisetError(Exception):
    """Base class for rise/set computation failures."""


class OutOfRangeError(MoonrisetError):
    """Year outside the range the lunar model is accurate for."""


class InvalidDateError(MoonrisetError):
    """Month or day that the Gregorian calendar does not have."""


def validate_date(year: int, month: int, day: int) -> date:
    """Check a calendar date against the supported range.

    Raises:
        OutOfRangeError: Year outside [MIN_YEAR, MAX_YEAR].
        InvalidDateError: Month or day does not exist.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(f"Year {year} outside supported range {MIN_YEAR}-{MAX_YEAR}")
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date {year:04d}-{month:02d}-{day:02d}: {e}") from e


def _solve(table: DayTable, calendar: Calendar) -> RiseSetResult:
    transit = find_transit(table, calendar)
    rise, set_, rise2, set2 = find_rise_set(table, calendar)
    return RiseSetResult(transit=transit, rise=rise, set=set_, rise2=rise2, set2=set2)


def compute_rise_set(
    observer: Observer, day: date, calendar: Calendar | None = None
) -> RiseSetResult:
    """Compute the events of one local calendar day.

    Args:
        observer: Observer location and timezone.
        day: Local calendar date.
        calendar: Calendar service; defaults to pytz for ``observer.timezone``.

    Returns:
        RiseSetResult for that date.

    Raises:
        OutOfRangeError: Year outside [MIN_YEAR, MAX_YEAR].
        InvalidDateError: Month or day does not exist.
    """
    validate_date(day.year, day.month, day.day)
    if calendar is None:
        calendar = TimeZoneCalendar(observer.timezone)
    table = build_day_table(day.year, day.month, day.day, observer, calendar)
    return _solve(table, calendar)


def month_table(
    observer: Observer, year: int, month: int, calendar: Calendar | None = None
) -> list[tuple[date, RiseSetResult]]:
    """Events for every day of a month, in date order."""
    if calendar is None:
        calendar = TimeZoneCalendar(observer.timezone)
    validate_date(year, month, 1)
    return [
        (date(year, month, d), compute_rise_set(observer, date(year, month, d), calendar))
        for d in range(1, days_in_month(year, month) + 1)
    ]


def year_table(
    observer: Observer, year: int, calendar: Calendar | None = None
) -> list[tuple[date, RiseSetResult]]:
    """Events for every day of a year, in date order."""
    if calendar is None:
        calendar = TimeZoneCalendar(observer.timezone)
    rows: list[tuple[date, RiseSetResult]] = []
    for month in range(1, 13):
        rows.extend(month_table(observer, year, month, calendar))
    return rows


class Moonriset:
    """Rise, transit and set of the Moon for one observer.

    The object holds the result for one date at a time. ``set_date`` rebuilds
    the day table and every event in full; on failure the previous state is
    kept. Not thread-safe: use one instance per thread.

    Example:
        >>> mrs = Moonriset(51.48, 0.0, "Europe/London")
        >>> mrs.set_date(2025, 2, 17)
        >>> mrs.rise.hh_mm
        '23:06'
    """

    def __init__(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        timezone: str | None = None,
        calendar: Calendar | None = None,
    ) -> None:
        if latitude is None or longitude is None or timezone is None:
            settings = load_settings(latitude=latitude, longitude=longitude)
            latitude = settings.latitude
            longitude = settings.longitude
            timezone = settings.timezone if timezone is None else timezone

        self._observer = Observer(latitude=latitude, longitude=longitude, timezone=timezone)
        self._owns_calendar = calendar is None
        self._calendar = calendar if calendar is not None else TimeZoneCalendar(timezone)
        self._date: date | None = None
        self._table: DayTable | None = None
        self._result = RiseSetResult()

        today = self._calendar.today()
        self.set_date(today.year, today.month, today.day)

    def __repr__(self) -> str:
        o = self._observer
        return f"Moonriset({o.latitude!r}, {o.longitude!r}, {o.timezone!r}, date={self._date})"

    def set_date(self, year: int, month: int, day: int) -> None:
        """Compute the events for a local calendar date.

        Raises:
            OutOfRangeError: Year outside [MIN_YEAR, MAX_YEAR]; state unchanged.
            InvalidDateError: Nonexistent date; state unchanged.
        """
        try:
            current = validate_date(year, month, day)
        except MoonrisetError as e:
            _LOGGER.warning("Rejected date: %s", e)
            raise

        table = build_day_table(year, month, day, self._observer, self._calendar)
        result = _solve(table, self._calendar)

        self._date = current
        self._table = table
        self._result = result

    def reconfigure(
        self,
        latitude: float | None = None,
        longitude: float | None = None,
        timezone: str | None = None,
    ) -> None:
        """Move the observer and recompute the current date.

        A new timezone rebuilds the calendar this object created itself. A
        calendar passed to the constructor is kept as is; the caller owns it.
        """
        o = self._observer
        new_observer = Observer(
            latitude=o.latitude if latitude is None else latitude,
            longitude=o.longitude if longitude is None else longitude,
            timezone=o.timezone if timezone is None else timezone,
        )
        if self._owns_calendar and new_observer.timezone != o.timezone:
            self._calendar = TimeZoneCalendar(new_observer.timezone)
        self._observer = new_observer
        if self._date is not None:
            self.set_date(self._date.year, self._date.month, self._date.day)

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def current_date(self) -> date | None:
        return self._date

    @property
    def table(self) -> DayTable | None:
        return self._table

    @property
    def result(self) -> RiseSetResult:
        return self._result

    @property
    def transit(self) -> Event:
        return self._result.transit

    @property
    def rise(self) -> Event:
        return self._result.rise

    @property
    def set(self) -> Event:
        return self._result.set

    @property
    def rise2(self) -> Event:
        return self._result.rise2

    @property
    def set2(self) -> Event:
        return self._result.set2
