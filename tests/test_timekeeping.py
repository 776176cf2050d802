from datetime import date

import pytest
from pytz import UnknownTimeZoneError

from moonriset.timekeeping import (
    TimeZoneCalendar,
    days_in_month,
    julian_date,
    julian_day_number,
)


def test_julian_day_number_of_j2000() -> None:
    assert julian_day_number(date(2000, 1, 1)) == 2451545


def test_julian_day_number_of_gregorian_reform() -> None:
    assert julian_day_number(date(1582, 10, 15)) == 2299161


def test_julian_date_of_unix_epoch() -> None:
    assert julian_date(0) == 2440587.5


def test_julian_date_at_j2000_noon() -> None:
    assert julian_date(946728000) == 2451545.0


def test_day_bounds_regular_day() -> None:
    cal = TimeZoneCalendar("Europe/London")
    start, end = cal.day_bounds(2025, 2, 17)
    assert start == 1739750400
    assert end - start == 86400


def test_day_bounds_spring_forward() -> None:
    cal = TimeZoneCalendar("Europe/London")
    start, end = cal.day_bounds(2025, 3, 30)
    assert start == 1743292800
    assert end - start == 82800


def test_day_bounds_fall_back() -> None:
    cal = TimeZoneCalendar("Europe/London")
    start, end = cal.day_bounds(2025, 10, 26)
    assert end - start == 90000


def test_day_bounds_ambiguous_midnight() -> None:
    # Havana falls back from 01:00 CDT to 00:00 CST, so midnight of the 3rd occurs twice
    cal = TimeZoneCalendar("America/Havana")
    assert cal.day_bounds(2024, 11, 2) == (1730520000, 1730606400)
    start, end = cal.day_bounds(2024, 11, 3)
    assert start == 1730606400
    assert end - start == 90000
    assert cal.local_date(start) == date(2024, 11, 3)
    assert cal.strftime(start, "%H:%M %Z") == "00:00 CDT"


def test_consecutive_days_share_bounds_across_fall_back() -> None:
    cal = TimeZoneCalendar("America/Havana")
    for day in range(1, 6):
        assert cal.day_bounds(2024, 11, day)[1] == cal.day_bounds(2024, 11, day + 1)[0]



def test_day_bounds_east_of_greenwich() -> None:
    cal = TimeZoneCalendar("Asia/Tokyo")
    start, _ = cal.day_bounds(2025, 2, 17)
    assert start == 1739750400 - 9 * 3600


def test_local_date_and_strftime() -> None:
    cal = TimeZoneCalendar("Europe/Prague")
    # 2025-02-17 23:30 UTC is already the 18th in Prague
    t = 1739750400 + 23 * 3600 + 1800
    assert cal.local_date(t) == date(2025, 2, 18)
    assert cal.strftime(t, "%H:%M") == "00:30"


def test_unknown_timezone() -> None:
    with pytest.raises(UnknownTimeZoneError):
        TimeZoneCalendar("Mars/Olympus_Mons")


def test_days_in_month() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2025, 12) == 31
