"""Shared fixtures for the moonriset tests."""

from collections.abc import Sequence

import pytest

from moonriset.models import DayTable, Sample
from moonriset.table import PREC
from moonriset.timekeeping import TimeZoneCalendar

DAY_START = 1739750400  # 2025-02-17 00:00 UTC


@pytest.fixture
def utc_calendar() -> TimeZoneCalendar:
    return TimeZoneCalendar("UTC")


def make_table(
    sin_alts: Sequence[float],
    has: Sequence[float] | None = None,
    start: int = DAY_START,
    tdiff: float = 3600.0,
) -> DayTable:
    """Synthetic table with the given altitudes and hour angles."""
    assert len(sin_alts) == PREC + 1
    if has is None:
        has = [6.0] * (PREC + 1)
    samples = tuple(
        Sample(
            timestamp=int(start + i * tdiff),
            lst=0.0,
            ra=0.0,
            dec=0.0,
            ha=has[i],
            sin_alt=sin_alts[i],
        )
        for i in range(PREC + 1)
    )
    return DayTable(
        start=start,
        end=int(start + PREC * tdiff),
        tdiff=tdiff,
        samples=samples,
        sin_latitude=0.0,
        cos_latitude=1.0,
    )


OBSERVER_ENV_VARS = ("MOONRISET_LATITUDE", "MOONRISET_LONGITUDE", "MOONRISET_TIMEZONE")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove observer settings from the environment for the duration of a test."""
    for name in OBSERVER_ENV_VARS:
        # Set first so that values loaded from .env files are undone afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
