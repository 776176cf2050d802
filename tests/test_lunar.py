import pytest

from moonriset.lunar import (
    LATITUDE_TERMS,
    LONGITUDE_TERMS,
    frac,
    julian_centuries,
    mini_moon,
)

JD_2025_02_01 = 2460707.5


def _sweep(days: int, start_jd: float = JD_2025_02_01) -> list[tuple[float, float]]:
    return [mini_moon(julian_centuries(start_jd + h / 24.0)) for h in range(days * 24)]


def test_frac_keeps_sign() -> None:
    assert frac(2.75) == pytest.approx(0.75)
    assert frac(-1.25) == pytest.approx(-0.25)


def test_julian_centuries_at_epoch() -> None:
    assert julian_centuries(2451545.0) == 0.0
    assert julian_centuries(2451545.0 + 36525.0) == 1.0


def test_series_tables() -> None:
    assert len(LONGITUDE_TERMS) == 14
    assert LONGITUDE_TERMS[0] == (22640.0, (1, 0, 0, 0))
    assert len(LATITUDE_TERMS) == 7
    assert all(len(multipliers) == 4 for _, multipliers in LONGITUDE_TERMS + LATITUDE_TERMS)


def test_right_ascension_in_range_over_a_month() -> None:
    positions = _sweep(28)
    ras = [ra for ra, _ in positions]
    assert all(0.0 <= ra < 24.0 for ra in ras)
    # A sidereal month covers every hour of right ascension
    assert min(ras) < 1.0
    assert max(ras) > 23.0


def test_declination_bounded_by_lunar_inclination() -> None:
    decs = [dec for _, dec in _sweep(28)]
    assert max(abs(d) for d in decs) < 29.5
    # 2025 is close to a major lunar standstill
    assert max(decs) > 25.0
    assert min(decs) < -25.0


def test_negative_centuries_are_accepted() -> None:
    ra, dec = mini_moon(-4.0)  # Year 1600
    assert 0.0 <= ra < 24.0
    assert -29.5 < dec < 29.5


def test_model_is_deterministic() -> None:
    assert mini_moon(0.251) == mini_moon(0.251)
