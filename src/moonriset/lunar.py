"""Low-precision lunar position model.

Truncated periodic series after van Flandern & Pulkkinen, in the form given by
Montenbruck & Pfleger, *Astronomy on the Personal Computer* (MiniMoon).
Right ascension is good to about 5 arc minutes and declination to about
1 arc minute for a few centuries either side of J2000.0, which predicts rise
and set times to within a couple of minutes.
"""

import math

ARC = 206264.8  # Arc seconds per radian
SIN_EPS = 0.3978  # Sine of the mean obliquity of the ecliptic (23° 26')
COS_EPS = 0.9175

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Longitude perturbations in arc seconds.
# Each row: (coefficient, multipliers of (l, ls, f, d)).
LONGITUDE_TERMS: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
    (22640.0, (1, 0, 0, 0)),
    (-4586.0, (1, 0, 0, -2)),
    (2370.0, (0, 0, 0, 2)),
    (769.0, (2, 0, 0, 0)),
    (-668.0, (0, 1, 0, 0)),
    (-412.0, (0, 0, 2, 0)),
    (-212.0, (2, 0, 0, -2)),
    (-206.0, (1, 1, 0, -2)),
    (192.0, (1, 0, 0, 2)),
    (-165.0, (0, 1, 0, -2)),
    (-125.0, (0, 0, 0, 1)),
    (-110.0, (1, 1, 0, 0)),
    (148.0, (1, -1, 0, 0)),
    (-55.0, (0, 0, 2, -2)),
)

# Latitude perturbations in arc seconds, same layout.
LATITUDE_TERMS: tuple[tuple[float, tuple[int, int, int, int]], ...] = (
    (-526.0, (0, 0, 1, -2)),
    (44.0, (1, 0, 1, -2)),
    (-31.0, (-1, 0, 1, -2)),
    (-23.0, (0, 1, 1, -2)),
    (11.0, (0, -1, 1, -2)),
    (-25.0, (-2, 0, 1, 0)),
    (21.0, (-1, 0, 1, 0)),
)


def frac(x: float) -> float:
    """Fractional part of x, keeping the sign of x."""
    return math.fmod(x, 1.0)


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def _series(
    terms: tuple[tuple[float, tuple[int, int, int, int]], ...],
    args: tuple[float, float, float, float],
) -> float:
    total = 0.0
    for coefficient, multipliers in terms:
        angle = 0.0
        for k, arg in zip(multipliers, args):
            angle += k * arg
        total += coefficient * math.sin(angle)
    return total


def mini_moon(t: float) -> tuple[float, float]:
    """Geocentric equatorial position of the Moon.

    Args:
        t: Julian centuries since J2000.0 (may be negative).

    Returns:
        (right ascension in hours [0, 24), declination in degrees).
    """
    l0 = frac(0.606433 + 1336.855225 * t)  # Mean longitude (revolutions)
    l = 2 * math.pi * frac(0.374897 + 1325.552410 * t)  # noqa: E741 Moon mean anomaly
    ls = 2 * math.pi * frac(0.993133 + 99.997361 * t)  # Sun's mean anomaly
    d = 2 * math.pi * frac(0.827361 + 1236.853086 * t)  # Mean elongation
    f = 2 * math.pi * frac(0.259086 + 1342.227825 * t)  # Argument of latitude

    args = (l, ls, f, d)
    dl = _series(LONGITUDE_TERMS, args)
    s = f + (dl + 412 * math.sin(2 * f) + 541 * math.sin(ls)) / ARC
    n = _series(LATITUDE_TERMS, args)

    l_moon = 2 * math.pi * frac(l0 + dl / 1296000)
    b_moon = (18520.0 * math.sin(s) + n) / ARC

    # Ecliptic -> equatorial with a fixed obliquity
    cb = math.cos(b_moon)
    x = cb * math.cos(l_moon)
    v = cb * math.sin(l_moon)
    w = math.sin(b_moon)
    y = COS_EPS * v - SIN_EPS * w
    z = SIN_EPS * v + COS_EPS * w
    rho = math.sqrt(1.0 - z * z)

    dec = (180 / math.pi) * math.atan(z / rho)
    ra = (24 / math.pi) * math.atan(y / (x + rho))
    if ra < 0:
        ra += 24.0
    return ra, dec
