"""Quadratic interpolation over three equally spaced samples."""

import math

from moonriset.models import QuadraticRoots


def find_quadratic_roots(ym: float, yz: float, yp: float) -> QuadraticRoots:
    """Fit a parabola through (-1, ym), (0, yz), (1, yp) and locate its roots.

    Only roots inside [-1, 1] are counted. When a single root is in range it
    is always reported as ``z1``.

    Collinear samples (no curvature) are solved as a straight line; the
    extremum is then reported at x = 0 with value ``yz``.

    Args:
        ym: Value at x = -1.
        yz: Value at x = 0.
        yp: Value at x = +1.

    Returns:
        QuadraticRoots with the in-range root count, both roots and the extremum.
    """
    a = 0.5 * (ym + yp) - yz
    b = 0.5 * (yp - ym)
    c = yz

    if a == 0.0:
        return _linear_root(b, c)

    xe = -b / (2.0 * a)
    ye = (a * xe + b) * xe + c
    z1 = z2 = 0.0
    count = 0

    dis = b * b - 4.0 * a * c
    if dis > 0.0:
        dx = 0.5 * math.sqrt(dis) / abs(a)
        z1 = xe - dx
        z2 = xe + dx
        if abs(z1) <= 1.0:
            count += 1
        if abs(z2) <= 1.0:
            count += 1
        if z1 < -1.0:
            z1 = z2

    return QuadraticRoots(count=count, z1=z1, z2=z2, xe=xe, ye=ye)


def _linear_root(b: float, c: float) -> QuadraticRoots:
    """Degenerate case y = b*x + c."""
    if b == 0.0:
        return QuadraticRoots(count=0, z1=0.0, z2=0.0, xe=0.0, ye=c)
    z = -c / b
    count = 1 if abs(z) <= 1.0 else 0
    return QuadraticRoots(count=count, z1=z, z2=z, xe=0.0, ye=c)
