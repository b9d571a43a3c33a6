"""Jalaali calendar <-> Julian Day Number."""
from __future__ import annotations

from typing import NamedTuple

from .arithmetic import div, mod
from .julian_day import d2g, g2d
from .rules import jal_cal

__all__ = ["JalaaliDate", "d2j", "j2d"]


class JalaaliDate(NamedTuple):
    year: int
    month: int
    day: int


def j2d(jy: int, jm: int, jd: int) -> int:
    """Return the Julian Day Number of the Jalaali date ``jy-jm-jd``.

    Months 1-6 have 31 days and months 7-11 have 30, so the offset from
    Farvardin 1 needs no month table.
    """

    r = jal_cal(jy)
    return g2d(r.gy, 3, r.march) + (jm - 1) * 31 - div(jm, 7) * (jm - 7) + jd - 1


def d2j(jdn: int) -> JalaaliDate:
    """Return the Jalaali date whose noon is Julian Day ``jdn``."""

    gy = d2g(jdn).year
    jy = gy - 621
    r = jal_cal(jy)
    jdn1f = g2d(gy, 3, r.march)

    # Days since Farvardin 1 of jy.
    k = jdn - jdn1f
    if k >= 0:
        if k <= 185:
            return JalaaliDate(jy, 1 + div(k, 31), mod(k, 31) + 1)
        k -= 186
    else:
        # Still in the second half of the previous year.
        jy -= 1
        k += 179
        if r.leap == 1:
            k += 1
    return JalaaliDate(jy, 7 + div(k, 30), mod(k, 30) + 1)
