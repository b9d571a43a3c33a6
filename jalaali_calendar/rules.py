"""Jalaali leap-year rule and New Year placement.

The Jalaali calendar intercalates eight leap days in each 33-year cycle, but
the cycles do not repeat exactly: astronomical observation of the vernal
equinox shifts the pattern at a handful of years. ``BREAKS`` lists those
years; between two consecutive breaks the plain 33-year rule holds.

References:
    http://www.astro.uni.torun.pl/~kb/Papers/EMP/PersianC-EMP.htm
    http://www.fourmilab.ch/documents/calendar/
"""
from __future__ import annotations

from typing import NamedTuple

from .arithmetic import div, mod
from .exceptions import InvalidJalaaliYear

__all__ = [
    "BREAKS",
    "JalaaliCalendarInfo",
    "MAX_YEAR",
    "MIN_YEAR",
    "is_leap_jalaali_year",
    "is_valid_jalaali_date",
    "jal_cal",
    "jalaali_month_length",
]

# Jalaali years starting a new run of the 33-year rule.
BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

MIN_YEAR = BREAKS[0]
MAX_YEAR = BREAKS[-1] - 1


class JalaaliCalendarInfo(NamedTuple):
    """Leap status and New Year placement of one Jalaali year.

    ``leap`` is the number of years since the last leap year (0 to 4, 0 for
    a leap year), ``gy`` the Gregorian year in which the Jalaali year begins
    and ``march`` the day of March of Farvardin 1 in ``gy``.
    """

    leap: int
    gy: int
    march: int


def jal_cal(jy: int) -> JalaaliCalendarInfo:
    """Return the leap offset and New Year date of Jalaali year ``jy``.

    Raises :class:`InvalidJalaaliYear` outside ``MIN_YEAR..MAX_YEAR``.
    """

    if jy < BREAKS[0] or jy >= BREAKS[-1]:
        raise InvalidJalaaliYear(jy, BREAKS[0], BREAKS[-1])

    gy = jy + 621
    leap_j = -14
    jp = BREAKS[0]
    jump = 0
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += div(jump, 33) * 8 + div(mod(jump, 33), 4)
        jp = jm
    n = jy - jp

    # Leap days from AD 621 to the start of jy, Jalaali then Gregorian.
    leap_j += div(n, 33) * 8 + div(mod(n, 33) + 3, 4)
    if mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1
    leap_g = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150

    march = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + div(jump + 4, 33) * 33
    position = mod(n + 1, 33) - 1
    if position == -1:
        # last year of a cycle, five years after its leap year
        leap = 4
    else:
        leap = mod(position, 4)

    return JalaaliCalendarInfo(leap, gy, march)


def is_leap_jalaali_year(year: int) -> bool:
    return jal_cal(year).leap == 0


def jalaali_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12 for Jalaali calendar, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_jalaali_year(year) else 29


def is_valid_jalaali_date(year: int, month: int, day: int) -> bool:
    """Return ``True`` if the date exists; out-of-table years are invalid."""

    if not MIN_YEAR <= year <= MAX_YEAR or not 1 <= month <= 12:
        return False
    return 1 <= day <= jalaali_month_length(year, month)
