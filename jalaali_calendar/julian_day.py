"""Proleptic Gregorian calendar <-> Julian Day Number.

Both directions are closed-form integer formulas valid from 1 March of the
year -100100 (JDN -34839655) onwards. A JDN labels the noon of its day.
Years before 1 AD use astronomical numbering, so year 0 is 1 BC.

:func:`g2d` performs no validation. Month and day values outside their usual
ranges are folded into the formula and give a JDN that does not name the
requested date; callers wanting rejection use :func:`gregorian_month_length`
or the strict mode of :mod:`jalaali_calendar.api.converter`.
"""
from __future__ import annotations

from typing import NamedTuple

from .arithmetic import div, mod

__all__ = [
    "GREGORIAN_MONTH_DAYS",
    "GregorianDate",
    "d2g",
    "g2d",
    "gregorian_month_length",
    "is_gregorian_leap",
]

GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class GregorianDate(NamedTuple):
    year: int
    month: int
    day: int


def _march_year_shift(month: int) -> int:
    # January and February count toward the previous March-based year.
    return -div(14 - month, 12)


def g2d(gy: int, gm: int, gd: int) -> int:
    """Return the Julian Day Number of the Gregorian date ``gy-gm-gd``."""

    year = gy + _march_year_shift(gm) + 100100
    jdn = div(year * 1461, 4) + div(153 * mod(gm + 9, 12) + 2, 5) + gd - 34840408
    return jdn - div(div(year, 100) * 3, 4) + 752


def d2g(jdn: int) -> GregorianDate:
    """Return the Gregorian date whose noon is Julian Day ``jdn``."""

    j = 4 * jdn + 139361631
    j = j + div(div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div(mod(j, 1461), 4) * 5 + 308
    gd = div(mod(i, 153), 5) + 1
    gm = mod(div(i, 153), 12) + 1
    gy = div(j, 1461) - 100100 - _march_year_shift(gm)
    return GregorianDate(gy, gm, gd)


def is_gregorian_leap(year: int) -> bool:
    return mod(year, 4) == 0 and (mod(year, 100) != 0 or mod(year, 400) == 0)


def gregorian_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_gregorian_leap(year):
        return 29
    return GREGORIAN_MONTH_DAYS[month - 1]
