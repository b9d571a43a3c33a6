"""Jalaali (Persian solar Hijri) and Gregorian calendar conversion."""

from .arithmetic import div, mod
from .exceptions import InvalidJalaaliYear
from .jalaali import JalaaliDate, d2j, j2d
from .julian_day import GregorianDate, d2g, g2d
from .rules import JalaaliCalendarInfo, is_leap_jalaali_year, jal_cal

__version__ = "0.3.0"

__all__ = [
    "GregorianDate",
    "InvalidJalaaliYear",
    "JalaaliCalendarInfo",
    "JalaaliDate",
    "d2g",
    "d2j",
    "div",
    "g2d",
    "is_leap_jalaali_year",
    "j2d",
    "jal_cal",
    "mod",
]
