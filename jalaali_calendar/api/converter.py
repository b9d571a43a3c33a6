"""Gregorian <-> Jalaali conversion helpers used by the Frappe app."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Tuple, Union

from .. import jalaali, julian_day, rules
from ..exceptions import InvalidJalaaliYear
from . import settings

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - endpoints stay plain functions
    frappe = None  # type: ignore

__all__ = [
    "JalaaliDate",
    "coerce_gregorian",
    "coerce_jalaali",
    "convert_date",
    "days_in_month",
    "gregorian_to_jalaali",
    "gregorian_to_jdn",
    "is_leap",
    "jalaali_to_gregorian",
    "jdn_to_jalaali",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JalaaliDate:
    """Immutable representation of a Jalaali (Persian) calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not rules.MIN_YEAR <= self.year <= rules.MAX_YEAR:
            raise InvalidJalaaliYear(self.year, rules.BREAKS[0], rules.BREAKS[-1])
        max_day = rules.jalaali_month_length(self.year, self.month)
        if not 1 <= self.day <= max_day:
            raise ValueError(f"day must be in 1..{max_day} for month {self.month}")

    @classmethod
    def from_jdn(cls, jdn: int) -> "JalaaliDate":
        return cls(*jalaali.d2j(jdn))

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_jdn(self) -> int:
        return jalaali.j2d(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return jalaali_to_gregorian(self)


DateParts = Tuple[int, int, int]


def _parse_string(value: str, calendar: str) -> DateParts:
    tokens = value.strip().replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    try:
        year, month, day = (int(part) for part in tokens)
    except ValueError as exc:
        raise ValueError(f"Non-numeric {calendar} date string: {value!r}") from exc
    return year, month, day


def _unpack(value: Iterable[int], expected: str) -> DateParts:
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected {expected}") from exc
    return int(year), int(month), int(day)


def coerce_gregorian(value: Union[str, date, datetime, Iterable[int]]) -> DateParts:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _parse_string(value, "Gregorian")
    return _unpack(value, "a date, string, or iterable of three integers")


def coerce_jalaali(value: Union[str, JalaaliDate, Iterable[int]]) -> DateParts:
    if isinstance(value, JalaaliDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _parse_string(value, "Jalaali")
    return _unpack(value, "a JalaaliDate, string, or iterable of three integers")


def _check_gregorian(gy: int, gm: int, gd: int) -> None:
    max_day = julian_day.gregorian_month_length(gy, gm)
    if not 1 <= gd <= max_day:
        raise ValueError(f"day must be in 1..{max_day} for month {gm}")


def gregorian_to_jdn(value: Union[str, date, datetime, Iterable[int]]) -> int:
    """Return the Julian Day Number of a Gregorian date.

    Out-of-range months and days are rejected only in ``strict`` mode.
    """

    gy, gm, gd = coerce_gregorian(value)
    if settings.is_strict():
        try:
            _check_gregorian(gy, gm, gd)
        except ValueError:
            logger.debug("Rejected Gregorian date %s-%s-%s", gy, gm, gd)
            raise
    return julian_day.g2d(gy, gm, gd)


def jdn_to_jalaali(jdn: int) -> JalaaliDate:
    return JalaaliDate.from_jdn(jdn)


def gregorian_to_jalaali(value: Union[str, date, datetime, Iterable[int]]) -> JalaaliDate:
    return jdn_to_jalaali(gregorian_to_jdn(value))


def jalaali_to_gregorian(value: Union[str, JalaaliDate, Iterable[int]]) -> date:
    jy, jm, jd = coerce_jalaali(value)
    if not isinstance(value, JalaaliDate):
        # validates month and day before the formula sees them
        JalaaliDate(jy, jm, jd)
    gy, gm, gd = julian_day.d2g(jalaali.j2d(jy, jm, jd))
    return date(gy, gm, gd)


def is_leap(year: int) -> bool:
    return rules.is_leap_jalaali_year(year)


def days_in_month(year: int, month: int) -> int:
    return rules.jalaali_month_length(year, month)


def convert_date(value: str, to: str = "jalaali") -> str:
    """Convert an ISO date string to the target calendar and return ISO text."""

    target = (to or "jalaali").strip().lower()
    if target == "jalaali":
        return gregorian_to_jalaali(value).isoformat()
    if target == "gregorian":
        return jalaali_to_gregorian(value).isoformat()
    raise ValueError("to must be either 'jalaali' or 'gregorian'")


def _maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func


convert_date = _maybe_whitelist(convert_date)
