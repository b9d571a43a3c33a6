"""Errors raised by the Jalaali calendar engine."""
from __future__ import annotations

__all__ = ["InvalidJalaaliYear"]


class InvalidJalaaliYear(ValueError):
    """The Jalaali year lies outside the supported break-point table."""

    def __init__(self, year: int, lower: int, upper: int) -> None:
        self.year = year
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid Jalaali year {year}: supported years are {lower}..{upper - 1}"
        )
