import pytest

from jalaali_calendar.julian_day import (
    GregorianDate,
    d2g,
    g2d,
    gregorian_month_length,
    is_gregorian_leap,
)


@pytest.mark.parametrize(
    "gregorian,jdn",
    [
        ((2024, 3, 20), 2460390),
        ((2000, 1, 1), 2451545),
        ((1858, 11, 17), 2400001),
        ((1582, 10, 15), 2299161),
        ((-4713, 11, 24), 0),
    ],
)
def test_known_julian_day_numbers(gregorian, jdn):
    assert g2d(*gregorian) == jdn
    assert d2g(jdn) == gregorian


def test_epoch_of_day_zero():
    assert d2g(0) == GregorianDate(-4713, 11, 24)


def test_lower_bound_of_formula():
    assert d2g(-34839655) == GregorianDate(-100100, 3, 1)
    assert g2d(-100100, 3, 1) == -34839655


def test_day_by_day_round_trip():
    jdn = g2d(-1000, 1, 1)
    for year in range(-1000, 3001):
        for month in range(1, 13):
            for day in range(1, gregorian_month_length(year, month) + 1):
                assert g2d(year, month, day) == jdn
                assert d2g(jdn) == (year, month, day)
                jdn += 1


def test_out_of_range_day_folds_into_next_month():
    assert g2d(2024, 2, 30) == g2d(2024, 3, 1)
    assert g2d(2023, 12, 32) == g2d(2024, 1, 1)
    assert g2d(2024, 3, 0) == g2d(2024, 2, 29)


@pytest.mark.parametrize(
    "year,expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-100, False)],
)
def test_is_gregorian_leap(year, expected):
    assert is_gregorian_leap(year) is expected


def test_gregorian_month_length():
    assert gregorian_month_length(2024, 2) == 29
    assert gregorian_month_length(2023, 2) == 28
    assert gregorian_month_length(2023, 4) == 30
    with pytest.raises(ValueError):
        gregorian_month_length(2023, 13)
