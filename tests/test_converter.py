import importlib
from datetime import date, datetime

import pytest

from jalaali_calendar import InvalidJalaaliYear
from jalaali_calendar.api.converter import (
    JalaaliDate,
    coerce_gregorian,
    coerce_jalaali,
    convert_date,
    days_in_month,
    gregorian_to_jalaali,
    gregorian_to_jdn,
    is_leap,
    jalaali_to_gregorian,
    jdn_to_jalaali,
)


@pytest.fixture(autouse=True)
def settings():
    module = importlib.import_module("jalaali_calendar.api.settings")
    return importlib.reload(module)


@pytest.mark.parametrize(
    "value,expected",
    [
        (date(2024, 3, 20), "1403-01-01"),
        (datetime(2024, 3, 20, 23, 59), "1403-01-01"),
        ("2023-03-21", "1402-01-01"),
        ((2017, 1, 1), "1395-10-12"),
    ],
)
def test_gregorian_to_jalaali_known_values(value, expected):
    assert gregorian_to_jalaali(value).isoformat() == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (JalaaliDate(1403, 1, 1), date(2024, 3, 20)),
        ("1402-01-01", date(2023, 3, 21)),
        ((1395, 10, 12), date(2017, 1, 1)),
        ((1403, 12, 30), date(2025, 3, 20)),
    ],
)
def test_jalaali_to_gregorian_known_values(value, expected):
    assert jalaali_to_gregorian(value) == expected


@pytest.mark.parametrize(
    "gregorian",
    [
        date(2000, 2, 29),
        date(1991, 8, 6),
        date(2010, 12, 31),
        date(2030, 6, 1),
        date(1000, 1, 1),
        date(3700, 12, 31),
    ],
)
def test_roundtrip_conversion(gregorian):
    jalaali = gregorian_to_jalaali(gregorian)
    assert jalaali.to_gregorian() == gregorian


def test_jalaali_date_jdn_helpers():
    assert JalaaliDate(1403, 1, 1).to_jdn() == 2460390
    assert JalaaliDate.from_jdn(2460390) == JalaaliDate(1403, 1, 1)
    assert jdn_to_jalaali(2460389) == JalaaliDate(1402, 12, 29)
    assert JalaaliDate(1403, 1, 1).isoformat("/") == "1403/01/01"


@pytest.mark.parametrize(
    "args",
    [(1402, 12, 30), (1403, 13, 1), (1403, 7, 31), (1403, 1, 0), (3178, 1, 1)],
)
def test_jalaali_date_rejects_invalid_fields(args):
    with pytest.raises(ValueError):
        JalaaliDate(*args)


def test_coerce_helpers_accept_various_inputs():
    assert coerce_gregorian("2024/03/20") == (2024, 3, 20)
    assert coerce_jalaali("1403/01/01") == (1403, 1, 1)
    assert coerce_gregorian((2022, 11, 5)) == (2022, 11, 5)
    assert coerce_jalaali(JalaaliDate(1402, 12, 29)) == (1402, 12, 29)


def test_coerce_helpers_fail_on_bad_input():
    with pytest.raises(ValueError):
        coerce_gregorian("2024-03")
    with pytest.raises(ValueError):
        coerce_jalaali("1403-farvardin-01")
    with pytest.raises(TypeError):
        coerce_gregorian(20240320)
    with pytest.raises(TypeError):
        coerce_jalaali((1403, 1))


def test_jalaali_to_gregorian_rejects_missing_day():
    with pytest.raises(ValueError):
        jalaali_to_gregorian("1402-12-30")


def test_out_of_table_year_surfaces_invalid_year():
    with pytest.raises(InvalidJalaaliYear):
        jalaali_to_gregorian((3178, 1, 1))
    with pytest.raises(InvalidJalaaliYear):
        is_leap(-62)


def test_permissive_mode_folds_out_of_range_days(settings):
    assert settings.get_validation_mode() == "permissive"
    assert gregorian_to_jdn((2024, 2, 30)) == gregorian_to_jdn((2024, 3, 1))


def test_strict_mode_rejects_out_of_range_days(settings):
    settings.set_validation_mode("strict")
    assert gregorian_to_jdn("2024-02-29") == 2460370
    with pytest.raises(ValueError):
        gregorian_to_jdn((2024, 2, 30))
    with pytest.raises(ValueError):
        gregorian_to_jalaali("2023-13-01")


def test_is_leap_matches_known_years():
    assert is_leap(1399)
    assert not is_leap(1400)
    assert is_leap(1403)


def test_days_in_month():
    assert days_in_month(1403, 1) == 31
    assert days_in_month(1403, 7) == 30
    assert days_in_month(1403, 12) == 30
    assert days_in_month(1404, 12) == 29


def test_convert_date_endpoint():
    assert convert_date("2024-03-20") == "1403-01-01"
    assert convert_date("1403-01-01", to="gregorian") == "2024-03-20"
    assert convert_date("1403/12/30", to="Gregorian") == "2025-03-20"
    with pytest.raises(ValueError):
        convert_date("2024-03-20", to="hebrew")
