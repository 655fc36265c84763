# tests/test_calendar.py

import pytest
from datetime import date, timedelta

from agecalc.core import calendar as cal
from agecalc.core.types import DateTimeComponents


def _dt(d: date) -> DateTimeComponents:
    return DateTimeComponents(d.day, d.month, d.year)


@pytest.mark.parametrize(
    "d1, m1, d2, m2, year, expected",
    [
        (1, 1, 10, 1, 2024, 9),
        (1, 2, 1, 3, 2024, 29),
        (1, 2, 1, 3, 2023, 28),
        (1, 3, 1, 4, 2024, 31),
        (31, 12, 31, 12, 2023, 0),
        (1, 1, 31, 12, 2023, 364),
        (1, 1, 31, 12, 2024, 365),
    ],
)
def test_days_between_same_year(d1, m1, d2, m2, year, expected):
    assert cal.days_between_same_year(d1, m1, d2, m2, year) == expected


def test_same_year_matches_real_calendar_in_common_year():
    start = date(2023, 1, 1)
    days = [start + timedelta(days=k) for k in range(0, 365, 11)]
    for a in days:
        for b in days:
            if b < a:
                continue
            assert cal.days_between_same_year(a.day, a.month, b.day, b.month, 2023) == (b - a).days


def test_leap_day_added_for_any_start_in_jan_or_feb():
    # Legacy rule: the end date does not have to be past February.
    assert cal.days_between_same_year(1, 1, 15, 2, 2024) == 46
    assert cal.days_between_same_year(1, 1, 15, 2, 2023) == 45


def test_simplified_leap_rule():
    assert cal.is_leap_year(2024)
    assert cal.is_leap_year(1900)
    assert cal.is_leap_year(2000)
    assert not cal.is_leap_year(2023)
    assert cal.days_in_year(1900) == 366


def test_month_length_outside_table():
    assert cal.month_length(0) == 0
    assert cal.month_length(13) == 0
    assert cal.month_length(2) == 28


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (date(2023, 12, 31), date(2024, 1, 1), 1),
        (date(2023, 1, 1), date(2024, 1, 1), 365),
        (date(2024, 1, 1), date(2025, 1, 1), 366),
        (date(2020, 1, 1), date(2024, 1, 1), 1461),
        (date(2023, 3, 1), date(2024, 3, 1), 366),
        (date(2024, 1, 10), date(2024, 1, 10), 0),
    ],
)
def test_day_diff(a, b, expected):
    assert cal.day_diff(_dt(a), _dt(b)) == expected


def test_day_diff_keeps_legacy_century_years():
    # 1900 is not a Gregorian leap year, but counts as one here.
    assert cal.day_diff(_dt(date(1900, 1, 1)), _dt(date(1901, 1, 1))) == 366


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ((10, 0, 0), (10, 0, 30), 30),
        ((10, 5, 10), (10, 7, 5), 115),
        ((10, 59, 30), (12, 0, 15), 3645),
        ((0, 0, 0), (23, 59, 59), 86399),
    ],
)
def test_secs_between(start, end, expected):
    assert cal.secs_between(start, end) == expected


def test_time_of_day_diff_without_borrow():
    assert cal.time_of_day_diff((12, 0, 0), (12, 0, 0)) == (0, False)
    assert cal.time_of_day_diff((8, 15, 0), (17, 45, 30)) == (34230, False)


def test_time_of_day_diff_with_borrow():
    assert cal.time_of_day_diff((23, 0, 0), (1, 0, 0)) == (7200, True)
    assert cal.time_of_day_diff((12, 30, 0), (12, 29, 59)) == (86399, True)
    assert cal.time_of_day_diff((0, 0, 1), (0, 0, 0)) == (86399, True)
