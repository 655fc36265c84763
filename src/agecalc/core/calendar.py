from __future__ import annotations

from typing import Tuple

from .types import DateTimeComponents

SECONDS_PER_DAY = 86400

# Non-leap; February gets its extra day in days_between_same_year().
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

Hms = Tuple[int, int, int]


def is_leap_year(year: int) -> bool:
    """Legacy rule: every fourth year, no 100/400 exceptions."""
    return year % 4 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def month_length(month: int) -> int:
    """Table lookup; months outside 1..12 have no days."""
    if 1 <= month <= 12:
        return DAYS_IN_MONTH[month - 1]
    return 0


def days_between_same_year(d1: int, m1: int, d2: int, m2: int, year: int) -> int:
    """
    Days from d1.m1 to d2.m2 within one year.

    The leap day is added whenever the start month is January or February,
    regardless of where the end date falls.
    """
    if m1 == m2:
        return d2 - d1

    days = sum(month_length(m) for m in range(m1 + 1, m2))
    days += month_length(m1) - d1
    days += d2
    if is_leap_year(year) and m1 <= 2:
        days += 1
    return days


def day_diff(start: DateTimeComponents, end: DateTimeComponents) -> int:
    """Whole calendar days between the dates of start and end."""
    if start.year == end.year:
        return days_between_same_year(start.day, start.month, end.day, end.month, start.year)

    days = sum(days_in_year(y) for y in range(start.year + 1, end.year))
    days += days_between_same_year(start.day, start.month, 31, 12, start.year)
    days += days_between_same_year(1, 1, end.day, end.month, end.year)
    # Each partial-year count drops the boundary day once; add one back.
    return days + 1


def secs_between(start: Hms, end: Hms) -> int:
    """Seconds from start to end on the same day, end not before start."""
    h1, m1, s1 = start
    h2, m2, s2 = end
    if h1 == h2:
        if m1 == m2:
            return s2 - s1
        return 60 * (m2 - m1 - 1) + (60 - s1) + s2

    seconds = 3600 * (h2 - h1 - 1)
    seconds += 60 * (59 - m1) + (60 - s1)
    seconds += 60 * m2 + s2
    return seconds


def time_of_day_diff(start: Hms, end: Hms) -> Tuple[int, bool]:
    """
    Seconds between two times of day, plus the borrow flag.

    When end is earlier than start the count runs through midnight and the
    caller must take one day off the day difference.
    """
    borrow = tuple(start) > tuple(end)
    if not borrow:
        return secs_between(start, end), False

    seconds = secs_between(start, (23, 59, 59))
    seconds += secs_between((0, 0, 0), end)
    return seconds + 1, True
