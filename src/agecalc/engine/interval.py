from __future__ import annotations

from typing import Union

from ..core.calendar import SECONDS_PER_DAY, day_diff, time_of_day_diff
from ..core.errors import AgecalcError, ErrorKind, IntervalError
from ..core.types import DateTimeComponents, Err, IntervalResult, Ok, Unit
from .parse import parse_datetime

DateTimeLike = Union[str, DateTimeComponents]


def _components(x: DateTimeLike) -> DateTimeComponents:
    return x if isinstance(x, DateTimeComponents) else parse_datetime(x)


def total_seconds(start: DateTimeComponents, end: DateTimeComponents) -> int:
    days = day_diff(start, end)
    seconds, borrow = time_of_day_diff(start.time_of_day, end.time_of_day)
    total = (days - int(borrow)) * SECONDS_PER_DAY + seconds
    if total < 0:
        raise IntervalError(ErrorKind.NEGATIVE_INTERVAL, f"end {end} precedes start {start}")
    return total


def convert(seconds: int, unit: Unit) -> int:
    """Whole units in a non-negative number of seconds (fractions dropped)."""
    return seconds // unit.seconds


def interval_seconds(start: DateTimeLike, end: DateTimeLike) -> int:
    return total_seconds(_components(start), _components(end))


def interval(start: DateTimeLike, end: DateTimeLike, unit: Union[str, Unit] = "i") -> int:
    """Elapsed time from start to end in ``unit``; raises AgecalcError subclasses."""
    if not isinstance(unit, Unit):
        unit = Unit.from_selector(unit)
    return convert(interval_seconds(start, end), unit)


def evaluate(start: DateTimeLike, end: DateTimeLike, unit: Unit) -> IntervalResult:
    """Like interval(), but failures come back as Err instead of raising."""
    try:
        return Ok(interval(start, end, unit))
    except AgecalcError as e:
        return Err(e.kind)
