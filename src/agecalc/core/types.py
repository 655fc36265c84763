from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import ConfigError, ErrorKind


@dataclass(frozen=True)
class DateTimeComponents:
    day: int
    month: int
    year: int  # 4 digits, otherwise leap years come out wrong
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def time_of_day(self) -> tuple[int, int, int]:
        return (self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.day:02d}.{self.month:02d}.{self.year:04d}-"
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


class Unit(Enum):
    """Output unit. Months are 30 days and years 365 days, always."""

    DAYS = ("d", 86400)
    MONTHS = ("m", 2592000)
    YEARS = ("y", 31536000)
    HOURS = ("h", 3600)
    MINUTES = ("i", 60)
    SECONDS = ("s", 1)

    def __init__(self, selector: str, seconds: int) -> None:
        self.selector = selector
        self.seconds = seconds

    @classmethod
    def from_selector(cls, selector: str) -> "Unit":
        for u in cls:
            if u.selector == selector:
                return u
        raise ConfigError(
            ErrorKind.INVALID_UNIT,
            f"Invalid unit {selector!r}. Available: {[u.selector for u in cls]}",
        )


class ExecutionMode(Enum):
    SCALAR = "scalar"
    STREAM = "stream"


@dataclass(frozen=True)
class Ok:
    value: int

    @property
    def ok(self) -> bool:
        return True

    @property
    def field(self) -> int:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind

    @property
    def ok(self) -> bool:
        return False

    @property
    def code(self) -> int:
        return int(self.kind)

    @property
    def field(self) -> int:
        """Value written into a stream record: the negated code."""
        return -int(self.kind)


IntervalResult = Union[Ok, Err]
