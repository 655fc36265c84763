from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Failure kinds; the value is the code reported at the process boundary."""

    INVALID_UNIT = 1
    TOO_MANY_SEPARATORS = 3
    UNRECOGNIZED_SEGMENT = 4
    BAD_DATE_SHAPE = 5
    BAD_TIME_SHAPE = 6
    NEGATIVE_INTERVAL = 7


class AgecalcError(Exception):
    """Base error."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str = "") -> None:
        self.kind = ErrorKind(kind)
        super().__init__(message or self.kind.name.lower().replace("_", " "))

    @property
    def code(self) -> int:
        return int(self.kind)


class ConfigError(AgecalcError):
    """Raised once up front for a configuration that cannot run (e.g. bad unit)."""


class FormatError(AgecalcError):
    """Raised when a date-time string fails one of the structural checks."""


class IntervalError(AgecalcError):
    """Raised when the end instant precedes the start instant."""
