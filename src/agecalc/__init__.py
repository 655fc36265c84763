"""agecalc public API.

Most callers only need interval() or annotate().
"""

from .api import (
    parse_datetime,
    interval,
    interval_seconds,
    evaluate,
    annotate,
)
from .config import AgeConfig
from .core.errors import AgecalcError, ConfigError, ErrorKind, FormatError, IntervalError
from .core.types import DateTimeComponents, Err, ExecutionMode, Ok, Unit
from .engine.batch import BatchDriver

__all__ = [
    "parse_datetime",
    "interval",
    "interval_seconds",
    "evaluate",
    "annotate",
    "AgeConfig",
    "BatchDriver",
    "DateTimeComponents",
    "ExecutionMode",
    "Unit",
    "Ok",
    "Err",
    "ErrorKind",
    "AgecalcError",
    "ConfigError",
    "FormatError",
    "IntervalError",
]
