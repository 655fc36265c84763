from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .core.types import ExecutionMode, Unit
from .engine.parse import DATETIME_FORMAT

DEFAULT_UNIT = "i"
DEFAULT_START = "01.01.1970-00:00:00"
DEFAULT_DELIMITER = ";"


@dataclass(frozen=True)
class AgeConfig:
    """
    Everything a run needs, fixed before the first record is read.

    In stream mode ``start``/``end`` are either 1-based field numbers
    ("0" is the whole record) or literal date-times applied to every record.
    """

    unit: Unit
    start: str
    end: str
    delimiter: str = DEFAULT_DELIMITER
    mode: ExecutionMode = ExecutionMode.SCALAR

    @classmethod
    def from_options(
        cls,
        *,
        unit: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        delimiter: Optional[str] = None,
        stream: bool = False,
        now: Optional[datetime] = None,
    ) -> "AgeConfig":
        """Apply defaults and validate; raises ConfigError for a bad unit."""
        u = Unit.from_selector(unit or DEFAULT_UNIT)
        if not end:
            end = (now or datetime.now()).strftime(DATETIME_FORMAT)
        return cls(
            unit=u,
            start=start or DEFAULT_START,
            end=end,
            delimiter=delimiter or DEFAULT_DELIMITER,
            mode=ExecutionMode.STREAM if stream else ExecutionMode.SCALAR,
        )
