from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .config import AgeConfig
from .engine.batch import BatchDriver
from .engine.interval import evaluate, interval, interval_seconds
from .engine.parse import parse_datetime

__all__ = ["parse_datetime", "interval", "interval_seconds", "evaluate", "annotate"]


def annotate(
    lines: Iterable[str],
    *,
    start: str = "1",
    end: str = "2",
    unit: str = "i",
    delimiter: Optional[str] = None,
) -> Iterator[str]:
    """Stream-mode shortcut: append the interval to each delimited line."""
    cfg = AgeConfig.from_options(unit=unit, start=start, end=end, delimiter=delimiter, stream=True)
    return BatchDriver(cfg).iter_stream(lines)
