from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, List

from ..config import AgeConfig
from ..core.types import Err, ExecutionMode, IntervalResult
from .interval import evaluate

logger = logging.getLogger(__name__)


class DriverState(Enum):
    INIT = "init"
    SCALAR = "scalar"
    STREAM = "stream"
    DONE = "done"


def resolve_field(ref: str, fields: List[str], record: str) -> str:
    """A digits-only ref names a field (1-based, 0 = whole record); anything else is literal."""
    if not (ref.isascii() and ref.isdigit()):
        return ref
    idx = int(ref)
    if idx == 0:
        return record
    return fields[idx - 1] if idx <= len(fields) else ""


class BatchDriver:
    """
    Runs one configuration over a single pair or over a stream of records.

    A driver is single-use: Init -> Scalar|Stream -> Done.
    """

    def __init__(self, config: AgeConfig) -> None:
        self.config = config
        self.state = DriverState.INIT

    def _enter(self, mode: ExecutionMode, state: DriverState) -> None:
        if self.state is not DriverState.INIT:
            raise RuntimeError(f"BatchDriver already used (state={self.state.value})")
        if self.config.mode is not mode:
            raise ValueError(f"configured for {self.config.mode.value} mode, not {mode.value}")
        self.state = state

    def run_scalar(self) -> IntervalResult:
        self._enter(ExecutionMode.SCALAR, DriverState.SCALAR)
        try:
            result = evaluate(self.config.start, self.config.end, self.config.unit)
            if isinstance(result, Err):
                logger.debug("scalar pair %r -> %r failed: %s", self.config.start, self.config.end, result.kind.name)
            return result
        finally:
            self.state = DriverState.DONE

    def process_record(self, record: str) -> IntervalResult:
        cfg = self.config
        fields = record.split(cfg.delimiter)
        start = resolve_field(cfg.start, fields, record)
        end = resolve_field(cfg.end, fields, record)
        return evaluate(start, end, cfg.unit)

    def annotate(self, record: str) -> str:
        """The record with its result appended as one more field."""
        return f"{record}{self.config.delimiter}{self.process_record(record).field}"

    def iter_stream(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Lazily yield one annotated line per input line.

        A bad record gets a negative field and processing moves on.
        """
        self._enter(ExecutionMode.STREAM, DriverState.STREAM)
        try:
            for n, line in enumerate(lines, start=1):
                record = line.rstrip("\r\n")
                result = self.process_record(record)
                if isinstance(result, Err):
                    logger.debug("record %d failed: %s (%d)", n, result.kind.name, result.code)
                yield f"{record}{self.config.delimiter}{result.field}"
        finally:
            self.state = DriverState.DONE
