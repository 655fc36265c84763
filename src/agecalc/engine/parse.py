from __future__ import annotations

import re
from typing import List, Tuple

from ..core.errors import ErrorKind, FormatError
from ..core.types import DateTimeComponents

DEFAULT_DATE = "01.01.1970"
DEFAULT_TIME = "00:00:00"
DATETIME_FORMAT = "%d.%m.%Y-%H:%M:%S"

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*\Z")


def _split(s: str, sep: str) -> List[str]:
    # An empty string has no fields at all.
    return s.split(sep) if s else []


def _three_ints(part: str, sep: str, kind: ErrorKind) -> Tuple[int, int, int]:
    fields = _split(part, sep)
    if len(fields) != 3:
        raise FormatError(kind, f"{part!r} does not split into 3 fields on {sep!r}")
    if not all(_INT_RE.match(f) for f in fields):
        raise FormatError(kind, f"{part!r} has a non-integer field")
    a, b, c = (int(f) for f in fields)
    return a, b, c


def split_segments(s: str) -> Tuple[str, str]:
    """Return (date_part, time_part), filling in the missing half with its default."""
    segments = _split(s, "-")
    if len(segments) == 2:
        return segments[0], segments[1]
    if len(segments) != 1:
        raise FormatError(ErrorKind.TOO_MANY_SEPARATORS, f"{s!r} must contain at most one '-'")

    seg = segments[0]
    if "." in seg:
        return seg, DEFAULT_TIME
    if ":" in seg:
        return DEFAULT_DATE, seg
    raise FormatError(ErrorKind.UNRECOGNIZED_SEGMENT, f"{s!r} is neither a date nor a time")


def parse_datetime(s: str) -> DateTimeComponents:
    """
    Parse ``dd.mm.yyyy-hh:mm:ss`` or one of its halves.

    A lone date gets time 00:00:00; a lone time gets date 01.01.1970. Field
    values are not range-checked.
    """
    date_part, time_part = split_segments(s)
    day, month, year = _three_ints(date_part, ".", ErrorKind.BAD_DATE_SHAPE)
    hour, minute, second = _three_ints(time_part, ":", ErrorKind.BAD_TIME_SHAPE)
    return DateTimeComponents(day, month, year, hour, minute, second)
