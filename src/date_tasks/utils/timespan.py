"""Elapsed-time formatting."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from ..schemas import TimeSpanParts
from .date_parser import as_utc

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1000


def _elapsed_ms(start: datetime, end: datetime) -> int:
    # naive and aware operands can't be subtracted directly
    if (start.tzinfo is None) != (end.tzinfo is None):
        start, end = as_utc(start), as_utc(end)
    return (end - start) // timedelta(milliseconds=1)


def split_time_span(start: datetime, end: datetime) -> TimeSpanParts:
    """Decompose ``end - start`` into hours, minutes, seconds and milliseconds.

    Each unit is truncated toward zero. Only non-negative spans are
    meaningful.
    """
    dif = _elapsed_ms(start, end)
    hours = math.trunc(dif / _MS_PER_HOUR)
    minutes = math.trunc((dif - hours * _MS_PER_HOUR) / _MS_PER_MINUTE)
    seconds = math.trunc(
        (dif - hours * _MS_PER_HOUR - minutes * _MS_PER_MINUTE) / _MS_PER_SECOND
    )
    millis = abs(
        hours * _MS_PER_HOUR + minutes * _MS_PER_MINUTE + seconds * _MS_PER_SECOND - dif
    )
    return TimeSpanParts(
        hours=hours, minutes=minutes, seconds=seconds, milliseconds=millis
    )


def time_span_to_string(start: datetime, end: datetime) -> str:
    """Return the span between two datetimes as ``HH:mm:ss.sss``.

    Hours beyond 99 widen the first field instead of wrapping.

    Example:
        >>> time_span_to_string(datetime(2000, 1, 1, 10), datetime(2000, 1, 1, 15, 20, 10, 453000))
        '05:20:10.453'
    """
    return split_time_span(start, end).format()
