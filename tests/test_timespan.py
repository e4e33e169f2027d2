"""Tests for the timespan formatter."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from date_tasks.schemas import TimeSpanParts
from date_tasks.utils.timespan import split_time_span, time_span_to_string

START = datetime(2000, 1, 1, 10, 0, 0)


@pytest.mark.parametrize(
    ("end", "expected"),
    [
        (datetime(2000, 1, 1, 11, 0, 0), "01:00:00.000"),
        (datetime(2000, 1, 1, 10, 30, 0), "00:30:00.000"),
        (datetime(2000, 1, 1, 10, 0, 20), "00:00:20.000"),
        (datetime(2000, 1, 1, 10, 0, 0, 250_000), "00:00:00.250"),
        (datetime(2000, 1, 1, 15, 20, 10, 453_000), "05:20:10.453"),
        (datetime(2000, 1, 1, 10, 0, 0, 7_000), "00:00:00.007"),
        (datetime(2000, 1, 1, 10, 0, 0, 42_000), "00:00:00.042"),
        (START, "00:00:00.000"),
    ],
)
def test_time_span_to_string(end: datetime, expected: str) -> None:
    assert time_span_to_string(START, end) == expected


def test_spans_over_a_day_keep_counting_hours() -> None:
    end = START + timedelta(days=1, minutes=5)
    assert time_span_to_string(START, end) == "24:05:00.000"


def test_spans_over_99_hours_widen() -> None:
    end = START + timedelta(hours=123, seconds=4)
    assert time_span_to_string(START, end) == "123:00:04.000"


def test_sub_millisecond_is_dropped() -> None:
    end = START + timedelta(milliseconds=1, microseconds=999)
    assert time_span_to_string(START, end) == "00:00:00.001"


def test_aware_values_use_instants() -> None:
    start = datetime(2000, 1, 1, 10, tzinfo=timezone.utc)
    end = datetime(2000, 1, 1, 13, tzinfo=timezone(timedelta(hours=2)))
    assert time_span_to_string(start, end) == "01:00:00.000"


def test_mixed_naive_and_aware() -> None:
    end = datetime(2000, 1, 1, 10, 0, 1, tzinfo=timezone.utc)
    assert time_span_to_string(START, end) == "00:00:01.000"


def test_split_time_span() -> None:
    end = datetime(2000, 1, 1, 15, 20, 10, 453_000)
    assert split_time_span(START, end) == TimeSpanParts(
        hours=5, minutes=20, seconds=10, milliseconds=453
    )
