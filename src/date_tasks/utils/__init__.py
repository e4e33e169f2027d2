"""Utility functions for parsing, formatting and clock arithmetic.

This package includes the RFC 2822 and ISO 8601 parsers, the leap-year
predicate, the timespan formatter and the clock-hand angle.
"""

from .calendar import is_leap, is_leap_year
from .clock import angle_between_clock_hands, hand_angles
from .date_parser import (
    MONTHS,
    as_utc,
    month_index,
    parse_iso8601,
    parse_rfc2822,
    resolve_rfc2822_layout,
)
from .timespan import split_time_span, time_span_to_string

__all__ = [
    "MONTHS",
    "as_utc",
    "month_index",
    "parse_iso8601",
    "parse_rfc2822",
    "resolve_rfc2822_layout",
    "is_leap",
    "is_leap_year",
    "split_time_span",
    "time_span_to_string",
    "angle_between_clock_hands",
    "hand_angles",
]
