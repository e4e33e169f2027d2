"""date-tasks package.

Standalone date/time helpers: RFC 2822 and ISO 8601 parsing, a leap-year
predicate, a timespan formatter and the angle between analog clock hands.
Every function is pure; the only ambient input is the optional
``DATE_TASKS_LOCAL_TIMEZONE`` used for local-time RFC 2822 values.

Usage example:
    from date_tasks import parse_rfc2822, time_span_to_string
    start = parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
    end = parse_rfc2822("Tue, 26 Jan 2016 15:00:00 GMT")
    time_span_to_string(start, end)  # '01:11:58.000'
"""

from .errors import DateParseError
from .utils import (
    angle_between_clock_hands,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
    time_span_to_string,
)

__all__ = [
    "__version__",
    "DateParseError",
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
]

__version__ = "0.1.0"
