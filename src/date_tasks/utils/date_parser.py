"""Date/time parsing helpers.

Provides RFC 2822 and ISO 8601 parsing into timezone-aware datetimes.
RFC 2822 strings are tokenized into one of two tagged layouts before any
field is read; see `resolve_rfc2822_layout`.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Optional

from pydantic import TypeAdapter, ValidationError

from ..config import default_local_zone
from ..errors import DateParseError
from ..schemas import (
    MonthFirstLayout,
    Rfc2822Layout,
    TimeOfDay,
    WeekdayLayout,
    ZoneOffset,
)

logger = logging.getLogger(__name__)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Zero-based month index keyed by lowercase full name and abbreviation.
MONTHS: Dict[str, int] = {
    **{name.lower(): i for i, name in enumerate(_MONTH_NAMES)},
    **{name[:3].lower(): i for i, name in enumerate(_MONTH_NAMES)},
}

_WEEKDAYS = frozenset({"mon", "tue", "wed", "thu", "fri", "sat", "sun"})

_OFFSET_RE = re.compile(r"^(?P<sign>[+-]?)(?P<hours>\d{2})(?::?(?P<minutes>\d{2}))?$")

_layout_adapter: TypeAdapter[Rfc2822Layout] = TypeAdapter(Rfc2822Layout)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` converted to UTC, treating naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def month_index(name: str) -> int:
    """Map an English month name or abbreviation to a zero-based index.

    Raises:
        DateParseError: If the name is not a month.

    Example:
        >>> month_index("December"), month_index("Jan"), month_index("may")
        (11, 0, 4)
    """
    try:
        return MONTHS[name.lower()]
    except KeyError:
        raise DateParseError(f"Unknown month name: {name!r}", {"month": name}) from None


def _parse_offset(token: str) -> ZoneOffset:
    match = _OFFSET_RE.match(token)
    if match is None:
        raise DateParseError(f"Invalid zone offset: {token!r}", {"offset": token})
    try:
        return ZoneOffset(
            sign=-1 if match["sign"] == "-" else 1,
            hours=int(match["hours"]),
            minutes=int(match["minutes"] or 0),
        )
    except ValidationError as exc:
        raise DateParseError(
            f"Zone offset out of range: {token!r}", {"offset": token}
        ) from exc


def _parse_time(token: str) -> TimeOfDay:
    parts = token.split(":")
    if len(parts) != 3:
        raise DateParseError(f"Expected HH:MM:SS, got {token!r}", {"time": token})
    hour, minute, second = parts
    try:
        return TimeOfDay(hour=hour, minute=minute, second=second)
    except ValidationError as exc:
        raise DateParseError(f"Invalid time: {token!r}", {"time": token}) from exc


def resolve_rfc2822_layout(value: str) -> Rfc2822Layout:
    """Tokenize an RFC 2822 string and pick its layout.

    The first comma, the first ``+`` and the ``GMT`` token are removed and the
    rest is split on spaces. A leading weekday abbreviation selects
    `WeekdayLayout`; anything else is read as `MonthFirstLayout`.

    Raises:
        DateParseError: If the token count does not fit either layout.
    """

    cleaned = value.replace(",", "", 1).replace("+", "", 1).replace("GMT", "", 1)
    tokens = [t for t in cleaned.split(" ") if t]
    details = {"value": value, "tokens": tokens}

    if tokens and tokens[0].lower() in _WEEKDAYS:
        if len(tokens) not in (5, 6):
            raise DateParseError("Expected 5 or 6 tokens after the weekday", details)
        raw = {
            "kind": "weekday",
            "weekday": tokens[0],
            "day": tokens[1],
            "month": tokens[2],
            "year": tokens[3],
            "time": tokens[4],
            "offset": tokens[5] if len(tokens) == 6 else None,
        }
    else:
        if len(tokens) != 4:
            raise DateParseError("Expected '<Month> <Day>, <Year> <Time>'", details)
        raw = {
            "kind": "month_first",
            "month": tokens[0],
            "day": tokens[1].rstrip(","),
            "year": tokens[2],
            "time": tokens[3],
        }

    try:
        return _layout_adapter.validate_python(raw)
    except ValidationError as exc:
        raise DateParseError("Non-numeric day or year", details) from exc


def parse_rfc2822(value: str, *, local_tz: Optional[tzinfo] = None) -> datetime:
    """Parse an RFC 2822 date string into a timezone-aware datetime.

    A ``GMT`` token or a numeric zone offset produces a UTC instant, the
    offset being subtracted from the wall-clock fields. Otherwise the fields
    are read as local time in ``local_tz``, falling back to the configured
    ``DATE_TASKS_LOCAL_TIMEZONE`` (read once per process) and then the
    system zone.

    Raises:
        DateParseError: If the string fits neither layout.

    Example:
        >>> parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT").isoformat()
        '2016-01-26T13:48:02+00:00'
        >>> parse_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01").isoformat()
        '1998-05-17T02:00:00+00:00'
    """

    is_gmt = "GMT" in value
    layout = resolve_rfc2822_layout(value)
    month = month_index(layout.month) + 1
    clock = _parse_time(layout.time)

    offset: Optional[ZoneOffset] = None
    if isinstance(layout, WeekdayLayout) and layout.offset:
        offset = _parse_offset(layout.offset)

    try:
        wall = datetime(
            layout.year, month, layout.day, clock.hour, clock.minute, clock.second
        )
    except ValueError as exc:
        raise DateParseError(str(exc), {"value": value}) from exc

    if is_gmt or offset is not None:
        shift = offset.as_timedelta() if offset is not None else timedelta(0)
        logger.debug(
            "Parsed RFC 2822 %s layout as UTC with offset %s", layout.kind, shift
        )
        return (wall - shift).replace(tzinfo=timezone.utc)

    zone = local_tz if local_tz is not None else default_local_zone()
    logger.debug("Parsed RFC 2822 %s layout as local time in %s", layout.kind, zone)
    if zone is None:
        return wall.astimezone()
    return wall.replace(tzinfo=zone)


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 string into a UTC datetime.

    Only the first two characters of the seconds field are read; fractional
    seconds and any zone suffix (``Z``, ``+00:00``) are ignored, so offsets
    other than UTC are not applied.

    Raises:
        DateParseError: If the date or time part is malformed.

    Example:
        >>> parse_iso8601("2016-01-19T08:07:37Z").isoformat()
        '2016-01-19T08:07:37+00:00'
    """

    date_part, sep, time_part = value.partition("T")
    date_fields = date_part.split("-")
    time_fields = time_part.split(":")
    if not sep or len(date_fields) != 3 or len(time_fields) < 3:
        raise DateParseError(
            "Expected '<YYYY>-<MM>-<DD>T<HH>:<MM>:<SS>'", {"value": value}
        )

    year, month, day = date_fields
    hour, minute, seconds = time_fields[:3]
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(seconds[:2]),
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise DateParseError(str(exc), {"value": value}) from exc
