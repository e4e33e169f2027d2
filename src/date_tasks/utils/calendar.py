"""Gregorian calendar predicates."""

from __future__ import annotations

from datetime import datetime

from .date_parser import as_utc


def is_leap(year: int) -> bool:
    """True for years divisible by 400, or by 4 but not by 100."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def is_leap_year(date: datetime) -> bool:
    """Return whether the UTC calendar year of ``date`` is a leap year.

    Naive datetimes are read as UTC. An aware value near New Year may fall
    in a different UTC year than its local one.

    Example:
        >>> is_leap_year(datetime(2000, 2, 1)), is_leap_year(datetime(1900, 2, 1))
        (True, False)
    """
    return is_leap(as_utc(date).year)
