"""Pydantic schemas for intermediate date values.

RFC 2822 strings come in two token layouts. Each layout is a separate
model tagged by ``kind`` so the parser resolves the layout first and
extracts fields from a typed record afterwards.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class WeekdayLayout(_Frozen):
    """``Tue, 26 Jan 2016 13:48:02 GMT+01`` after comma/sign/GMT stripping.

    Attributes:
        weekday: Three-letter weekday token (not validated).
        day: Day of month.
        month: Month name or abbreviation.
        year: Four-digit year.
        time: ``HH:MM:SS`` token.
        offset: Optional numeric zone token such as ``01`` or ``-0500``.
    """

    kind: Literal["weekday"] = "weekday"
    weekday: str
    day: int
    month: str
    year: int
    time: str
    offset: Optional[str] = None


class MonthFirstLayout(_Frozen):
    """``December 17, 1995 03:24:00``."""

    kind: Literal["month_first"] = "month_first"
    month: str
    day: int
    year: int
    time: str


Rfc2822Layout = Annotated[
    Union[WeekdayLayout, MonthFirstLayout], Field(discriminator="kind")
]


class TimeOfDay(_Frozen):
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)


class ZoneOffset(_Frozen):
    """Numeric UTC offset, e.g. ``+01`` or ``-0530``."""

    sign: Literal[1, -1] = 1
    hours: int = Field(ge=0, le=23)
    minutes: int = Field(default=0, ge=0, le=59)

    def as_timedelta(self) -> timedelta:
        return self.sign * timedelta(hours=self.hours, minutes=self.minutes)


class TimeSpanParts(_Frozen):
    """Truncated decomposition of an elapsed time in milliseconds."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def format(self) -> str:
        """Render as ``HH:mm:ss.sss``.

        Example:
            >>> TimeSpanParts(hours=5, minutes=20, seconds=10, milliseconds=453).format()
            '05:20:10.453'
        """
        hh = f"0{self.hours}" if self.hours < 10 else f"{self.hours}"
        mm = f"0{self.minutes}" if self.minutes < 10 else f"{self.minutes}"
        ss = f"0{self.seconds}" if self.seconds < 10 else f"{self.seconds}"
        if self.milliseconds < 10:
            ms = f"00{self.milliseconds}"
        elif self.milliseconds < 100:
            ms = f"0{self.milliseconds}"
        else:
            ms = f"{self.milliseconds}"
        return f"{hh}:{mm}:{ss}.{ms}"
