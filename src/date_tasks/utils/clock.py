"""Analog clock geometry.

Hand positions are measured in degrees clockwise from 12 o'clock, using
the UTC time of the given datetime.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Tuple

from .date_parser import as_utc


def _hour12(hour24: int) -> int:
    # 12 stays 12, 13..23 map to 1..11
    return hour24 - 12 if hour24 > 12 else hour24


def hand_angles(date: datetime) -> Tuple[float, float]:
    """Return ``(hour_hand, minute_hand)`` positions in degrees."""
    utc = as_utc(date)
    minute = utc.minute
    return (_hour12(utc.hour) + minute / 60) * 30, minute * 6.0


def angle_between_clock_hands(date: datetime) -> float:
    """Return the angle in radians between the hour and minute hands.

    The hour-minus-minute angle is reflected only when it exceeds 180
    degrees; a negative difference keeps its magnitude, so times just
    before the hour (00:59 gives 324.5 degrees) fall outside ``[0, pi]``.

    Example:
        >>> angle_between_clock_hands(datetime(2016, 3, 5, 18, 0)) == math.pi
        True
    """
    hour_hand, minute_hand = hand_angles(date)
    angle = hour_hand - minute_hand
    if angle > 180:
        angle = 360 - angle
    return abs(angle) * math.pi / 180
