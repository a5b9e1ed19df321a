"""Angles and unit vectors for the hands of an analogue clock."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, time
from typing import Union

ClockTime = Union[datetime, time]


@dataclass(frozen=True)
class Point:
    """A two dimensional Cartesian coordinate."""

    x: float
    y: float


def _angle(value: int, half_turn: float) -> float:
    # Zero units is the top of the clock; avoid dividing by zero.
    if value == 0:
        return 0.0
    return math.pi / (half_turn / float(value))


def seconds_in_radians(t: ClockTime) -> float:
    """Angle of the second hand, clockwise from twelve."""
    return _angle(t.second, 30)


def second_hand_point(t: ClockTime) -> Point:
    """Unit vector of the second hand."""
    return angle_to_point(seconds_in_radians(t))


def minutes_in_radians(t: ClockTime) -> float:
    """Angle of the minute hand, including the seconds' contribution."""
    return seconds_in_radians(t) / 60 + _angle(t.minute, 30)


def minute_hand_point(t: ClockTime) -> Point:
    """Unit vector of the minute hand."""
    return angle_to_point(minutes_in_radians(t))


def hours_in_radians(t: ClockTime) -> float:
    """Angle of the hour hand, including the minutes' contribution."""
    return minutes_in_radians(t) / 12 + _angle(t.hour % 12, 6)


def hour_hand_point(t: ClockTime) -> Point:
    """Unit vector of the hour hand."""
    return angle_to_point(hours_in_radians(t))


def angle_to_point(angle: float) -> Point:
    """Unit vector for a clockwise angle from twelve, y pointing up."""
    return Point(math.sin(angle), math.cos(angle))