"""Render an analogue clock face as SVG."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import List, Optional, TextIO

from .clockface import (
    ClockTime,
    Point,
    hour_hand_point,
    minute_hand_point,
    second_hand_point,
)

SECOND_HAND_LENGTH = 90
MINUTE_HAND_LENGTH = 80
HOUR_HAND_LENGTH = 50
CLOCK_CENTRE_X = 150
CLOCK_CENTRE_Y = 150

SVG_START = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg xmlns="http://www.w3.org/2000/svg"
     width="100%"
     height="100%"
     viewBox="0 0 300 300"
     version="2.0">"""

BEZEL = (
    '<circle cx="150" cy="150" r="100" '
    'style="fill:#fff;stroke:#000;stroke-width:5px;"/>'
)

SVG_END = "</svg>"


def make_hand(point: Point, length: float) -> Point:
    """Scale a unit vector, flip it for SVG's downward y, and centre it."""
    return Point(
        point.x * length + CLOCK_CENTRE_X,
        -point.y * length + CLOCK_CENTRE_Y,
    )


def _line(point: Point, colour: str) -> str:
    return (
        f'<line x1="150" y1="150" x2="{point.x:.3f}" y2="{point.y:.3f}" '
        f'style="fill:none;stroke:{colour};stroke-width:3px;"/>'
    )


def svg_writer(writer: TextIO, t: ClockTime) -> None:
    """Write an SVG clock face showing time ``t`` to ``writer``."""
    writer.write(SVG_START)
    writer.write(BEZEL)
    writer.write(_line(make_hand(second_hand_point(t), SECOND_HAND_LENGTH), "#f00"))
    writer.write(_line(make_hand(minute_hand_point(t), MINUTE_HAND_LENGTH), "#000"))
    writer.write(_line(make_hand(hour_hand_point(t), HOUR_HAND_LENGTH), "#f00"))
    writer.write(SVG_END)


def main(argv: Optional[List[str]] = None) -> None:
    """Write a clock face for the current time to standard output."""
    svg_writer(sys.stdout, datetime.now())