"""Geometric shapes with areas and perimeters."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


def _round_to_2(value: float) -> float:
    # Half away from zero, matching conventional rounding rather than banker's.
    scaled = math.floor(abs(value) * 100 + 0.5)
    return math.copysign(scaled, value) / 100


class Shape(ABC):
    """Anything with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def perimeter(self) -> float:
        """Circumference, rounded to two decimals."""
        return _round_to_2(2 * math.pi * self.radius)

    def area(self) -> float:
        """Area, rounded to two decimals."""
        return _round_to_2(math.pi * self.radius * self.radius)


@dataclass(frozen=True)
class Triangle(Shape):
    height: float
    base: float

    def area(self) -> float:
        return _round_to_2(self.base * self.height) / 2