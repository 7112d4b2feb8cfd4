"""Plain shape value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()


@dataclass
class Circle:
    radius: float

    def get_area(self) -> float:
        return math.pi * self.radius**2

    @property
    def area(self) -> float:
        return self.get_area()
