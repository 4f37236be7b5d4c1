"""Points made through named factory methods."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class PointType(enum.Enum):
    CARTESIAN = "cartesian"
    POLAR = "polar"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def new_cartesian(cls, x: float, y: float) -> Point:
        """Make a point from cartesian coordinates."""
        return cls(x, y)

    @classmethod
    def new_polar(cls, r: float, theta: float) -> Point:
        """Make a point from a radius and an angle in radians."""
        return cls(r * math.cos(theta), r * math.sin(theta))