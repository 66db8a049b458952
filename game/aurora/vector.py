"""
2D vector value type used for every position and velocity in the mission
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector; every operation returns a new instance"""
    x: float = 0.0
    y: float = 0.0

    def add(self, v: Vector2) -> Vector2:
        return Vector2(self.x + v.x, self.y + v.y)

    def sub(self, v: Vector2) -> Vector2:
        return Vector2(self.x - v.x, self.y - v.y)

    def scale(self, s: float) -> Vector2:
        return Vector2(self.x * s, self.y * s)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero"""
        m = self.magnitude()
        if m == 0:
            return Vector2()
        return Vector2(self.x / m, self.y / m)

    def distance_to(self, v: Vector2) -> float:
        return math.hypot(self.x - v.x, self.y - v.y)

    # Operator sugar
    def __add__(self, v: Vector2) -> Vector2:
        return self.add(v)

    def __sub__(self, v: Vector2) -> Vector2:
        return self.sub(v)

    def __mul__(self, s: float) -> Vector2:
        return self.scale(s)

    __rmul__ = __mul__

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> Vector2:
        """Heading vector; angle in radians, 0 faces +x"""
        return cls(math.cos(angle) * length, math.sin(angle) * length)
