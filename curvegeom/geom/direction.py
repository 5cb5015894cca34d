"""Unit direction vectors.

A direction is a dimensionless unit vector. The constructors verify the
magnitude so every instance is a valid direction; use :meth:`from_vector`
to normalize an arbitrary vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .. import settings
from ..linalg import Vec2, Vec3


def _check_unit(norm: float, cls_name: str) -> None:
    if not math.isfinite(norm) or abs(norm - 1.0) > settings.DIRECTION_TOLERANCE:
        raise ValueError(f"{cls_name} components must have unit length, got norm {norm!r}")


@dataclass(frozen=True)
class Direction2d:
    x: float
    y: float

    def __post_init__(self) -> None:
        _check_unit(math.hypot(self.x, self.y), "Direction2d")

    @staticmethod
    def from_vector(v: Vec2) -> Optional["Direction2d"]:
        """Return the direction of ``v`` or ``None`` for the zero vector."""
        n = v.norm()
        if n == 0.0 or not math.isfinite(n):
            return None
        return Direction2d(v.x / n, v.y / n)

    @staticmethod
    def from_angle(angle: float) -> "Direction2d":
        """Direction at ``angle`` radians counterclockwise from the X axis."""
        return Direction2d(math.cos(angle), math.sin(angle))

    @staticmethod
    def x_axis() -> "Direction2d":
        return Direction2d(1.0, 0.0)

    @staticmethod
    def y_axis() -> "Direction2d":
        return Direction2d(0.0, 1.0)

    def __neg__(self) -> "Direction2d":
        return Direction2d(-self.x, -self.y)

    def reverse(self) -> "Direction2d":
        return -self

    def to_vector(self) -> Vec2:
        return Vec2(self.x, self.y)

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def dot(self, other: "Direction2d") -> float:
        return self.x * other.x + self.y * other.y

    def component_of(self, v: Vec2) -> float:
        """Signed length of the projection of ``v`` onto this direction."""
        return v.x * self.x + v.y * self.y

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_to(self, other: "Direction2d") -> float:
        """Signed angle in (-pi, pi] that rotates this direction onto ``other``."""
        cross = self.x * other.y - self.y * other.x
        return math.atan2(cross, self.dot(other))

    def rotate_by(self, angle: float) -> "Direction2d":
        c, s = math.cos(angle), math.sin(angle)
        return Direction2d.from_vector(
            Vec2(c * self.x - s * self.y, s * self.x + c * self.y)
        )

    def perpendicular(self) -> "Direction2d":
        """Rotate counterclockwise by 90 degrees."""
        return Direction2d(-self.y, self.x)

    def equal_within(self, other: "Direction2d", angle: float) -> bool:
        return abs(self.angle_to(other)) <= angle


@dataclass(frozen=True)
class Direction3d:
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        _check_unit(math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z), "Direction3d")

    @staticmethod
    def from_vector(v: Vec3) -> Optional["Direction3d"]:
        """Return the direction of ``v`` or ``None`` for the zero vector."""
        n = v.norm()
        if n == 0.0 or not math.isfinite(n):
            return None
        return Direction3d(v.x / n, v.y / n, v.z / n)

    @staticmethod
    def x_axis() -> "Direction3d":
        return Direction3d(1.0, 0.0, 0.0)

    @staticmethod
    def y_axis() -> "Direction3d":
        return Direction3d(0.0, 1.0, 0.0)

    @staticmethod
    def z_axis() -> "Direction3d":
        return Direction3d(0.0, 0.0, 1.0)

    def __neg__(self) -> "Direction3d":
        return Direction3d(-self.x, -self.y, -self.z)

    def reverse(self) -> "Direction3d":
        return -self

    def to_vector(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, other: "Direction3d") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def component_of(self, v: Vec3) -> float:
        """Signed length of the projection of ``v`` onto this direction."""
        return v.x * self.x + v.y * self.y + v.z * self.z

    def cross(self, other: "Direction3d") -> Vec3:
        return self.to_vector().cross(other.to_vector())

    def angle_to(self, other: "Direction3d") -> float:
        """Unsigned angle in [0, pi] between the two directions."""
        return math.atan2(self.cross(other).norm(), self.dot(other))

    def equal_within(self, other: "Direction3d", angle: float) -> bool:
        return self.angle_to(other) <= angle
