"""Local coordinate frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .. import settings
from ..linalg import Vec2, Vec3
from .direction import Direction2d, Direction3d
from .orthonormalize import orthonormalize2d, orthonormalize3d


def _check_perpendicular(a, b) -> None:
    if abs(a.dot(b)) > settings.ORTHONORMALIZE_TOLERANCE:
        raise ValueError("Frame directions must be mutually perpendicular")


@dataclass(frozen=True)
class Frame2d:
    origin: Vec2
    x_direction: Direction2d
    y_direction: Direction2d

    def __post_init__(self) -> None:
        _check_perpendicular(self.x_direction, self.y_direction)

    @staticmethod
    def at(origin: Vec2) -> "Frame2d":
        return Frame2d(origin, Direction2d.x_axis(), Direction2d.y_axis())

    @staticmethod
    def from_vectors(origin: Vec2, x_vector: Vec2, y_vector: Vec2) -> Optional["Frame2d"]:
        basis = orthonormalize2d(x_vector, y_vector)
        if basis is None:
            return None
        return Frame2d(origin, *basis)

    def is_right_handed(self) -> bool:
        return self.x_direction.x * self.y_direction.y - self.x_direction.y * self.y_direction.x > 0

    def vector_relative_to(self, v: Vec2) -> Vec2:
        return Vec2(self.x_direction.component_of(v), self.y_direction.component_of(v))

    def vector_placed_in(self, v: Vec2) -> Vec2:
        return self.x_direction.to_vector() * v.x + self.y_direction.to_vector() * v.y

    def point_relative_to(self, p: Vec2) -> Vec2:
        return self.vector_relative_to(p - self.origin)

    def point_placed_in(self, p: Vec2) -> Vec2:
        return self.origin + self.vector_placed_in(p)


@dataclass(frozen=True)
class Frame3d:
    origin: Vec3
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    def __post_init__(self) -> None:
        _check_perpendicular(self.x_direction, self.y_direction)
        _check_perpendicular(self.x_direction, self.z_direction)
        _check_perpendicular(self.y_direction, self.z_direction)

    @staticmethod
    def at(origin: Vec3) -> "Frame3d":
        return Frame3d(origin, Direction3d.x_axis(), Direction3d.y_axis(), Direction3d.z_axis())

    @staticmethod
    def from_vectors(
        origin: Vec3, x_vector: Vec3, y_vector: Vec3, z_vector: Vec3
    ) -> Optional["Frame3d"]:
        basis = orthonormalize3d(x_vector, y_vector, z_vector)
        if basis is None:
            return None
        return Frame3d(origin, *basis)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).dot(self.z_direction.to_vector()) > 0

    def vector_relative_to(self, v: Vec3) -> Vec3:
        return Vec3(
            self.x_direction.component_of(v),
            self.y_direction.component_of(v),
            self.z_direction.component_of(v),
        )

    def vector_placed_in(self, v: Vec3) -> Vec3:
        return (
            self.x_direction.to_vector() * v.x
            + self.y_direction.to_vector() * v.y
            + self.z_direction.to_vector() * v.z
        )

    def point_relative_to(self, p: Vec3) -> Vec3:
        return self.vector_relative_to(p - self.origin)

    def point_placed_in(self, p: Vec3) -> Vec3:
        return self.origin + self.vector_placed_in(p)
