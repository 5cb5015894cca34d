from __future__ import annotations

from typing import Iterable

import numpy as np

from ..linalg import Vec2, Vec3, Vector


class BoundingBox:
    """Axis-aligned box in any dimension, stored as min/max corner arrays."""

    def __init__(self, min_corner, max_corner):
        self.min_corner = np.asarray(min_corner, dtype=float)
        self.max_corner = np.asarray(max_corner, dtype=float)
        assert self.min_corner.shape == self.max_corner.shape, "Dim mismatch"
        if np.any(self.min_corner > self.max_corner):
            raise ValueError("BoundingBox min corner exceeds max corner")
        self.ndim = len(self.min_corner)

    @staticmethod
    def from_points(points: Iterable[Vector]) -> "BoundingBox":
        coords = np.array([p.components() for p in points], dtype=float)
        if coords.size == 0:
            raise ValueError("BoundingBox needs at least one point")
        return BoundingBox(coords.min(axis=0), coords.max(axis=0))

    def size(self):
        return self.max_corner - self.min_corner

    def center(self):
        return (self.min_corner + self.max_corner) / 2

    def volume(self):
        return float(np.prod(self.size()))

    def extrema(self):
        """Return ``(min_corner, max_corner)`` as vectors of matching dimension."""
        cls = Vec2 if self.ndim == 2 else Vec3
        return cls(*map(float, self.min_corner)), cls(*map(float, self.max_corner))

    def contains(self, point) -> bool:
        p = np.asarray(point.components() if hasattr(point, "components") else point)
        return bool(np.all((p >= self.min_corner) & (p <= self.max_corner)))

    def union(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(
            np.minimum(self.min_corner, other.min_corner),
            np.maximum(self.max_corner, other.max_corner),
        )

    def __repr__(self) -> str:
        return f"BoundingBox({self.min_corner.tolist()}, {self.max_corner.tolist()})"
