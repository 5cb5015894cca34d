"""Bezier curve utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .. import settings
from ..linalg import Quaternion, Vec2, Vec3, Vector, interpolate
from .arc_length import ArcLengthParameterization, ArcLengthParameterized
from .bounds import BoundingBox
from .curve import Curve
from .direction import Direction2d, Direction3d
from .nondegenerate import Nondegenerate, nondegenerate
from .parameter import ParameterLike, ParameterValue, as_parameter_value


def _de_casteljau(points: Sequence[Vector], t: float) -> Vector:
    tmp = list(points)
    n = len(tmp)
    for r in range(1, n):
        for i in range(n - r):
            tmp[i] = interpolate(tmp[i], tmp[i + 1], t)
    return tmp[0]


def _differences(points: Sequence[Vector]) -> List[Vector]:
    return [b - a for a, b in zip(points, points[1:])]


@dataclass(frozen=True)
class BezierCurve(Curve):
    """Bezier curve of any degree in 2D or 3D.

    Control points are all :class:`Vec2` or all :class:`Vec3`. Every
    transformation returns a new curve of the same class.
    """

    control_points: Tuple[Vector, ...]

    # fixed degree for subclasses; None accepts any degree >= 1
    _degree = None

    def __post_init__(self) -> None:
        points = tuple(self.control_points)
        object.__setattr__(self, "control_points", points)
        if len(points) < 2:
            raise ValueError("Bezier curve needs at least two control points")
        kind = type(points[0])
        if kind not in (Vec2, Vec3) or any(type(p) is not kind for p in points):
            raise ValueError("Control points must be all Vec2 or all Vec3")
        if self._degree is not None and len(points) != self._degree + 1:
            raise ValueError(
                f"{type(self).__name__} needs {self._degree + 1} control points, got {len(points)}"
            )

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @property
    def dimension(self) -> int:
        return 2 if isinstance(self.control_points[0], Vec2) else 3

    @property
    def start_point(self) -> Vector:
        return self.control_points[0]

    @property
    def end_point(self) -> Vector:
        return self.control_points[-1]

    def _zero(self) -> Vector:
        return type(self.control_points[0]).zero()

    def _with_points(self, points: Sequence[Vector]) -> "BezierCurve":
        return _class_for_degree(len(points) - 1, type(self))(tuple(points))

    # -- evaluation -------------------------------------------------------

    def evaluate(self, t: ParameterLike) -> Vector:
        """Evaluate the curve at parameter t using de Casteljau."""
        return _de_casteljau(self.control_points, as_parameter_value(t))

    def derivative(self, t: ParameterLike, order: int = 1) -> Vector:
        """Evaluate the ``order``-th derivative at ``t``.

        The recursion runs from whichever end of the curve is closer to ``t``
        so rounding error does not grow towards the far endpoint.
        """
        t = as_parameter_value(t)
        if order < 1:
            raise ValueError(f"Derivative order must be at least 1, got {order}")
        n = self.degree
        if order > n:
            return self._zero()
        diffs = list(self.control_points)
        for _ in range(order):
            diffs = _differences(diffs)
        if t <= 0.5:
            v = _de_casteljau(diffs, t)
        else:
            v = _de_casteljau(diffs[::-1], 1.0 - t)
        return v * math.perm(n, order)

    def first_derivative(self, t: ParameterLike) -> Vector:
        return self.derivative(t, 1)

    def second_derivative(self, t: ParameterLike) -> Vector:
        return self.derivative(t, 2)

    def third_derivative(self, t: ParameterLike) -> Vector:
        return self.derivative(t, 3)

    def start_derivative(self) -> Vector:
        return self.derivative(ParameterValue.ZERO)

    def end_derivative(self) -> Vector:
        return self.derivative(ParameterValue.ONE)

    def max_second_derivative_magnitude(self) -> float:
        """Upper bound on ``|C''(t)|`` over the whole curve.

        The second derivative is itself a Bezier curve whose control points
        are scaled second differences, so it stays within their convex hull.
        """
        n = self.degree
        if n < 2:
            return 0.0
        second = _differences(_differences(self.control_points))
        return n * (n - 1) * max(v.norm() for v in second)

    def tangent_direction(self, t: ParameterLike) -> Optional[Union[Direction2d, Direction3d]]:
        """Tangent direction at ``t`` or ``None`` if the curve is a single point."""
        witness = nondegenerate(self)
        if not isinstance(witness, Nondegenerate):
            return None
        return witness.tangent_direction(t)

    def sample(
        self, t: ParameterLike
    ) -> Optional[Tuple[Vector, Union[Direction2d, Direction3d]]]:
        witness = nondegenerate(self)
        if not isinstance(witness, Nondegenerate):
            return None
        return witness.sample(t)

    # -- subdivision and degree -------------------------------------------

    def subdivide(self, t: ParameterLike) -> Tuple["BezierCurve", "BezierCurve"]:
        """Subdivide the curve into two at parameter t."""
        u = as_parameter_value(t)
        points = self.control_points
        n = len(points)
        left = []
        right = []
        tmp = list(points)
        left.append(tmp[0])
        right.append(tmp[-1])
        for r in range(1, n):
            for i in range(n - r):
                tmp[i] = interpolate(tmp[i], tmp[i + 1], u)
            left.append(tmp[0])
            right.append(tmp[n - r - 1])
        right.reverse()
        return self._with_points(left), self._with_points(right)

    split_at = subdivide

    def bisect(self) -> Tuple["BezierCurve", "BezierCurve"]:
        return self.subdivide(ParameterValue.HALF)

    def elevated(self) -> "BezierCurve":
        """Exact degree elevation: the same curve with one more control point."""
        points = self.control_points
        n = len(points) - 1
        elevated = [points[0]]
        for i in range(1, n + 1):
            a = i / (n + 1)
            elevated.append(points[i - 1] * a + points[i] * (1.0 - a))
        elevated.append(points[-1])
        return self._with_points(elevated)

    def bounding_box(self) -> BoundingBox:
        """Box around the control points, which contains the whole curve."""
        return BoundingBox.from_points(self.control_points)

    # -- arc length -------------------------------------------------------

    def arc_length_parameterized(self, max_error: Optional[float] = None) -> ArcLengthParameterized:
        """Build the arc-length table for this curve (an explicit, one-time cost)."""
        if max_error is None:
            max_error = settings.DEFAULT_ARC_LENGTH_ERROR
        parameterization = ArcLengthParameterization.build(
            lambda t: self.first_derivative(t).norm(),
            self.max_second_derivative_magnitude(),
            max_error,
        )
        witness = nondegenerate(self)
        if not isinstance(witness, Nondegenerate):
            witness = None
        return ArcLengthParameterized(self, parameterization, witness)

    def length(self, max_error: Optional[float] = None) -> float:
        return self.arc_length_parameterized(max_error).length()

    # -- transformations --------------------------------------------------

    def reverse(self) -> "BezierCurve":
        return self._with_points(self.control_points[::-1])

    def map_points(self, fn: Callable[[Vector], Vector]) -> "BezierCurve":
        """Apply a pointwise map to every control point."""
        return self._with_points([fn(p) for p in self.control_points])

    def translate_by(self, offset: Vector) -> "BezierCurve":
        return self.map_points(lambda p: p + offset)

    def scale_about(self, center: Vector, factor: float) -> "BezierCurve":
        return self.map_points(lambda p: center + (p - center) * factor)

    def rotate_around(
        self, center: Vector, angle: float, axis: Optional[Direction3d] = None
    ) -> "BezierCurve":
        """Rotate by ``angle`` radians about ``center``.

        In 3D ``axis`` is the :class:`Direction3d` of the rotation axis
        through ``center``; in 2D it must be omitted.
        """
        if isinstance(center, Vec2):
            if axis is not None:
                raise ValueError("2D rotation does not take an axis")
            c, s = math.cos(angle), math.sin(angle)

            def rotate(p: Vec2) -> Vec2:
                d = p - center
                return center + Vec2(c * d.x - s * d.y, s * d.x + c * d.y)

            return self.map_points(rotate)
        if axis is None:
            raise ValueError("3D rotation needs an axis direction")
        q = Quaternion.from_axis_angle(axis.to_vector(), angle)
        return self.map_points(lambda p: center + q.rotate(p - center))

    def mirror_across(self, point: Vector, direction) -> "BezierCurve":
        """Mirror across a line (2D) or plane (3D) through ``point``.

        In 2D ``direction`` runs along the mirror line; in 3D it is the
        plane normal.
        """
        d = direction.to_vector()
        if isinstance(point, Vec2):

            def mirror(p: Vec2) -> Vec2:
                v = p - point
                return point + d * (2.0 * v.dot(d)) - v

        else:

            def mirror(p: Vec3) -> Vec3:
                v = p - point
                return point + v - d * (2.0 * v.dot(d))

        return self.map_points(mirror)

    def relative_to(self, frame) -> "BezierCurve":
        """Express the curve in the local coordinates of ``frame``."""
        return self.map_points(frame.point_relative_to)

    def place_in(self, frame) -> "BezierCurve":
        """Inverse of :meth:`relative_to`."""
        return self.map_points(frame.point_placed_in)

    def components(self) -> List[Tuple[float, ...]]:
        """Control point coordinates in order, for encoders."""
        return [p.components() for p in self.control_points]


class QuadraticSpline(BezierCurve):
    """Degree 2 Bezier curve."""

    _degree = 2

    @classmethod
    def from_control_points(cls, p1: Vector, p2: Vector, p3: Vector) -> "QuadraticSpline":
        return cls((p1, p2, p3))

    @property
    def control_point(self) -> Vector:
        return self.control_points[1]


class CubicSpline(BezierCurve):
    """Degree 3 Bezier curve: start point, two inner control points, end point."""

    _degree = 3

    @classmethod
    def from_control_points(
        cls, p1: Vector, p2: Vector, p3: Vector, p4: Vector
    ) -> "CubicSpline":
        return cls((p1, p2, p3, p4))

    @classmethod
    def from_endpoints(
        cls,
        start_point: Vector,
        start_derivative: Vector,
        end_point: Vector,
        end_derivative: Vector,
    ) -> "CubicSpline":
        """Hermite form: positions and first derivatives at both ends."""
        return cls(
            (
                start_point,
                start_point + start_derivative / 3.0,
                end_point - end_derivative / 3.0,
                end_point,
            )
        )

    @classmethod
    def from_quadratic(cls, quadratic: QuadraticSpline) -> "CubicSpline":
        return cls(quadratic.elevated().control_points)

    @property
    def start_control_point(self) -> Vector:
        return self.control_points[1]

    @property
    def end_control_point(self) -> Vector:
        return self.control_points[2]


_FIXED_DEGREE = {2: QuadraticSpline, 3: CubicSpline}


def _class_for_degree(degree: int, current: type) -> type:
    """Keep ``current`` when its degree still fits, else pick the fixed-degree class."""
    if current._degree is None or current._degree == degree:
        return current
    return _FIXED_DEGREE.get(degree, BezierCurve)


