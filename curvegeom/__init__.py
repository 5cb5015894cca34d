"""Top-level helpers for curvegeom."""

import logging as _logging

__all__ = [
    "Vec2",
    "Vec3",
    "interpolate",
    # Curves
    "BezierCurve",
    "QuadraticSpline",
    "CubicSpline",
    "ParameterValue",
    "Nondegenerate",
    "DegeneratePoint",
    "nondegenerate",
    # Arc length
    "ArcLengthParameterization",
    "ArcLengthParameterized",
    # Directions and frames
    "Direction2d",
    "Direction3d",
    "Frame2d",
    "Frame3d",
    "orthonormalize2d",
    "orthonormalize3d",
]

from .linalg import Vec2, Vec3, interpolate
from .geom import (
    ArcLengthParameterization,
    ArcLengthParameterized,
    BezierCurve,
    CubicSpline,
    DegeneratePoint,
    Direction2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Nondegenerate,
    ParameterValue,
    QuadraticSpline,
    nondegenerate,
    orthonormalize2d,
    orthonormalize3d,
)

_logging.getLogger("curvegeom").addHandler(_logging.NullHandler())
