"""Curve and direction geometry for curvegeom."""

from .arc_length import ArcLengthParameterization, ArcLengthParameterized
from .bezier import BezierCurve, CubicSpline, QuadraticSpline
from .bounds import BoundingBox
from .curve import Curve
from .direction import Direction2d, Direction3d
from .frame import Frame2d, Frame3d
from .nondegenerate import DegeneratePoint, Nondegenerate, nondegenerate
from .orthonormalize import orthonormalize2d, orthonormalize3d
from .parameter import ParameterValue

__all__ = [
    "ArcLengthParameterization",
    "ArcLengthParameterized",
    "BezierCurve",
    "BoundingBox",
    "CubicSpline",
    "Curve",
    "DegeneratePoint",
    "Direction2d",
    "Direction3d",
    "Frame2d",
    "Frame3d",
    "Nondegenerate",
    "ParameterValue",
    "QuadraticSpline",
    "nondegenerate",
    "orthonormalize2d",
    "orthonormalize3d",
]
