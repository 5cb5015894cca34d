"""Arc-length parameterization of curves.

The arc length up to parameter ``t`` is the integral of the curve's speed
``|C'(t)|``. We approximate it on ``N`` equal parameter segments with the
midpoint rule. With ``M`` a bound on ``|C''|`` over the whole curve, the
error on a segment of width ``dt`` is at most ``M * dt**2 / 8``, so the
summed bound is ``M / (8 * N)`` and ``N`` follows directly from the
requested tolerance.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Tuple

import numpy as np

from .. import settings
from ..linalg import Vector
from .nondegenerate import Nondegenerate
from .parameter import ParameterLike, ParameterValue, as_parameter_value

log = logging.getLogger(__name__)


def segment_count(max_second_derivative: float, max_error: float) -> int:
    """Number of midpoint-rule segments needed to stay within ``max_error``."""
    if not math.isfinite(max_error) or max_error <= 0.0:
        raise ValueError(f"max_error must be positive, got {max_error!r}")
    if not math.isfinite(max_second_derivative) or max_second_derivative < 0.0:
        raise ValueError(
            f"max_second_derivative must be a finite nonnegative bound, got {max_second_derivative!r}"
        )
    needed = math.ceil(max_second_derivative / (8.0 * max_error))
    return max(settings.MIN_ARC_LENGTH_SEGMENTS, needed)


class ArcLengthParameterization:
    """Monotone table mapping parameter values to arc length and back.

    Holds the length of each of ``N`` equal parameter segments and their
    cumulative sum (with a leading zero). Speed is taken as constant within a
    segment, which makes both directions of the mapping piecewise linear.
    """

    def __init__(self, segment_lengths) -> None:
        lengths = np.array(segment_lengths, dtype=float)
        if lengths.ndim != 1 or lengths.size == 0:
            raise ValueError("ArcLengthParameterization needs at least one segment")
        if not np.all(np.isfinite(lengths)) or np.any(lengths < 0.0):
            raise ValueError("Segment lengths must be finite and nonnegative")
        cumulative = np.concatenate(([0.0], np.cumsum(lengths)))
        lengths.setflags(write=False)
        cumulative.setflags(write=False)
        self._segment_lengths = lengths
        self._cumulative = cumulative

    @classmethod
    def build(
        cls,
        speed: Callable[[ParameterValue], float],
        max_second_derivative: float,
        max_error: float,
    ) -> "ArcLengthParameterization":
        """Tabulate ``speed`` finely enough that lengths are within ``max_error``."""
        n = segment_count(max_second_derivative, max_error)
        log.debug(
            "Building arc length table with %d segments (bound=%g, max_error=%g)",
            n,
            max_second_derivative,
            max_error,
        )
        speeds = np.array([speed(t) for t in ParameterValue.midpoints(n)], dtype=float)
        return cls(speeds / n)

    @property
    def segment_count(self) -> int:
        return len(self._segment_lengths)

    def cumulative_lengths(self) -> np.ndarray:
        """Read-only arc length at each of the ``N + 1`` segment boundaries."""
        return self._cumulative

    def total_arc_length(self) -> float:
        return float(self._cumulative[-1])

    def arc_length_to_parameter_value(self, s: float) -> Optional[ParameterValue]:
        """Parameter value at arc length ``s``, or ``None`` outside [0, total]."""
        if not (0.0 <= s <= self.total_arc_length()):
            return None
        return self._parameter_at(s)

    def _parameter_at(self, s: float) -> ParameterValue:
        total = self.total_arc_length()
        if s <= 0.0 or total == 0.0:
            return ParameterValue.ZERO
        if s >= total:
            return ParameterValue.ONE
        n = self.segment_count
        # cumulative[i] < s <= cumulative[i + 1], so segment i has positive length
        # and a run of zero-length segments resolves to its start
        i = int(np.searchsorted(self._cumulative, s, side="left")) - 1
        i = min(max(i, 0), n - 1)
        length = self._segment_lengths[i]
        fraction = (s - self._cumulative[i]) / length if length > 0.0 else 0.0
        return ParameterValue.clamped((i + fraction) / n)

    def parameter_value_to_arc_length(self, t: ParameterLike) -> float:
        t = as_parameter_value(t)
        if t == 1.0:
            return self.total_arc_length()
        n = self.segment_count
        x = t * n
        i = min(int(x), n - 1)
        return float(self._cumulative[i] + self._segment_lengths[i] * (x - i))

    def __repr__(self) -> str:
        return (
            f"ArcLengthParameterization(segments={self.segment_count}, "
            f"length={self.total_arc_length():g})"
        )


class ArcLengthParameterized:
    """A curve walked by distance instead of by parameter value."""

    def __init__(
        self,
        curve,
        parameterization: ArcLengthParameterization,
        nondegenerate: Optional[Nondegenerate] = None,
    ) -> None:
        if nondegenerate is not None and nondegenerate.curve != curve:
            raise ValueError("Nondegenerate witness belongs to a different curve")
        self._curve = curve
        self._parameterization = parameterization
        self._nondegenerate = nondegenerate

    @property
    def curve(self):
        return self._curve

    @property
    def parameterization(self) -> ArcLengthParameterization:
        return self._parameterization

    @property
    def nondegenerate(self) -> Optional[Nondegenerate]:
        return self._nondegenerate

    def length(self) -> float:
        return self._parameterization.total_arc_length()

    def arc_length_to_parameter_value(self, distance: float) -> Optional[ParameterValue]:
        return self._parameterization.arc_length_to_parameter_value(distance)

    def parameter_value_to_arc_length(self, t: ParameterLike) -> float:
        return self._parameterization.parameter_value_to_arc_length(t)

    def point_along(self, distance: float) -> Optional[Vector]:
        t = self.arc_length_to_parameter_value(distance)
        if t is None:
            return None
        return self._curve.evaluate(t)

    def tangent_direction_along(self, distance: float):
        if self._nondegenerate is None:
            return None
        t = self.arc_length_to_parameter_value(distance)
        if t is None:
            return None
        return self._nondegenerate.tangent_direction(t)

    def sample_along(self, distance: float) -> Optional[Tuple[Vector, object]]:
        if self._nondegenerate is None:
            return None
        t = self.arc_length_to_parameter_value(distance)
        if t is None:
            return None
        return self._nondegenerate.sample(t)

    def midpoint(self) -> Vector:
        """Point at exactly half the total length."""
        t = self._parameterization._parameter_at(0.5 * self.length())
        return self._curve.evaluate(t)

    def uniform_points(self, n: int) -> List[Vector]:
        """``n + 1`` points at equally spaced distances from start to end."""
        if n <= 0:
            return []
        total = self.length()
        return [
            self._curve.evaluate(self._parameterization._parameter_at(total * i / n))
            for i in range(n + 1)
        ]

    def __repr__(self) -> str:
        return f"ArcLengthParameterized({self._curve!r}, length={self.length():g})"
