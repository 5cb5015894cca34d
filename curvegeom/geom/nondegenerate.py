"""Degeneracy resolution for Bezier curves.

A polynomial curve can have a zero first derivative at isolated parameter
values (cusps, reversals) while still tracing a real path. To report a
tangent there we need some derivative order that is nonzero along the whole
curve. :func:`nondegenerate` finds the highest such order and wraps the
curve in a :class:`Nondegenerate` witness carrying that order's (constant)
direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

from ..linalg import Vector
from .parameter import ParameterLike, ParameterValue, as_parameter_value

if TYPE_CHECKING:
    from .bezier import BezierCurve

FIRST_DERIVATIVE = 1
SECOND_DERIVATIVE = 2
THIRD_DERIVATIVE = 3

_WITNESS_KEY = object()


@dataclass(frozen=True)
class DegeneratePoint:
    """Returned by :func:`nondegenerate` when a curve collapses to one point."""

    point: Vector


class Nondegenerate:
    """Curve known to have a nonzero derivative of order :attr:`order`.

    All derivatives above :attr:`order` vanish, so the ``order``-th
    derivative is a constant vector whose direction is kept as
    :attr:`fallback_direction`. Instances come only from :func:`nondegenerate`.
    """

    __slots__ = ("_curve", "_order", "_direction")

    def __init__(self, curve: "BezierCurve", order: int, direction, _key=None):
        if _key is not _WITNESS_KEY:
            raise TypeError("Nondegenerate witnesses are created by nondegenerate()")
        self._curve = curve
        self._order = order
        self._direction = direction

    @property
    def curve(self) -> "BezierCurve":
        return self._curve

    @property
    def order(self) -> int:
        return self._order

    @property
    def fallback_direction(self):
        return self._direction

    def tangent_direction(self, t: ParameterLike):
        """Tangent direction at ``t``, defined even where the velocity is zero.

        Where the first ``j - 1`` derivatives vanish the curve leaves the
        point along the ``j``-th derivative and arrives along it times
        ``(-1) ** (j - 1)``. The leaving direction is reported everywhere
        except at ``t == 1``, which has no "after".
        """
        t = as_parameter_value(t)
        direction = None
        order = self._order
        for j in range(1, self._order):
            direction = self._curve.derivative(t, j).direction()
            if direction is not None:
                order = j
                break
        if direction is None:
            direction = self._direction
        if t == 1.0 and order % 2 == 0:
            return -direction
        return direction

    def sample(self, t: ParameterLike) -> Tuple[Vector, object]:
        return self._curve.evaluate(t), self.tangent_direction(t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Nondegenerate):
            return NotImplemented
        return (
            self._curve == other._curve
            and self._order == other._order
            and self._direction == other._direction
        )

    def __hash__(self) -> int:
        return hash((self._curve, self._order, self._direction))

    def __repr__(self) -> str:
        return f"Nondegenerate(order={self._order}, curve={self._curve!r})"


def nondegenerate(curve: "BezierCurve") -> Union[Nondegenerate, DegeneratePoint]:
    """Return a :class:`Nondegenerate` witness or the point ``curve`` collapses to.

    Derivative orders are tried from the curve's degree downwards. The
    highest order is constant, and each lower order is constant once every
    higher one is zero, so evaluating at parameter 0 suffices.
    """
    for order in range(curve.degree, 0, -1):
        direction = curve.derivative(ParameterValue.ZERO, order).direction()
        if direction is not None:
            return Nondegenerate(curve, order, direction, _key=_WITNESS_KEY)
    return DegeneratePoint(curve.start_point)
