from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..linalg import Vector
from .parameter import ParameterLike, ParameterValue


class Curve(ABC):
    """Abstract parametric curve over the unit parameter interval."""

    @abstractmethod
    def evaluate(self, t: ParameterLike) -> Vector:
        """Return point on curve for parameter ``t`` in [0,1]."""
        raise NotImplementedError

    @abstractmethod
    def derivative(self, t: ParameterLike, order: int = 1) -> Vector:
        """Return the ``order``-th derivative with respect to ``t``."""
        raise NotImplementedError

    def points(self, n: int) -> List[Vector]:
        """Return ``n + 1`` points at evenly spaced parameter values."""
        return [self.evaluate(t) for t in ParameterValue.steps(n)]
