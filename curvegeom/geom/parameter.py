"""Curve parameter values restricted to the closed unit interval."""

from __future__ import annotations

import math
from typing import List, Optional, Union


def clamp(x: float, a: float, b: float) -> float:
    return a if x < a else b if x > b else x


class ParameterValue(float):
    """A float guaranteed to lie in [0, 1].

    Arithmetic on a parameter value yields a plain ``float``; only the
    factories below produce new parameter values.
    """

    __slots__ = ()

    def __new__(cls, value: float = 0.0) -> "ParameterValue":
        value = float(value)
        if not (0.0 <= value <= 1.0):
            raise ValueError(f"Parameter value must be in [0, 1], got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"ParameterValue({float(self)!r})"

    @property
    def value(self) -> float:
        return float(self)

    @classmethod
    def clamped(cls, x: float) -> "ParameterValue":
        """Clamp ``x`` into [0, 1]; NaN is rejected."""
        if math.isnan(x):
            raise ValueError("Parameter value must not be NaN")
        return cls(clamp(x, 0.0, 1.0))

    @classmethod
    def checked(cls, x: float) -> Optional["ParameterValue"]:
        if 0.0 <= x <= 1.0:
            return cls(x)
        return None

    @classmethod
    def midpoint(cls, a: "ParameterValue", b: "ParameterValue") -> "ParameterValue":
        return cls.clamped(a + 0.5 * (b - a))

    @classmethod
    def steps(cls, n: int) -> List["ParameterValue"]:
        """``n + 1`` evenly spaced values from 0 to 1 inclusive (empty for n <= 0)."""
        if n <= 0:
            return []
        return [cls(i / n) for i in range(n + 1)]

    @classmethod
    def leading(cls, n: int) -> List["ParameterValue"]:
        """``n`` evenly spaced values from 0 up to but excluding 1."""
        if n <= 0:
            return []
        return [cls(i / n) for i in range(n)]

    @classmethod
    def trailing(cls, n: int) -> List["ParameterValue"]:
        """``n`` evenly spaced values from just after 0 up to 1."""
        if n <= 0:
            return []
        return [cls(i / n) for i in range(1, n + 1)]

    @classmethod
    def midpoints(cls, n: int) -> List["ParameterValue"]:
        """Centres of ``n`` equal intervals."""
        if n <= 0:
            return []
        return [cls((2 * i + 1) / (2 * n)) for i in range(n)]


ParameterValue.ZERO = ParameterValue(0.0)
ParameterValue.HALF = ParameterValue(0.5)
ParameterValue.ONE = ParameterValue(1.0)

ParameterLike = Union[ParameterValue, float]


def as_parameter_value(t: ParameterLike) -> ParameterValue:
    """Accept a parameter value or a float already in [0, 1]."""
    if isinstance(t, ParameterValue):
        return t
    return ParameterValue(t)
