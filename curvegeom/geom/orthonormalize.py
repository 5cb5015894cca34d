"""Gram-Schmidt orthonormalization of raw basis vectors."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .. import settings
from ..linalg import V, Vec2, Vec3
from .direction import Direction2d, Direction3d


def _gram_schmidt(vectors: Sequence[V]) -> Optional[List[V]]:
    """Return unit vectors following ``vectors`` or ``None`` if any is dependent.

    Projections are removed twice: a single pass leaves a residual that is
    only as perpendicular as the input was independent.
    """
    accepted: List[V] = []
    for v in vectors:
        length = v.norm()
        if length == 0.0:
            return None
        residual = v
        for _ in range(2):
            for u in accepted:
                residual = residual - u * residual.dot(u)
        residual_length = residual.norm()
        if residual_length <= settings.ORTHONORMALIZE_TOLERANCE * length:
            return None
        accepted.append(residual / residual_length)
    return accepted


def orthonormalize2d(
    x_vector: Vec2, y_vector: Vec2
) -> Optional[Tuple[Direction2d, Direction2d]]:
    """Build perpendicular X and Y directions from two vectors.

    The X direction follows ``x_vector``; the Y direction is ``y_vector``
    with its X component removed. Returns ``None`` when the vectors are
    parallel or either is zero.
    """
    basis = _gram_schmidt([x_vector, y_vector])
    if basis is None:
        return None
    x_dir, y_dir = (Direction2d.from_vector(u) for u in basis)
    return x_dir, y_dir


def orthonormalize3d(
    x_vector: Vec3, y_vector: Vec3, z_vector: Vec3
) -> Optional[Tuple[Direction3d, Direction3d, Direction3d]]:
    """Build three mutually perpendicular directions from three vectors.

    Each direction has a nonnegative component along its source vector, so
    the resulting basis may be left-handed if the inputs are. Returns
    ``None`` if the vectors are coplanar or any of them is zero.
    """
    basis = _gram_schmidt([x_vector, y_vector, z_vector])
    if basis is None:
        return None
    x_dir, y_dir, z_dir = (Direction3d.from_vector(u) for u in basis)
    return x_dir, y_dir, z_dir
