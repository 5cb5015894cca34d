import math

import numpy as np

from curvegeom.geom import orthonormalize2d, orthonormalize3d
from curvegeom.linalg import Vec2, Vec3


def _assert_basis(directions, sources):
    for d in directions:
        assert math.isclose(math.sqrt(d.dot(d)), 1.0, abs_tol=1e-12)
    for i, a in enumerate(directions):
        for b in directions[i + 1:]:
            assert abs(a.dot(b)) < 1e-9
    for d, v in zip(directions, sources):
        assert d.component_of(v) >= 0.0


def test_parallel_vectors_2d():
    assert orthonormalize2d(Vec2(1.0, 2.0), Vec2(-3.0, -6.0)) is None


def test_zero_vector_2d():
    assert orthonormalize2d(Vec2(0.0, 0.0), Vec2(1.0, 0.0)) is None
    assert orthonormalize2d(Vec2(1.0, 0.0), Vec2(0.0, 0.0)) is None


def test_coplanar_vectors_3d():
    result = orthonormalize3d(Vec3(1.0, 0.0, 0.0), Vec3(2.0, 3.0, 0.0), Vec3(-1.0, 2.0, 0.0))
    assert result is None


def test_parallel_first_two_3d():
    result = orthonormalize3d(Vec3(1.0, 1.0, 1.0), Vec3(2.0, 2.0, 2.0), Vec3(0.0, 0.0, 1.0))
    assert result is None


def test_known_basis_2d():
    x, y = orthonormalize2d(Vec2(2.0, 0.0), Vec2(5.0, -3.0))
    assert x.components() == (1.0, 0.0)
    assert y.components() == (0.0, -1.0)


def test_known_basis_3d():
    x, y, z = orthonormalize3d(Vec3(0.0, 3.0, 0.0), Vec3(1.0, 1.0, 0.0), Vec3(4.0, 4.0, 4.0))
    assert x.components() == (0.0, 1.0, 0.0)
    assert y.components() == (1.0, 0.0, 0.0)
    assert z.components() == (0.0, 0.0, 1.0)


def test_random_inputs_2d():
    rng = np.random.default_rng(11)
    for _ in range(300):
        a = Vec2(*rng.uniform(-10.0, 10.0, 2))
        b = Vec2(*rng.uniform(-10.0, 10.0, 2))
        result = orthonormalize2d(a, b)
        if result is None:
            assert abs(a.cross(b)) <= 1e-9 * a.norm() * b.norm()
        else:
            _assert_basis(result, (a, b))


def test_random_inputs_3d():
    rng = np.random.default_rng(12)
    for _ in range(300):
        a, b, c = (Vec3(*rng.uniform(-10.0, 10.0, 3)) for _ in range(3))
        result = orthonormalize3d(a, b, c)
        if result is None:
            triple = a.cross(b).dot(c)
            assert abs(triple) <= 1e-9 * a.norm() * b.norm() * c.norm()
        else:
            _assert_basis(result, (a, b, c))


def test_nearly_dependent_input_is_rejected():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -1.0, 0.5)
    c = a * 0.25 + b * 3.0
    assert orthonormalize3d(a, b, c) is None


def test_nearly_parallel_2d_stays_perpendicular():
    a = Vec2(0.3, 0.7)
    b = Vec2(0.3, 0.7 + 1e-9)
    x, y = orthonormalize2d(a, b)
    assert abs(x.dot(y)) < 1e-12
    assert y.component_of(b) > 0.0


def test_nearly_parallel_3d_stays_perpendicular():
    a = Vec3(1.0, 1.0, 1.0)
    b = Vec3(1.0, 1.0, 1.0 + 1e-9)
    c = Vec3(0.3, -0.7, 0.2)
    x, y, z = orthonormalize3d(a, b, c)
    assert abs(x.dot(y)) < 1e-12
    assert abs(x.dot(z)) < 1e-12
    assert abs(y.dot(z)) < 1e-12
    assert y.component_of(b) > 0.0
    assert z.component_of(c) > 0.0
