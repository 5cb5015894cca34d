import logging
import math

import numpy as np
import pytest

from curvegeom import settings
from curvegeom.geom import (
    ArcLengthParameterization,
    ArcLengthParameterized,
    BezierCurve,
    CubicSpline,
    ParameterValue,
    nondegenerate,
)
from curvegeom.geom.arc_length import segment_count
from curvegeom.linalg import Vec2, Vec3


def _cubic(*coords):
    return CubicSpline(tuple(Vec2(x, y) for x, y in coords))


def _reference_length(curve, samples=20001):
    # fine polyline through closely spaced points
    fine = np.array([curve.evaluate(t).components() for t in np.linspace(0.0, 1.0, samples)])
    return float(np.sum(np.linalg.norm(np.diff(fine, axis=0), axis=1)))


class TestSegmentCount:
    def test_minimum(self):
        assert segment_count(0.0, 1.0) == settings.MIN_ARC_LENGTH_SEGMENTS

    def test_from_bound(self):
        assert segment_count(80.0, 0.1) == 100

    def test_invalid_tolerance(self):
        with pytest.raises(ValueError):
            segment_count(1.0, 0.0)
        with pytest.raises(ValueError):
            segment_count(1.0, -1.0)
        with pytest.raises(ValueError):
            segment_count(-1.0, 1.0)


class TestArcLengthParameterization:
    def test_table_inversion(self):
        p = ArcLengthParameterization([1.0, 1.0, 1.0, 1.0])
        assert p.total_arc_length() == 4.0
        assert p.arc_length_to_parameter_value(1.0) == 0.25
        assert p.arc_length_to_parameter_value(2.5) == 0.625
        assert p.arc_length_to_parameter_value(0.0) == 0.0
        assert p.arc_length_to_parameter_value(4.0) == 1.0
        assert p.parameter_value_to_arc_length(0.625) == 2.5

    def test_out_of_range(self):
        p = ArcLengthParameterization([1.0, 2.0])
        assert p.arc_length_to_parameter_value(-0.1) is None
        assert p.arc_length_to_parameter_value(3.0001) is None
        assert p.arc_length_to_parameter_value(float("nan")) is None

    def test_zero_length_segment(self):
        p = ArcLengthParameterization([1.0, 0.0, 1.0])
        assert p.arc_length_to_parameter_value(1.0) == 1.0 / 3.0
        assert math.isclose(p.arc_length_to_parameter_value(1.5), 2.5 / 3.0)

    def test_leading_zero_length_segments(self):
        p = ArcLengthParameterization([0.0, 0.0, 1.0, 1.0])
        assert p.arc_length_to_parameter_value(0.0) == 0.0
        assert math.isclose(p.arc_length_to_parameter_value(0.5), 2.5 / 4.0)
        assert p.arc_length_to_parameter_value(1.0) == 0.75
        assert p.arc_length_to_parameter_value(2.0) == 1.0

    def test_invalid_segments(self):
        with pytest.raises(ValueError):
            ArcLengthParameterization([])
        with pytest.raises(ValueError):
            ArcLengthParameterization([1.0, -1.0])

    def test_table_is_read_only(self):
        p = ArcLengthParameterization([1.0, 2.0])
        with pytest.raises(ValueError):
            p.cumulative_lengths()[0] = 5.0

    def test_build_logs_segment_count(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="curvegeom"):
            p = ArcLengthParameterization.build(lambda t: 2.0, 16.0, 0.0625)
        assert p.segment_count == 32
        assert math.isclose(p.total_arc_length(), 2.0)
        assert "32 segments" in caplog.text


class TestArcLengthParameterized:
    def test_straight_line_length(self):
        curve = _cubic((0, 0), (1, 0), (1.5, 0), (10, 0))
        walker = curve.arc_length_parameterized(1e-3)
        assert abs(walker.length() - 10.0) <= 1e-3

    def test_uniform_speed_line(self):
        curve = _cubic((0, 0), (1, 1), (2, 2), (3, 3))
        walker = curve.arc_length_parameterized(1e-4)
        assert math.isclose(walker.length(), 3 * math.sqrt(2), rel_tol=1e-12)
        p = walker.point_along(math.sqrt(2))
        assert math.isclose(p.x, 1.0, abs_tol=1e-12)
        assert math.isclose(p.y, 1.0, abs_tol=1e-12)

    def test_length_within_tolerance(self):
        curve = _cubic((1, 1), (3, 4), (5, 1), (7, 4))
        reference = _reference_length(curve)
        for max_error in (1e-1, 1e-2, 1e-3):
            walker = curve.arc_length_parameterized(max_error)
            assert abs(walker.length() - reference) <= max_error

    def test_monotone(self):
        rng = np.random.default_rng(23)
        for _ in range(10):
            curve = CubicSpline(tuple(Vec2(*rng.uniform(-5.0, 5.0, 2)) for _ in range(4)))
            walker = curve.arc_length_parameterized(1e-2)
            lengths = [walker.parameter_value_to_arc_length(t) for t in ParameterValue.steps(97)]
            assert all(b >= a for a, b in zip(lengths, lengths[1:]))
            assert np.all(np.diff(walker.parameterization.cumulative_lengths()) >= 0.0)

    def test_round_trip(self):
        curve = _cubic((0, 0), (4, 5), (-2, 3), (6, -1))
        walker = curve.arc_length_parameterized(1e-3)
        for t in ParameterValue.steps(20):
            s = walker.parameter_value_to_arc_length(t)
            assert math.isclose(walker.arc_length_to_parameter_value(s), t, abs_tol=1e-9)

    def test_endpoints_and_range(self):
        curve = _cubic((1, 1), (3, 4), (5, 1), (7, 4))
        walker = curve.arc_length_parameterized(1e-3)
        assert walker.point_along(0.0) == curve.start_point
        assert walker.point_along(walker.length()) == curve.end_point
        assert walker.point_along(-1.0) is None
        assert walker.point_along(walker.length() + 1.0) is None
        assert walker.tangent_direction_along(walker.length() * 2) is None
        assert walker.sample_along(-0.5) is None

    def test_midpoint_of_symmetric_curve(self):
        curve = _cubic((1, 1), (3, 4), (5, 1), (7, 4))
        mid = curve.arc_length_parameterized(1e-3).midpoint()
        assert math.isclose(mid.x, 4.0, abs_tol=1e-9)
        assert math.isclose(mid.y, 2.5, abs_tol=1e-9)

    def test_tangent_and_sample_along(self):
        curve = BezierCurve([Vec3(0.0, 0.0, 0.0), Vec3(0.0, 3.0, 4.0)])
        walker = curve.arc_length_parameterized()
        assert math.isclose(walker.length(), 5.0)
        direction = walker.tangent_direction_along(2.5)
        assert math.isclose(direction.y, 0.6)
        assert math.isclose(direction.z, 0.8)
        point, _ = walker.sample_along(2.5)
        assert math.isclose(point.y, 1.5)

    def test_uniform_points(self):
        curve = _cubic((0, 0), (1, 0), (1.5, 0), (10, 0))
        points = curve.arc_length_parameterized(1e-3).uniform_points(5)
        assert len(points) == 6
        for i, p in enumerate(points):
            assert abs(p.x - 2.0 * i) <= 1e-3

    def test_degenerate_curve(self):
        p = Vec2(2.0, 3.0)
        walker = CubicSpline((p, p, p, p)).arc_length_parameterized()
        assert walker.nondegenerate is None
        assert walker.length() == 0.0
        assert walker.point_along(0.0) == p
        assert walker.midpoint() == p
        assert walker.tangent_direction_along(0.0) is None
        assert walker.sample_along(0.0) is None

    def test_witness_must_match_curve(self):
        a = _cubic((0, 0), (1, 0), (2, 0), (3, 0))
        b = _cubic((0, 0), (0, 1), (0, 2), (0, 3))
        table = ArcLengthParameterization([1.0])
        with pytest.raises(ValueError):
            ArcLengthParameterized(a, table, nondegenerate(b))

    def test_default_tolerance_is_read_at_call_time(self, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_ARC_LENGTH_ERROR", 0.05)
        curve = _cubic((1, 1), (3, 4), (5, 1), (7, 4))
        walker = curve.arc_length_parameterized()
        expected = segment_count(curve.max_second_derivative_magnitude(), 0.05)
        assert walker.parameterization.segment_count == expected
