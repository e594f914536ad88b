"""Tests for segment and curve intersection, and clipping of bezier sets."""

import math

import numpy as np
import pytest

from maths.curves import (
    Bezier, BezierSet, Linear, SubdivisionDepthError, clip_at_first_intersection, intersection_parameters,
)


class TestLinear:

    def test_length_and_angle(self):
        linear = Linear([0, 0], [3, 4])

        assert linear.get_length() == pytest.approx(5.0)
        assert linear.get_angle() == pytest.approx(math.atan2(4, 3))
        assert Linear([0, 0], [0, 1]).get_angle() == pytest.approx(math.pi / 2)

    def test_point_at(self):
        assert np.allclose(Linear([0, 0], [10, 20]).point_at(0.25), [2.5, 5])

    def test_crossing(self):
        a = Linear([0, 0], [10, 10])
        b = Linear([0, 10], [10, 0])

        assert a.intersection_parameters(b) == pytest.approx((0.5, 0.5))
        assert np.allclose(a.intersection(b), [5, 5])

    def test_parameters_follow_each_segment(self):
        a = Linear([0, 0], [10, 0])
        b = Linear([8, -2], [8, 6])

        assert a.intersection_parameters(b) == pytest.approx((0.8, 0.25))

    @pytest.mark.parametrize("other", [
        Linear([0, 5], [10, 5]),
        Linear([2, 0], [8, 0]),
        Linear([20, -5], [20, 5]),
    ], ids=["parallel", "collinear", "out-of-range"])
    def test_no_crossing(self, other):
        a = Linear([0, 0], [10, 0])

        assert a.intersection_parameters(other) is None
        assert a.intersection(other) is None


class TestIntersectionParameters:

    def test_disjoint(self):
        a = Bezier([[0, 0], [10, 0]])
        b = Bezier([[0, 5], [10, 5]])

        assert intersection_parameters(a, b) == ([], [])

    def test_disjoint_arches(self):
        a = Bezier([[0, 0], [5, 10], [10, 0]])
        b = Bezier([[20, 0], [20, 10], [30, 10], [30, 0]])

        assert intersection_parameters(a, b) == ([], [])

    def test_arches_with_overlapping_boxes_but_no_crossing(self):
        """Nested arches share bounding box area at the top level but never touch."""
        outer = Bezier([[0, 0], [10, 20], [20, 0]])
        inner = Bezier([[8, 0], [10, 4], [12, 0]])

        assert intersection_parameters(outer, inner) == ([], [])

    def test_line_crossing(self):
        """Parameters are reported on each curve's own scale."""
        a = Bezier([[0, 0], [10, 10]])
        b = Bezier([[0, 2], [10, 2]])

        ts_a, ts_b = intersection_parameters(a, b)

        assert ts_a == pytest.approx([0.2])
        assert ts_b == pytest.approx([0.2])

    def test_curve_crossing_lands_on_both_curves(self, quadratic):
        other = Bezier([[0, 50], [25, 25], [50, -10]])

        ts_a, ts_b = intersection_parameters(quadratic, other, area_threshold=0.01)

        assert len(ts_a) >= 1
        for t_a, t_b in zip(ts_a, ts_b):
            assert np.linalg.norm(quadratic.point_at(t_a) - other.point_at(t_b)) < 0.2

    def test_depth_guard(self):
        a = Bezier([[0, 0], [10, 10]])
        b = Bezier([[0, 10], [10, 0]])

        with pytest.raises(SubdivisionDepthError):
            intersection_parameters(a, b, area_threshold=1e-12, max_depth=2)


class TestClipAtFirstIntersection:

    def test_clips_both_sets(self):
        set_a = BezierSet([Bezier([[0, 0], [10, 0]]), Bezier([[10, 0], [20, 0]])])
        set_b = BezierSet([Bezier([[15, -5], [15, 5]])])

        clipped_a, clipped_b = clip_at_first_intersection(set_a, set_b)

        assert len(clipped_a) == 2
        assert clipped_a[0] == set_a[0]
        assert np.allclose(clipped_a[1].points, [[10, 0], [15, 0]])
        assert len(clipped_b) == 1
        assert np.allclose(clipped_b[0].points, [[15, -5], [15, 0]])

    def test_first_crossing_along_a_wins(self):
        set_a = BezierSet([Bezier([[0, 0], [20, 0]])])
        set_b = BezierSet([Bezier([[15, -5], [15, 5]]), Bezier([[5, -5], [5, 5]])])

        clipped_a, clipped_b = clip_at_first_intersection(set_a, set_b)

        assert np.allclose(clipped_a[0].points, [[0, 0], [5, 0]])
        assert len(clipped_b) == 2
        assert clipped_b[0] == set_b[0]
        assert np.allclose(clipped_b[1].points, [[5, -5], [5, 0]])

    def test_no_crossing_returns_inputs(self):
        set_a = BezierSet([Bezier([[0, 0], [10, 0]])])
        set_b = BezierSet([Bezier([[0, 5], [10, 5]])])

        clipped_a, clipped_b = clip_at_first_intersection(set_a, set_b)

        assert clipped_a is set_a
        assert clipped_b is set_b
