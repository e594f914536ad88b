"""Pytest fixtures for the slider curve tests."""

import numpy as np
import pytest

from maths.curves import Bezier


@pytest.fixture
def line():
    """A horizontal straight segment."""
    return Bezier([[0, 0], [10, 0]])


@pytest.fixture
def quadratic():
    """The quarter-turn quadratic used by most end-to-end checks."""
    return Bezier([[0, 0], [50, 0], [50, 50]])


@pytest.fixture
def cubic():
    """A symmetric cubic arch."""
    return Bezier([[0, 0], [0, 10], [10, 10], [10, 0]])


@pytest.fixture
def high_order():
    """A six point curve, beyond the closed form extremes."""
    return Bezier([[0, 0], [10, 30], [20, -20], [30, 40], [40, 0], [50, 10]])


@pytest.fixture
def l_shape_points():
    """Two straight segments turning left, with a repeated anchor as the break."""
    return [[0, 0], [50, 0], [50, 0], [50, 50]]


def sample(bezier, count=201):
    """Dense samples of a curve, for comparing against flattened output."""
    return np.array([bezier.point_at(t) for t in np.linspace(0, 1, count)])


def distance_to_polyline(point, polyline):
    """Shortest distance from a point to any segment of a polyline."""
    point = np.asarray(point, dtype=np.float64)
    starts = polyline[:-1]
    ends = polyline[1:]
    seg = ends - starts
    seg_len_sq = np.sum(seg**2, axis=1)
    safe = np.where(seg_len_sq == 0, 1, seg_len_sq)
    t = np.clip(np.sum((point - starts) * seg, axis=1) / safe, 0, 1)
    closest = starts + seg * t[:, None]
    return float(np.min(np.sqrt(np.sum((closest - point)**2, axis=1))))
