import logging
import math
from functools import cached_property
from typing import List, Optional, Tuple
import numpy as np
from .bezier import Bezier, BezierSet
from .bezier_approximator import flatten_set
from .bounds import Bounds, bounds_of
from .config import APPROX_EPSILON, CurveConfig
from .errors import InvalidCurveError
from .linear import Linear
from .offset import contour
from .points import approx_equal


def _as_point_array(raw_points) -> np.ndarray:
    points = np.array(raw_points, dtype=np.float64)
    if points.size == 0:
        raise InvalidCurveError("Slider curve needs at least 2 anchor points, got 0")
    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidCurveError(f"Anchor points must be 2D, got shape {points.shape}")
    if not np.all(np.isfinite(points)):
        raise InvalidCurveError("Anchor points must be finite")
    return points


def raw_points_to_bezier_set(raw_points, epsilon: float = APPROX_EPSILON) -> BezierSet:
    """
    Split anchor points into independent Bezier segments. Two consecutive equal
    points mark a break: the first closes the current segment and the second
    starts the next one. Fragments of a single point are dropped.
    """
    points = _as_point_array(raw_points)

    segments: List[List[np.ndarray]] = []
    current: List[np.ndarray] = []
    for point in points:
        if current and approx_equal(current[-1], point, epsilon):
            segments.append(current)
            current = []
        current.append(point)
    if current:
        segments.append(current)

    beziers = [Bezier(segment) for segment in segments if len(segment) >= 2]
    if not beziers:
        raise InvalidCurveError(f"No segment with at least 2 distinct anchor points in {points.tolist()}")

    logging.debug(f"Split {len(points)} anchor points into {len(beziers)} bezier segments")
    return BezierSet(beziers)


def slider_ball_percentage(repeat_length: float, time_offset: float) -> float:
    """
    How far along the path the ball is, in [0, 1], time_offset into a slider
    whose single pass takes repeat_length. Odd passes run backwards.
    """
    if not repeat_length > 0:
        raise ValueError(f"Repeat length must be positive, got {repeat_length}")

    raw_target = time_offset / repeat_length
    target = raw_target % 1
    if math.floor(raw_target) % 2 == 1:
        target = 1 - target
    return target


class SliderCurve:
    """
    A slider path built once from its authored anchor points.

    length is the authored path length from the map and is kept as is; it is
    not reconciled with the geometric length of the flattened path.
    """

    def __init__(self, raw_points, length: float, config: Optional[CurveConfig] = None):
        if not (math.isfinite(length) and length > 0):
            raise ValueError(f"Slider length must be positive, got {length}")

        self.config = config or CurveConfig()
        self.raw_points = _as_point_array(raw_points)
        self.raw_points.setflags(write=False)
        self.length = float(length)
        self.beziers = raw_points_to_bezier_set(self.raw_points, self.config.approx_epsilon)

    def flatten_centre_points(self) -> np.ndarray:
        """Centre line of the path as a polyline"""
        return flatten_set(self.beziers, self.config.tolerance, self.config.max_depth)

    def flatten_contour_points(self, radius: float) -> np.ndarray:
        """Outline of the path widened by radius on both sides, caps included"""
        return contour(
            self.beziers, radius,
            tolerance=self.config.tolerance,
            max_depth=self.config.max_depth,
            area_threshold=self.config.intersection_area,
        )

    def get_start_point(self) -> np.ndarray:
        return self.raw_points[0]

    def get_end_point(self) -> np.ndarray:
        return self.raw_points[-1]

    def get_length(self) -> float:
        return self.length

    @cached_property
    def _centre_table(self) -> Tuple[np.ndarray, np.ndarray]:
        points = self.flatten_centre_points()
        lines = [Linear(points[i], points[i + 1]) for i in range(len(points) - 1)]
        cum_length = np.zeros(len(points))
        prev = 0.0
        for i, line in enumerate(lines):
            prev += line.get_length()
            cum_length[i + 1] = prev
        points.setflags(write=False)
        cum_length.setflags(write=False)
        return points, cum_length

    def get_cumulative_lengths(self) -> np.ndarray:
        """Distance along the flattened centre line up to each of its points"""
        return self._centre_table[1]

    def get_geometric_length(self) -> float:
        return float(self._centre_table[1][-1])

    def get_length_index(self, length: float) -> int:
        """Index of the last centre line point at or before length, -1 past the end"""
        cum_length = self._centre_table[1]
        if length > cum_length[-1]:
            return -1
        return max(0, int(np.searchsorted(cum_length, length, side='right')) - 1)

    def points_up_to(self, length: float) -> np.ndarray:
        """Centre line points covering the path up to length"""
        points = self._centre_table[0]
        index = self.get_length_index(length)
        if index < 0:
            return points
        return points[:index + 1]

    def get_start_angle(self) -> float:
        points = self._centre_table[0]
        if len(points) < 2:
            return 0.0
        return Linear(points[0], points[1]).get_angle()

    def get_end_angle(self) -> float:
        points = self._centre_table[0]
        if len(points) < 2:
            return 0.0
        return Linear(points[-2], points[-1]).get_angle()

    def get_bounding_box(self, radius: float = 0.0) -> Bounds:
        """Bounds of every segment, grown by radius on each side"""
        segment_bounds = [bounds_of(bezier) for bezier in self.beziers]
        return Bounds(
            min(b.min_x for b in segment_bounds) - radius,
            min(b.min_y for b in segment_bounds) - radius,
            max(b.max_x for b in segment_bounds) + radius,
            max(b.max_y for b in segment_bounds) + radius,
        )

    def __repr__(self) -> str:
        return f"SliderCurve(segments={len(self.beziers)}, length={self.length})"
