import logging
from typing import Iterable, List
import numpy as np
from .bezier import Bezier, BezierSet
from .bounds import best_fit_bounds
from .config import APPROX_EPSILON, DEFAULT_TOLERANCE, MAX_SUBDIVISION_DEPTH
from .errors import SubdivisionDepthError
from .points import unique_points


class BezierApproximator:
    """
    Turns Bezier curves into polylines by halving them until every piece has
    a best-fit bounding box thinner than the tolerance.
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE, max_depth: int = MAX_SUBDIVISION_DEPTH,
                 epsilon: float = APPROX_EPSILON):
        if not tolerance > 0:
            raise ValueError(f"Tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance
        self.max_depth = max_depth
        self.epsilon = epsilon

    def is_flat_enough(self, bezier: Bezier) -> bool:
        return best_fit_bounds(bezier).is_thin(self.tolerance)

    def create_polyline(self, bezier: Bezier) -> np.ndarray:
        output: List[np.ndarray] = []
        # Right halves are pushed first so pieces come off the stack in curve order
        to_flatten = [(bezier, 0)]

        while to_flatten:
            parent, depth = to_flatten.pop()
            if self.is_flat_enough(parent):
                output.append(parent.start)
                output.append(parent.end)
                continue

            if depth >= self.max_depth:
                raise SubdivisionDepthError("flatten", self.max_depth)

            left, right = parent.split_at(0.5)
            to_flatten.append((right, depth + 1))
            to_flatten.append((left, depth + 1))

        return unique_points(output, self.epsilon)

    def create_polyline_from_set(self, beziers: Iterable[Bezier]) -> np.ndarray:
        points: List[np.ndarray] = []
        for bezier in beziers:
            points.extend(self.create_polyline(bezier))
        return unique_points(points, self.epsilon)


def flatten(bezier: Bezier, tolerance: float = DEFAULT_TOLERANCE,
            max_depth: int = MAX_SUBDIVISION_DEPTH) -> np.ndarray:
    return BezierApproximator(tolerance, max_depth).create_polyline(bezier)


def flatten_set(beziers: BezierSet, tolerance: float = DEFAULT_TOLERANCE,
                max_depth: int = MAX_SUBDIVISION_DEPTH) -> np.ndarray:
    """Flatten every segment of a set into one polyline, merging shared boundary points"""
    return BezierApproximator(tolerance, max_depth).create_polyline_from_set(beziers)


def flatten_sets(sets: Iterable[BezierSet], tolerance: float = DEFAULT_TOLERANCE,
                 max_depth: int = MAX_SUBDIVISION_DEPTH) -> np.ndarray:
    approximator = BezierApproximator(tolerance, max_depth)
    points: List[np.ndarray] = []
    set_count = 0
    for bezier_set in sets:
        points.extend(approximator.create_polyline_from_set(bezier_set))
        set_count += 1

    polyline = unique_points(points, approximator.epsilon)
    logging.debug(f"Flattened {set_count} bezier sets into {len(polyline)} points")
    return polyline
