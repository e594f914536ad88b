import logging
from typing import List, Tuple
import numpy as np
from .bezier import Bezier, BezierSet
from .bounds import bounds_of
from .config import INTERSECTION_AREA, MAX_SUBDIVISION_DEPTH
from .errors import SubdivisionDepthError
from .linear import Linear


def intersection_parameters(a: Bezier, b: Bezier, area_threshold: float = INTERSECTION_AREA,
                            max_depth: int = MAX_SUBDIVISION_DEPTH) -> Tuple[List[float], List[float]]:
    """
    Parameters at which two curves cross, as (ts on a, ts on b) paired by index.

    Both curves are halved together until their bounding boxes are either
    disjoint or smaller than area_threshold; small pieces are compared as the
    straight chords between their end points. A crossing that lands exactly on
    a split can be reported more than once.
    """
    ts_a: List[float] = []
    ts_b: List[float] = []
    # (piece of a, piece of b, where each piece starts in its parent, depth)
    to_check = [(a, b, 0.0, 0.0, 0)]

    while to_check:
        sub_a, sub_b, offset_a, offset_b, depth = to_check.pop()

        bounds_a = bounds_of(sub_a)
        bounds_b = bounds_of(sub_b)
        if not bounds_a.intersects(bounds_b):
            continue

        scale = 0.5 ** depth
        if bounds_a.area <= area_threshold and bounds_b.area <= area_threshold:
            params = Linear(sub_a.start, sub_a.end).intersection_parameters(Linear(sub_b.start, sub_b.end))
            if params is not None:
                ts_a.append(offset_a + params[0] * scale)
                ts_b.append(offset_b + params[1] * scale)
            continue

        if depth >= max_depth:
            raise SubdivisionDepthError("intersection", max_depth)

        left_a, right_a = sub_a.split_at(0.5)
        left_b, right_b = sub_b.split_at(0.5)
        half = scale * 0.5

        # Pushed in reverse so results come out left-left, left-right, right-left, right-right
        to_check.append((right_a, right_b, offset_a + half, offset_b + half, depth + 1))
        to_check.append((right_a, left_b, offset_a + half, offset_b, depth + 1))
        to_check.append((left_a, right_b, offset_a, offset_b + half, depth + 1))
        to_check.append((left_a, left_b, offset_a, offset_b, depth + 1))

    return ts_a, ts_b


def clip_at_first_intersection(set_a: BezierSet, set_b: BezierSet, area_threshold: float = INTERSECTION_AREA,
                               max_depth: int = MAX_SUBDIVISION_DEPTH) -> Tuple[BezierSet, BezierSet]:
    """
    Cut both sets at the crossing that comes first along set_a, dropping
    everything after it. Sets that never cross are returned unchanged.
    """
    global_a: List[float] = []
    global_b: List[float] = []

    for i, bezier_a in enumerate(set_a):
        for j, bezier_b in enumerate(set_b):
            ts_a, ts_b = intersection_parameters(bezier_a, bezier_b, area_threshold, max_depth)
            global_a.extend(i + t for t in ts_a)
            global_b.extend(j + t for t in ts_b)

    if not global_a:
        logging.debug("No intersection between offset sets, leaving them unclipped")
        return set_a, set_b

    first = int(np.argmin(global_a))
    return set_a.truncated(global_a[first]), set_b.truncated(global_b[first])
