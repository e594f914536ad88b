"""
Offset (parallel) curves for drawing slider bodies and testing hits against them.

An offset curve is built from naive control point offsets of pieces small
enough for the naive offset to be accurate. Consecutive segments are joined
with a circular arc on the outside of a turn and clipped against each other on
the inside, and the open ends of the path get half circle caps.
"""
import logging
import math
from typing import List
import numpy as np
from .bezier import Bezier, BezierSet
from .bezier_approximator import flatten_sets
from .bounds import best_fit_bounds
from .circular_arc import circle_to_beziers
from .config import DEFAULT_TOLERANCE, INTERSECTION_AREA, MAX_SUBDIVISION_DEPTH
from .errors import SubdivisionDepthError
from .intersection import clip_at_first_intersection
from .linear import Linear
from .points import normalize, signed_area

# Joints whose triangle is flatter than this are treated as straight continuations
JOINT_AREA_EPSILON = 1e-9


def offset_naive(bezier: Bezier, distance: float) -> Bezier:
    """
    Move each control point by distance along the curve normal at its own
    parameter (i / degree). Only accurate for nearly straight curves.
    """
    derivative = bezier.derivative()
    chord = normalize(bezier.end - bezier.start)
    last = len(bezier) - 1

    points = []
    for i, point in enumerate(bezier.points):
        tangent = normalize(derivative.point_at(i / last))
        if tangent is None:
            tangent = chord
        if tangent is None:
            points.append(point)
            continue
        points.append(point + np.array([-tangent[1], tangent[0]]) * distance)

    return Bezier._derived(points)


def offset_adaptive(bezier: Bezier, distance: float, tolerance: float = DEFAULT_TOLERANCE,
                    max_depth: int = MAX_SUBDIVISION_DEPTH) -> BezierSet:
    """Halve the curve until both each piece and its naive offset are thinner than tolerance"""
    if not tolerance > 0:
        raise ValueError(f"Tolerance must be positive, got {tolerance}")

    pieces: List[Bezier] = []
    to_offset = [(bezier, 0)]

    while to_offset:
        piece, depth = to_offset.pop()
        if best_fit_bounds(piece).is_thin(tolerance):
            offset = offset_naive(piece, distance)
            if best_fit_bounds(offset).is_thin(tolerance):
                pieces.append(offset)
                continue

        if depth >= max_depth:
            raise SubdivisionDepthError("offset", max_depth)

        left, right = piece.split_at(0.5)
        to_offset.append((right, depth + 1))
        to_offset.append((left, depth + 1))

    return BezierSet(pieces)


def _start_angle(bezier: Bezier) -> float:
    tangent = bezier.tangent_at(0.0)
    if tangent is None:
        return Linear(bezier.start, bezier.end).get_angle()
    return math.atan2(tangent[1], tangent[0])


def _cap(bezier: Bezier, radius: float, side: int) -> BezierSet:
    """Half circle behind the start of bezier, ending where the offset curve starts"""
    angle = _start_angle(bezier)
    arc = circle_to_beziers(radius, angle + math.pi / 2, angle + math.pi * 3 / 2)
    if side > 0:
        arc = arc.reversed()
    return arc.translated(bezier.start[0], bezier.start[1])


def _joint(centre: np.ndarray, left: np.ndarray, right: np.ndarray, radius: float, side: int) -> BezierSet:
    """Short arc around centre from the end of one offset segment to the start of the next"""
    left_angle = math.atan2(left[1] - centre[1], left[0] - centre[0])
    right_angle = math.atan2(right[1] - centre[1], right[0] - centre[0])

    if side > 0:
        arc = circle_to_beziers(radius, right_angle, left_angle).reversed()
    else:
        arc = circle_to_beziers(radius, left_angle, right_angle)
    return arc.translated(centre[0], centre[1])


def offset_with_joints(beziers: BezierSet, distance: float, tolerance: float = DEFAULT_TOLERANCE,
                       max_depth: int = MAX_SUBDIVISION_DEPTH,
                       area_threshold: float = INTERSECTION_AREA) -> np.ndarray:
    """
    Offset a path on one side and flatten it, starting with a cap around the
    first point. Positive distances offset to the left of the direction of travel
    (y up).
    """
    beziers = BezierSet(beziers)
    if not beziers:
        return np.empty((0, 2), dtype=np.float64)
    if distance == 0:
        raise ValueError("Offset distance must be non-zero")

    side = 1 if distance >= 0 else -1
    radius = abs(distance)
    offset_sets = [offset_adaptive(bezier, distance, tolerance, max_depth) for bezier in beziers]

    output = [_cap(beziers[0], radius, side)]
    current = offset_sets[0]
    joints = 0
    clips = 0

    for i in range(1, len(offset_sets)):
        right_set = offset_sets[i]
        centre = beziers[i].start
        left = current[-1].end
        right = right_set[0].start

        turn = signed_area(np.array([left, centre, right])) * side
        # Exact hairpins also land here: a straight edge crosses the centre line and the turn gets no rounded end
        if abs(turn) < JOINT_AREA_EPSILON:
            output.append(current)
            current = right_set
        elif turn < 0:
            # Inside of the turn, the offsets overlap
            clipped_left, clipped_right = clip_at_first_intersection(
                current, right_set.reversed(), area_threshold, max_depth
            )
            output.append(clipped_left)
            current = clipped_right.reversed()
            clips += 1
        else:
            output.append(current)
            output.append(_joint(centre, left, right, radius, side))
            current = right_set
            joints += 1

    output.append(current)
    logging.debug(f"Offset {len(beziers)} segments by {distance} with {joints} joints and {clips} clipped turns")
    return flatten_sets(output, tolerance, max_depth)


def contour(beziers: BezierSet, distance: float, tolerance: float = DEFAULT_TOLERANCE,
            max_depth: int = MAX_SUBDIVISION_DEPTH, area_threshold: float = INTERSECTION_AREA) -> np.ndarray:
    """Closed outline around the path: one side forwards, then the other side walking back"""
    beziers = BezierSet(beziers)
    front = offset_with_joints(beziers, distance, tolerance, max_depth, area_threshold)
    back = offset_with_joints(beziers.reversed(), distance, tolerance, max_depth, area_threshold)
    return np.vstack((front, back))
