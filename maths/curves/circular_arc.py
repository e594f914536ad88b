import math
import numpy as np
from .bezier import Bezier, BezierSet

# Control point distance for a cubic quarter circle of radius 1
QUADRANT_K = 4 * (math.sqrt(2) - 1) / 3


def _quadrants(radius: float):
    """The four cubic quarter circles, counter-clockwise from angle 0"""
    k = QUADRANT_K * radius
    r = radius
    return (
        Bezier([[r, 0], [r, k], [k, r], [0, r]]),
        Bezier([[0, r], [-k, r], [-r, k], [-r, 0]]),
        Bezier([[-r, 0], [-r, -k], [-k, -r], [0, -r]]),
        Bezier([[0, -r], [k, -r], [r, -k], [r, 0]]),
    )


def circle_to_beziers(radius: float, from_angle: float, to_angle: float) -> BezierSet:
    """
    Cubic Bezier approximation of the arc of a circle centred on the origin,
    running counter-clockwise (y up) from from_angle to to_angle.

    from_angle is moved back by full turns until it is not after to_angle.
    Spans of a full turn or more give the whole circle.
    """
    if not radius > 0:
        raise ValueError(f"Radius must be positive, got {radius}")

    while from_angle > to_angle:
        from_angle -= math.pi * 2

    # Span in quadrant units, [0, 1] for each quarter turn
    span = 4 * (to_angle - from_angle) / (math.pi * 2)

    beziers = []
    for i, quadrant in enumerate(_quadrants(radius)):
        tb = float(np.clip(span, i, i + 1)) - i
        if tb <= 0:
            continue
        if tb >= 1:
            beziers.append(quadrant)
        else:
            beziers.append(quadrant.split_at(tb)[0])

    return BezierSet(bezier.rotated(from_angle) for bezier in beziers)
