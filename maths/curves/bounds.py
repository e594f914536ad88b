import math
from dataclasses import dataclass
from typing import List
import numpy as np
from .bezier import Bezier


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle between min_x/min_y and max_x/max_y (edges included)"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Bounds minimum must not exceed maximum, got {self}")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_thin(self, tolerance: float) -> bool:
        """Narrower than tolerance along either axis"""
        return self.width < tolerance or self.height < tolerance

    def intersects(self, other: 'Bounds') -> bool:
        # Zero-width and zero-height boxes still count
        return (
            self.min_x <= other.max_x and
            self.max_x >= other.min_x and
            self.min_y <= other.max_y and
            self.max_y >= other.min_y
        )


def bounds_intersect(a: Bounds, b: Bounds) -> bool:
    return a.intersects(b)


def _component_extremes_quadratic(a: float, b: float, c: float) -> List[float]:
    bottom = a - b * 2 + c
    if bottom == 0:
        return []
    t = (a - b) / bottom
    return [t] if 0.0 <= t <= 1.0 else []


def _component_extremes_cubic(a: float, b: float, c: float, d: float) -> List[float]:
    bottom = -a + b * 3 - c * 3 + d

    if bottom == 0:
        # Leading coefficient vanished, derivative is linear
        linear_bottom = (a - b * 2 + c) * 2
        if linear_bottom == 0:
            return []
        t = (a - b) / linear_bottom
        return [t] if 0.0 <= t <= 1.0 else []

    discriminant = -a * c + a * d + b * b - b * c - b * d + c * c
    if discriminant < 0:
        return []

    root = math.sqrt(discriminant)
    add = -a + b * 2 - c
    return [t for t in ((root + add) / bottom, (-root + add) / bottom) if 0.0 <= t <= 1.0]


def component_extremes(components: np.ndarray) -> List[float]:
    """Parameters in [0, 1] where one coordinate of a line, quadratic or cubic stops moving"""
    if len(components) == 2:
        return []
    if len(components) == 3:
        return _component_extremes_quadratic(*components)
    if len(components) == 4:
        return _component_extremes_cubic(*components)
    raise ValueError(f"No closed form extremes for a Bezier with {len(components)} control points")


def bounds_of(bezier: Bezier) -> Bounds:
    """
    Tight bounds for lines, quadratics and cubics.

    Higher order curves fall back to the bounds of the control polygon, which
    always contains the curve but can be noticeably looser.
    """
    points = bezier.points

    if len(points) > 4:
        mins = points.min(axis=0)
        maxs = points.max(axis=0)
        return Bounds(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))

    x_candidates = [0.0, 1.0] + component_extremes(points[:, 0])
    y_candidates = [0.0, 1.0] + component_extremes(points[:, 1])

    xs = [float(bezier.point_at(t)[0]) for t in x_candidates]
    ys = [float(bezier.point_at(t)[1]) for t in y_candidates]

    return Bounds(min(xs), min(ys), max(xs), max(ys))


def best_fit_bounds(bezier: Bezier) -> Bounds:
    """Bounds of the curve after rotating it so its chord lies along the x axis"""
    start = bezier.start
    end = bezier.end
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    return bounds_of(bezier.rotated(-angle, origin=start))
