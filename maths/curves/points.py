import math
from typing import Iterable, Optional
import numpy as np
from .config import APPROX_EPSILON


def as_point(x: float, y: float) -> np.ndarray:
    return np.array([x, y], dtype=np.float64)


def approx_equal(a: np.ndarray, b: np.ndarray, epsilon: float = APPROX_EPSILON) -> bool:
    """Both coordinates differ by less than epsilon"""
    return abs(a[0] - b[0]) < epsilon and abs(a[1] - b[1]) < epsilon


def unique_points(points: Iterable[np.ndarray], epsilon: float = APPROX_EPSILON) -> np.ndarray:
    """Drop points that approximately repeat the point before them"""
    out = []
    for point in points:
        if not out or not approx_equal(out[-1], point, epsilon):
            out.append(point)
    if not out:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(out, dtype=np.float64)


def normalize(vector: np.ndarray) -> Optional[np.ndarray]:
    """Unit vector in the same direction, or None for a zero vector"""
    length = math.hypot(vector[0], vector[1])
    if length < 1e-12:
        return None
    return vector / length


def signed_area(contour: np.ndarray) -> float:
    """Shoelace area of a closed contour; positive when counter-clockwise with y pointing up"""
    contour = np.asarray(contour, dtype=np.float64)
    x = contour[:, 0]
    y = contour[:, 1]
    return float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)) / 2


def rotate(points: np.ndarray, angle: float, origin: Optional[np.ndarray] = None) -> np.ndarray:
    """Rotate points counter-clockwise (y up) by angle radians around origin"""
    points = np.asarray(points, dtype=np.float64)
    if origin is None:
        origin = np.zeros(2)
    sin = math.sin(angle)
    cos = math.cos(angle)
    rel = points - origin
    return np.column_stack((
        rel[:, 0] * cos - rel[:, 1] * sin,
        rel[:, 0] * sin + rel[:, 1] * cos,
    )) + origin