import math
from typing import Optional, Tuple
import numpy as np


class Linear:
    """A straight segment from point1 (t=0) to point2 (t=1)"""

    def __init__(self, point1: np.ndarray, point2: np.ndarray):
        self.point1 = np.asarray(point1, dtype=np.float64)
        self.point2 = np.asarray(point2, dtype=np.float64)

    def get_length(self) -> float:
        return float(np.sqrt(np.sum((self.point2 - self.point1)**2)))

    def point_at(self, t: float) -> np.ndarray:
        return self.point1 + (self.point2 - self.point1) * t

    def get_angle(self) -> float:
        return math.atan2(self.point2[1] - self.point1[1], self.point2[0] - self.point1[0])

    def intersection_parameters(self, other: 'Linear') -> Optional[Tuple[float, float]]:
        """
        Parameters (t on self, t on other) where the two segments cross, or None.
        Parallel and collinear segments never report a crossing.
        """
        x1, y1 = self.point1
        x2, y2 = self.point2
        x3, y3 = other.point1
        x4, y4 = other.point2

        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if den == 0:
            return None

        t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
        u = ((x1 - x3) * (y1 - y2) - (y1 - y3) * (x1 - x2)) / den

        if not (0.0 <= t <= 1.0 and 0.0 <= u <= 1.0):
            return None
        return float(t), float(u)

    def intersection(self, other: 'Linear') -> Optional[np.ndarray]:
        params = self.intersection_parameters(other)
        if params is None:
            return None
        return self.point_at(params[0])
