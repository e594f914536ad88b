import math
from typing import Iterable, Iterator, Optional, Tuple
import numpy as np
from .combinatorics import bernstein
from .errors import InvalidCurveError
from .points import normalize, rotate


class Bezier:
    """An immutable Bezier curve given by two or more control points, t in [0, 1]"""

    def __init__(self, points):
        points = np.array(points, dtype=np.float64)
        if points.size == 0:
            raise InvalidCurveError("A Bezier needs at least 2 control points, got 0")
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidCurveError(f"Control points must be 2D, got shape {points.shape}")
        if len(points) < 2:
            raise InvalidCurveError(f"A Bezier needs at least 2 control points, got {len(points)}")
        if not np.all(np.isfinite(points)):
            raise InvalidCurveError("Control points must be finite")
        if np.all(points == points[0]):
            raise InvalidCurveError(f"Control points must not all be the same point, got {points[0].tolist()}")

        points.setflags(write=False)
        self.points = points

    @classmethod
    def _derived(cls, points) -> 'Bezier':
        """
        Build from points computed off an existing curve. Hodographs and splits
        at t=0 or t=1 can collapse onto a single location, so that check is skipped.
        """
        bezier = cls.__new__(cls)
        points = np.array(points, dtype=np.float64)
        points.setflags(write=False)
        bezier.points = points
        return bezier

    @property
    def degree(self) -> int:
        return len(self.points) - 1

    @property
    def start(self) -> np.ndarray:
        return self.points[0]

    @property
    def end(self) -> np.ndarray:
        return self.points[-1]

    def point_at(self, t: float) -> np.ndarray:
        """Calculate point on Bezier curve at parameter t using Bernstein polynomials"""
        n = self.degree

        if n == 2:
            # Quadratics are by far the most common slider segment
            b0 = bernstein(2, 0, t)
            b1 = bernstein(2, 1, t)
            b2 = bernstein(2, 2, t)
            return b0 * self.points[0] + b1 * self.points[1] + b2 * self.points[2]

        weights = np.array([bernstein(n, i, t) for i in range(n + 1)])
        return weights @ self.points

    def derivative(self) -> 'Bezier':
        """Hodograph of the curve, one control point shorter"""
        diffs = np.diff(self.points, axis=0) * len(self.points)
        if len(diffs) == 1:
            # A line has a constant derivative
            diffs = np.vstack((diffs, diffs))
        return Bezier._derived(diffs)

    def tangent_at(self, t: float) -> Optional[np.ndarray]:
        """Unit tangent at t, or None where the derivative vanishes"""
        return normalize(self.derivative().point_at(t))

    def split_at(self, t: float) -> Tuple['Bezier', 'Bezier']:
        """Split the curve in two at t using de Casteljau's algorithm"""
        left = []
        right = []
        level = self.points

        while len(level) > 1:
            left.append(level[0])
            right.append(level[-1])
            level = level[:-1] * (1.0 - t) + level[1:] * t

        left.append(level[0])
        right.append(level[0])
        return Bezier._derived(left), Bezier._derived(right[::-1])

    def split_at_many(self, ts: Iterable[float]) -> Tuple['Bezier', ...]:
        """
        Split the curve at every t in ts, returning len(ts) + 1 pieces in order.
        Each t is rescaled to the part of the curve still left after the previous split.
        """
        ts = sorted(float(t) for t in ts)
        for t in ts:
            if not 0.0 <= t <= 1.0:
                raise ValueError(f"Split parameter must be in [0, 1], got {t}")

        pieces = []
        remaining = self
        previous = 0.0
        for t in ts:
            local_t = 0.0 if previous >= 1.0 else (t - previous) / (1.0 - previous)
            left, remaining = remaining.split_at(local_t)
            pieces.append(left)
            previous = t

        pieces.append(remaining)
        return tuple(pieces)

    def reversed(self) -> 'Bezier':
        return Bezier._derived(self.points[::-1])

    def translated(self, dx: float, dy: float) -> 'Bezier':
        return Bezier._derived(self.points + np.array([dx, dy]))

    def rotated(self, angle: float, origin: Optional[np.ndarray] = None) -> 'Bezier':
        return Bezier._derived(rotate(self.points, angle, origin))

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bezier):
            return NotImplemented
        return self.points.shape == other.points.shape and bool(np.array_equal(self.points, other.points))

    def __hash__(self) -> int:
        return hash(self.points.tobytes())

    def __repr__(self) -> str:
        return f"Bezier({self.points.tolist()})"


class BezierSet:
    """
    An ordered run of Bezier segments. Segments are independent: the end of one
    does not have to be the start of the next.

    A set-wide parameter T is segment_index + local_t, so T ranges over [0, len(set)].
    """

    def __init__(self, beziers: Iterable[Bezier] = ()):
        self.beziers: Tuple[Bezier, ...] = tuple(beziers)
        for bezier in self.beziers:
            if not isinstance(bezier, Bezier):
                raise TypeError(f"BezierSet can only hold Bezier segments, got {type(bezier).__name__}")

    def to_local(self, global_t: float) -> Tuple[int, float]:
        """Convert a set-wide parameter into (segment index, t within that segment)"""
        if not self.beziers:
            raise ValueError("Cannot convert a parameter on an empty BezierSet")
        if not 0.0 <= global_t <= len(self.beziers):
            raise ValueError(f"Parameter must be in [0, {len(self.beziers)}], got {global_t}")

        index = min(int(math.floor(global_t)), len(self.beziers) - 1)
        return index, global_t - index

    def to_global(self, index: int, t: float) -> float:
        if not 0 <= index < len(self.beziers):
            raise IndexError(f"Segment index {index} out of range for {len(self.beziers)} segments")
        return index + t

    def truncated(self, global_t: float) -> 'BezierSet':
        """Everything before global_t; the segment containing it is split and its left part kept"""
        if global_t >= len(self.beziers):
            return self
        index, t = self.to_local(global_t)
        left, _ = self.beziers[index].split_at(t)
        return BezierSet(self.beziers[:index] + (left,))

    def reversed(self) -> 'BezierSet':
        """The same path walked backwards"""
        return BezierSet(bezier.reversed() for bezier in reversed(self.beziers))

    def translated(self, dx: float, dy: float) -> 'BezierSet':
        return BezierSet(bezier.translated(dx, dy) for bezier in self.beziers)

    def __add__(self, other: 'BezierSet') -> 'BezierSet':
        return BezierSet(self.beziers + tuple(other))

    def __len__(self) -> int:
        return len(self.beziers)

    def __iter__(self) -> Iterator[Bezier]:
        return iter(self.beziers)

    def __getitem__(self, index: int) -> Bezier:
        return self.beziers[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, BezierSet):
            return NotImplemented
        return self.beziers == other.beziers

    def __hash__(self) -> int:
        return hash(self.beziers)

    def __repr__(self) -> str:
        return f"BezierSet({len(self.beziers)} segments)"


def evaluate(bezier: Bezier, t: float) -> np.ndarray:
    return bezier.point_at(t)


def tangent(bezier: Bezier, t: float) -> Optional[np.ndarray]:
    return bezier.tangent_at(t)
