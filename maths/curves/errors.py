class CurveError(Exception):
    """Base class for every failure raised by the curve geometry engine."""


class InvalidCurveError(CurveError, ValueError):
    """Raised when control points cannot form a Bezier curve (too few, not 2D, not finite)."""


class DegreeOutOfRangeError(CurveError, ValueError):
    """Raised when factorial/choose is asked for a value outside the precomputed table."""


class SubdivisionDepthError(CurveError, RuntimeError):
    """Raised when an adaptive subdivision goes deeper than its configured limit."""

    def __init__(self, operation: str, max_depth: int):
        super().__init__(f"{operation} exceeded the maximum subdivision depth of {max_depth}")
        self.operation = operation
        self.max_depth = max_depth
