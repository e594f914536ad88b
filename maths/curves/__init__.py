from .bezier import Bezier, BezierSet, evaluate, tangent
from .bezier_approximator import BezierApproximator, flatten, flatten_set, flatten_sets
from .bounds import Bounds, best_fit_bounds, bounds_intersect, bounds_of
from .circular_arc import circle_to_beziers
from .combinatorics import bernstein, choose, factorial
from .config import CurveConfig
from .curve import SliderCurve, raw_points_to_bezier_set, slider_ball_percentage
from .errors import CurveError, DegreeOutOfRangeError, InvalidCurveError, SubdivisionDepthError
from .intersection import clip_at_first_intersection, intersection_parameters
from .linear import Linear
from .offset import contour, offset_adaptive, offset_naive, offset_with_joints

__all__ = [
    'Bezier',
    'BezierSet',
    'evaluate',
    'tangent',
    'BezierApproximator',
    'flatten',
    'flatten_set',
    'flatten_sets',
    'Bounds',
    'best_fit_bounds',
    'bounds_intersect',
    'bounds_of',
    'circle_to_beziers',
    'bernstein',
    'choose',
    'factorial',
    'CurveConfig',
    'SliderCurve',
    'raw_points_to_bezier_set',
    'slider_ball_percentage',
    'CurveError',
    'DegreeOutOfRangeError',
    'InvalidCurveError',
    'SubdivisionDepthError',
    'clip_at_first_intersection',
    'intersection_parameters',
    'Linear',
    'contour',
    'offset_adaptive',
    'offset_naive',
    'offset_with_joints',
]
