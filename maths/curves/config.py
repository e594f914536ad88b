from dataclasses import dataclass

DEFAULT_TOLERANCE = 1.0
MAX_SUBDIVISION_DEPTH = 32
INTERSECTION_AREA = 4.0
APPROX_EPSILON = 0.001


@dataclass(frozen=True)
class CurveConfig:
    """Tuning values shared by the flattener, offsetter and intersector"""
    # Thinness threshold for bounding boxes, in playfield units
    tolerance: float = DEFAULT_TOLERANCE
    max_depth: int = MAX_SUBDIVISION_DEPTH
    # Bounding box area under which two curves are compared as straight chords
    intersection_area: float = INTERSECTION_AREA
    approx_epsilon: float = APPROX_EPSILON

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ValueError if any value would stall or break subdivision"""
        if not self.tolerance > 0:
            raise ValueError(f"Tolerance must be positive, got {self.tolerance}")
        if self.max_depth < 1:
            raise ValueError(f"Max depth must be at least 1, got {self.max_depth}")
        if not self.intersection_area > 0:
            raise ValueError(f"Intersection area must be positive, got {self.intersection_area}")
        if not self.approx_epsilon > 0:
            raise ValueError(f"Approximate epsilon must be positive, got {self.approx_epsilon}")
