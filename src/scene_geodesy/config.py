from dataclasses import dataclass

from .errors import InvalidInputError
from .types import GeodeticCoordinate

FIXED_ITERATIONS: int = 10  # refinement rounds of the ECEF -> geodetic solver

# One origin for a whole scene keeps every ENU offset in the same frame.
DEFAULT_SCENE_ORIGIN = GeodeticCoordinate(lat_deg=35.6762, lon_deg=139.6503, alt_m=0.0)


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration parameters for the ECEF -> geodetic solver.

    Attributes:
        iterations (int): Number of latitude refinement rounds. The solver always
            runs exactly this many, with no convergence check.
        polar_axis_tolerance_m (float): Distance in meters from the polar axis below
            which the solver treats a point as degenerate and warns.
    """
    iterations: int = FIXED_ITERATIONS
    polar_axis_tolerance_m: float = 1.0

    def __post_init__(self):
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 1:
            raise InvalidInputError(f"iterations must be a positive int, got {self.iterations!r}")
        if not self.polar_axis_tolerance_m >= 0.0:
            raise InvalidInputError(
                f"polar_axis_tolerance_m must be >= 0, got {self.polar_axis_tolerance_m!r}"
            )
