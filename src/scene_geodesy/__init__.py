from .ellipsoid import WGS84_A, WGS84_B, WGS84_E2
from .errors import InvalidInputError, ReducedPrecisionWarning
from .types import GeodeticCoordinate, ECEFPoint, ENUPoint, wrap_longitude
from .config import SolverConfig, FIXED_ITERATIONS, DEFAULT_SCENE_ORIGIN
from .geodesy import to_ecef, to_geodetic, to_geodetic_converged
from .transform import RigidTransform4
from .frames import (
    OriginFrameBasis, compute_origin_frame_basis,
    ecef_to_enu, enu_to_ecef, geodetic_to_enu, enu_to_geodetic,
    build_ecef_to_local_yup_matrix, build_ecef_to_local_yup_transform,
)
__all__ = [
    "WGS84_A","WGS84_B","WGS84_E2",
    "InvalidInputError","ReducedPrecisionWarning",
    "GeodeticCoordinate","ECEFPoint","ENUPoint","wrap_longitude",
    "SolverConfig","FIXED_ITERATIONS","DEFAULT_SCENE_ORIGIN",
    "to_ecef","to_geodetic","to_geodetic_converged",
    "RigidTransform4",
    "OriginFrameBasis","compute_origin_frame_basis",
    "ecef_to_enu","enu_to_ecef","geodetic_to_enu","enu_to_geodetic",
    "build_ecef_to_local_yup_matrix","build_ecef_to_local_yup_transform",
]
