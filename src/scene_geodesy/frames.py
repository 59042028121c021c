"""
Local East-North-Up frames in Y-up axis order.

Every function here uses the layout x=east, y=up, z=south (north = -z), the
convention of Y-up renderers. The point-wise transforms and the matrix builders
all obtain their rotation from :func:`compute_origin_frame_basis`, so a point
transformed one at a time lands exactly where the matrix puts it.

Nothing is cached: callers that keep a :class:`RigidTransform4` for one origin
must rebuild it when the origin changes.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from .config import SolverConfig
from .errors import check_finite, check_latitude
from .geodesy import to_ecef, to_geodetic
from .transform import RigidTransform4
from .types import GeodeticCoordinate, ECEFPoint, ENUPoint

# rows of the canonical (east, north, up) rotation, taken in Y-up order: east, up, -north
_ENU_TO_YUP = np.array([
    [1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0],
    [0.0, -1.0, 0.0],
])


@dataclass(frozen=True, eq=False)
class OriginFrameBasis:
    """
    The local frame at an origin.

    Attributes:
        origin_ecef (ECEFPoint): ECEF position of the origin, altitude included.
        rotation (np.ndarray): Read-only (3, 3) orthonormal matrix taking ECEF
            offsets to Y-up ENU axes. Depends on latitude/longitude only.
    """
    origin_ecef: ECEFPoint
    rotation: np.ndarray

    def to_local(self, point: ECEFPoint) -> ENUPoint:
        return ENUPoint.from_array(self.rotation @ (point - self.origin_ecef))

    def to_ecef(self, point: ENUPoint) -> ECEFPoint:
        # rotation is orthonormal, so its transpose is its inverse
        return ECEFPoint.from_array(self.origin_ecef.as_array() + self.rotation.T @ point.as_array())


def _enu_rotation(lat_deg: float, lon_deg: float) -> np.ndarray:
    lat = math.radians(lat_deg)
    lon = math.radians(lon_deg)
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    sin_lon, cos_lon = math.sin(lon), math.cos(lon)
    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])


def compute_origin_frame_basis(origin_lat: float, origin_lng: float, origin_alt: float = 0.0) -> OriginFrameBasis:
    """
    Builds the Y-up tangent-plane basis at an origin.

    Args:
        origin_lat (float): Origin latitude in degrees, within [-90, 90].
        origin_lng (float): Origin longitude in degrees.
        origin_alt (float, optional): Origin height above the ellipsoid in meters.
            Only moves ``origin_ecef``; the rotation ignores it. Defaults to 0.0.

    Returns:
        OriginFrameBasis: Origin ECEF position and ECEF -> Y-up rotation.
    """
    origin = GeodeticCoordinate(check_latitude(origin_lat), check_finite("origin_lng", origin_lng), origin_alt)
    rotation = _ENU_TO_YUP @ _enu_rotation(origin.lat_deg, origin.lon_deg)
    rotation.flags.writeable = False
    return OriginFrameBasis(origin_ecef=to_ecef(origin), rotation=rotation)


def _basis_for(origin: GeodeticCoordinate) -> OriginFrameBasis:
    return compute_origin_frame_basis(origin.lat_deg, origin.lon_deg, origin.alt_m)


def ecef_to_enu(point: ECEFPoint, origin: GeodeticCoordinate) -> ENUPoint:
    """
    Expresses an ECEF position in the origin's Y-up local frame.

    Args:
        point (ECEFPoint): ECEF position in meters.
        origin (GeodeticCoordinate): Frame origin.

    Returns:
        ENUPoint: Local (east, up, south) offset in meters.
    """
    return _basis_for(origin).to_local(point)


def enu_to_ecef(point: ENUPoint, origin: GeodeticCoordinate) -> ECEFPoint:
    """Inverse of :func:`ecef_to_enu`."""
    return _basis_for(origin).to_ecef(point)


def geodetic_to_enu(point: GeodeticCoordinate, origin: GeodeticCoordinate) -> ENUPoint:
    """
    Converts a geodetic position to the origin's Y-up local frame.

    Args:
        point (GeodeticCoordinate): Position to convert.
        origin (GeodeticCoordinate): Frame origin.

    Returns:
        ENUPoint: Local (east, up, south) offset in meters. ``geodetic_to_enu(o, o)``
        is (0, 0, 0).
    """
    return ecef_to_enu(to_ecef(point), origin)


def enu_to_geodetic(
    point: ENUPoint,
    origin: GeodeticCoordinate,
    config: SolverConfig = SolverConfig(),
) -> GeodeticCoordinate:
    """
    Converts a Y-up local offset back to a geodetic position.

    Goes through :func:`scene_geodesy.geodesy.to_geodetic`, so it shares that
    solver's precision and its polar-axis behavior.

    Args:
        point (ENUPoint): Local (east, up, south) offset in meters.
        origin (GeodeticCoordinate): Frame origin.
        config (SolverConfig, optional): Inverse solver settings. Defaults to SolverConfig().

    Returns:
        GeodeticCoordinate: Position with longitude in (-180, 180].
    """
    return to_geodetic(enu_to_ecef(point, origin), config)


def build_ecef_to_local_yup_matrix(origin_lat: float, origin_lng: float) -> RigidTransform4:
    """
    Builds the rotation-only ECEF -> Y-up matrix for an origin.

    The matrix has no translation: apply it to ``p - origin_ecef``, or place
    the transformed subtree at the origin separately. Use
    :func:`build_ecef_to_local_yup_transform` for a matrix that takes raw ECEF
    positions.

    Args:
        origin_lat (float): Origin latitude in degrees.
        origin_lng (float): Origin longitude in degrees.

    Returns:
        RigidTransform4: Rotation-only homogeneous transform.
    """
    basis = compute_origin_frame_basis(origin_lat, origin_lng)
    return RigidTransform4(basis.rotation)


def build_ecef_to_local_yup_transform(origin: GeodeticCoordinate) -> RigidTransform4:
    """
    Builds the ECEF -> Y-up matrix with the origin translation folded in.

    Applying the result to an ECEF position gives the same coordinate as
    :func:`ecef_to_enu`. Meant to be set once on the node that holds a whole
    ECEF-space hierarchy (e.g. a 3D tiles root) so its content renders in the
    local frame.

    Args:
        origin (GeodeticCoordinate): Frame origin, altitude included.

    Returns:
        RigidTransform4: Homogeneous transform with ``t = -R @ origin_ecef``.
    """
    basis = _basis_for(origin)
    return RigidTransform4(basis.rotation, -(basis.rotation @ basis.origin_ecef.as_array()))
