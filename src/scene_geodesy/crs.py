from __future__ import annotations

from .types import GeodeticCoordinate, ENUPoint

# Geo stack
try:
    from pyproj import CRS, Transformer
except Exception as e:
    raise ImportError(
        "scene_geodesy.crs requires pyproj. "
        "Install extras with: pip install 'scene-geodesy[geo]'"
    ) from e

GEOCENTRIC_EPSG = 4978  # WGS84 ECEF
GEODETIC_3D_EPSG = 4979  # WGS84 lat/lon/ellipsoidal height


def make_geocentric_crs() -> CRS:
    """
    Returns the WGS84 geocentric (ECEF) CRS.

    Returns:
        CRS: EPSG:4978.
    """
    return CRS.from_epsg(GEOCENTRIC_EPSG)


def make_geodetic_crs() -> CRS:
    """
    Returns the 3D WGS84 geographic CRS, heights above the ellipsoid.

    Returns:
        CRS: EPSG:4979.
    """
    return CRS.from_epsg(GEODETIC_3D_EPSG)


def make_topocentric_transformer(origin: GeodeticCoordinate) -> Transformer:
    """
    Creates a PROJ transformer into the topocentric (ENU) frame of an origin.

    Input is (lon_deg, lat_deg, alt_m); output is the canonical
    (east, north, up) in meters. Use :func:`topocentric_to_enu_point` to get
    the Y-up layout used by the rest of the package.

    Args:
        origin (GeodeticCoordinate): The frame origin.

    Returns:
        Transformer: A pyproj Transformer built from a PROJ pipeline.
    """
    pipeline = (
        "+proj=pipeline "
        "+step +proj=unitconvert +xy_in=deg +xy_out=rad "
        "+step +proj=cart +ellps=WGS84 "
        f"+step +proj=topocentric +ellps=WGS84 +lat_0={origin.lat_deg!r} "
        f"+lon_0={origin.lon_deg!r} +h_0={origin.alt_m!r}"
    )
    return Transformer.from_pipeline(pipeline)


def topocentric_to_enu_point(east: float, north: float, up: float) -> ENUPoint:
    """
    Remaps a canonical (east, north, up) triple into Y-up order.

    Args:
        east (float): Meters east.
        north (float): Meters north.
        up (float): Meters up.

    Returns:
        ENUPoint: (east, up, south) point.
    """
    return ENUPoint.from_enu(float(east), float(north), float(up))
