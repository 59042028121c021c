from __future__ import annotations
import logging
import math
import warnings
from typing import Optional

from .config import SolverConfig
from .ellipsoid import WGS84_A, WGS84_E2
from .errors import InvalidInputError, ReducedPrecisionWarning
from .types import GeodeticCoordinate, ECEFPoint

log = logging.getLogger(__name__)


def prime_vertical_radius(lat_rad: float) -> float:
    """
    Computes the prime-vertical radius of curvature N at a geodetic latitude.

    Args:
        lat_rad (float): Geodetic latitude in radians.

    Returns:
        float: N in meters.
    """
    sin_lat = math.sin(lat_rad)
    return WGS84_A / math.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)


def to_ecef(coord: GeodeticCoordinate) -> ECEFPoint:
    """
    Converts a WGS84 geodetic coordinate to ECEF.

    Any longitude is accepted; the result is periodic in longitude, so 190°
    and -170° give the same point.

    Args:
        coord (GeodeticCoordinate): Latitude/longitude in degrees, altitude in
            meters above the ellipsoid.

    Returns:
        ECEFPoint: ECEF position in meters.
    """
    lat = math.radians(coord.lat_deg)
    lon = math.radians(coord.lon_deg)
    cos_lat = math.cos(lat)
    n = prime_vertical_radius(lat)
    x = (n + coord.alt_m) * cos_lat * math.cos(lon)
    y = (n + coord.alt_m) * cos_lat * math.sin(lon)
    z = (n * (1.0 - WGS84_E2) + coord.alt_m) * math.sin(lat)
    return ECEFPoint(x, y, z)


def _refine(z: float, p: float, lat: float) -> tuple[float, float]:
    """Runs one latitude refinement round; returns (lat, alt)."""
    n = prime_vertical_radius(lat)
    alt = p / math.cos(lat) - n
    lat = math.atan2(z, p * (1.0 - WGS84_E2 * n / (n + alt)))
    return lat, alt


def _inside_evolute(p: float, lat: float) -> bool:
    """
    Tells whether the next refinement round would break down.

    ``N + alt`` equals ``p / cos(lat)``; once it drops to ``e² N`` or below
    (points within roughly ``e² a`` ≈ 42.7 km of the Earth's center) the update
    denominator is no longer positive and latitude flips by 180°.
    """
    return p / math.cos(lat) <= WGS84_E2 * prime_vertical_radius(lat)


def _best_effort(point: ECEFPoint, p: float, lat: float, reason: str, stacklevel: int = 3) -> GeodeticCoordinate:
    # p / cos(lat) loses precision as cos(lat) -> 0; this form does not.
    sin_lat = math.sin(lat)
    alt = p * math.cos(lat) + point.z * sin_lat - WGS84_A * math.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)
    lon = math.degrees(math.atan2(point.y, point.x))
    warnings.warn(
        f"ECEF point ({point.x}, {point.y}, {point.z}) {reason}; the result has reduced precision",
        ReducedPrecisionWarning,
        stacklevel=stacklevel,
    )
    return GeodeticCoordinate(lat_deg=math.degrees(lat), lon_deg=lon, alt_m=alt)


def _initial_latitude(point: ECEFPoint, p: float) -> float:
    if p == 0.0:
        # on the axis; the center of the Earth is reported as the north pole
        return math.pi / 2.0 if point.z >= 0.0 else -math.pi / 2.0
    return math.atan2(point.z, p * (1.0 - WGS84_E2))


def _on_axis(point: ECEFPoint, caller: str) -> GeodeticCoordinate:
    log.debug("%s: point on the polar axis, skipping refinement", caller)
    return _best_effort(point, 0.0, _initial_latitude(point, 0.0),
                        "lies on the polar axis; longitude is ill-defined", stacklevel=4)


def to_geodetic(point: ECEFPoint, config: SolverConfig = SolverConfig()) -> GeodeticCoordinate:
    """
    Converts an ECEF position to a WGS84 geodetic coordinate.

    Latitude is refined with exactly ``config.iterations`` rounds (10 by default)
    and no convergence check, so the cost is fixed and the result deterministic.
    WGS84's small eccentricity makes 10 rounds more than enough away from the
    polar axis.

    Two regions are degenerate and get a best-effort answer plus a
    ``ReducedPrecisionWarning``. Altitude there comes from the projection form
    ``p cos(lat) + z sin(lat) - a sqrt(1 - e² sin²(lat))``:

    * near the polar axis (``p < config.polar_axis_tolerance_m``) longitude is
      ill-defined and ``p / cos(lat)`` is ill-conditioned. Latitude is still
      refined; points exactly on the axis get ±90 (+90 for the center).
    * deep inside the Earth, when a round would see ``N + alt <= e² N``, the
      update no longer converges. Refinement stops and the latitude reached so
      far (the initial estimate ``atan2(z, p (1 - e²))`` if no round ran) is kept.

    Args:
        point (ECEFPoint): ECEF position in meters.
        config (SolverConfig, optional): Solver settings. Defaults to SolverConfig().

    Returns:
        GeodeticCoordinate: Position with longitude in (-180, 180].
    """
    p = math.hypot(point.x, point.y)
    if p == 0.0:
        return _on_axis(point, "to_geodetic")

    lat = _initial_latitude(point, p)
    alt = 0.0
    for _ in range(config.iterations):
        if _inside_evolute(p, lat):
            log.debug("to_geodetic: point %.3g m from the center, refinement stopped",
                      math.hypot(p, point.z))
            return _best_effort(point, p, lat, "lies too close to the center of the Earth")
        lat, alt = _refine(point.z, p, lat)

    if p < config.polar_axis_tolerance_m:
        log.debug("to_geodetic: p=%.3g m below polar axis tolerance %.3g m", p, config.polar_axis_tolerance_m)
        return _best_effort(point, p, lat, f"lies {p:.3g} m from the polar axis; longitude is ill-defined")

    lon = math.degrees(math.atan2(point.y, point.x))
    return GeodeticCoordinate(lat_deg=math.degrees(lat), lon_deg=lon, alt_m=alt)


def to_geodetic_converged(
    point: ECEFPoint,
    tolerance_rad: float = 1e-12,
    max_iterations: int = 50,
    config: SolverConfig = SolverConfig(),
) -> GeodeticCoordinate:
    """
    Variant of :func:`to_geodetic` that stops once the latitude settles.

    Uses the same update rule, but iterates until the latitude changes by less
    than ``tolerance_rad`` or ``max_iterations`` rounds have run.
    ``config.iterations`` is ignored; the polar-axis and deep-interior
    handling is the same.

    Args:
        point (ECEFPoint): ECEF position in meters.
        tolerance_rad (float, optional): Latitude change that counts as converged. Defaults to 1e-12.
        max_iterations (int, optional): Upper bound on refinement rounds. Defaults to 50.
        config (SolverConfig, optional): Solver settings. Defaults to SolverConfig().

    Returns:
        GeodeticCoordinate: Position with longitude in (-180, 180].
    """
    if not tolerance_rad > 0.0:
        raise InvalidInputError(f"tolerance_rad must be > 0, got {tolerance_rad!r}")
    if max_iterations < 1:
        raise InvalidInputError(f"max_iterations must be >= 1, got {max_iterations!r}")

    p = math.hypot(point.x, point.y)
    if p == 0.0:
        return _on_axis(point, "to_geodetic_converged")

    lat = _initial_latitude(point, p)
    alt = 0.0
    rounds: Optional[int] = None
    for i in range(max_iterations):
        if _inside_evolute(p, lat):
            log.debug("to_geodetic_converged: point %.3g m from the center, refinement stopped",
                      math.hypot(p, point.z))
            return _best_effort(point, p, lat, "lies too close to the center of the Earth")
        prev = lat
        lat, alt = _refine(point.z, p, lat)
        if abs(lat - prev) < tolerance_rad:
            rounds = i + 1
            break
    if rounds is None:
        log.debug("to_geodetic_converged: no convergence after %d rounds", max_iterations)
    else:
        log.debug("to_geodetic_converged: converged after %d rounds", rounds)

    if p < config.polar_axis_tolerance_m:
        log.debug("to_geodetic_converged: p=%.3g m below polar axis tolerance %.3g m",
                  p, config.polar_axis_tolerance_m)
        return _best_effort(point, p, lat, f"lies {p:.3g} m from the polar axis; longitude is ill-defined")

    lon = math.degrees(math.atan2(point.y, point.x))
    return GeodeticCoordinate(lat_deg=math.degrees(lat), lon_deg=lon, alt_m=alt)
