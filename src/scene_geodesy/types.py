from __future__ import annotations
from dataclasses import dataclass, replace

import numpy as np

from .errors import check_finite, check_latitude, as_vector3


def wrap_longitude(lon_deg: float) -> float:
    """
    Normalizes a longitude to the range [-180, 180).

    Args:
        lon_deg (float): Longitude in degrees, any finite value.

    Returns:
        float: Equivalent longitude in degrees.
    """
    lon = check_finite("lon_deg", lon_deg)
    wrapped = (lon + 180.0) % 360.0 - 180.0
    # modulo of a tiny negative number can round up to exactly 180
    return -180.0 if wrapped >= 180.0 else wrapped


@dataclass(frozen=True)
class GeodeticCoordinate:
    """
    Represents a WGS84 geodetic position.

    Attributes:
        lat_deg (float): Latitude in degrees, within [-90, 90].
        lon_deg (float): Longitude in degrees. Kept exactly as given, not wrapped.
        alt_m (float): Height above the ellipsoid in meters (default is 0.0).
    """
    lat_deg: float
    lon_deg: float
    alt_m: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "lat_deg", check_latitude(self.lat_deg))
        object.__setattr__(self, "lon_deg", check_finite("lon_deg", self.lon_deg))
        object.__setattr__(self, "alt_m", check_finite("alt_m", self.alt_m))

    def normalized(self) -> "GeodeticCoordinate":
        """
        Returns a copy with the longitude wrapped into [-180, 180).

        Returns:
            GeodeticCoordinate: The same position with a canonical longitude.
        """
        return replace(self, lon_deg=wrap_longitude(self.lon_deg))

    def as_tuple(self) -> tuple[float, float, float]:
        """Returns (lat_deg, lon_deg, alt_m)."""
        return (self.lat_deg, self.lon_deg, self.alt_m)


@dataclass(frozen=True)
class ECEFPoint:
    """
    Represents an Earth-Centered-Earth-Fixed position.

    Attributes:
        x (float): Meters toward (0°, 0°).
        y (float): Meters toward (0°, 90°E).
        z (float): Meters toward the north pole.
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, check_finite(name, getattr(self, name)))

    @classmethod
    def from_array(cls, v) -> "ECEFPoint":
        """Builds a point from an (x, y, z) vector in meters."""
        x, y, z = as_vector3(v, "ECEF vector")
        return cls(float(x), float(y), float(z))

    def as_array(self) -> np.ndarray:
        """Returns (x, y, z) as a float64 numpy vector."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def __sub__(self, other: "ECEFPoint") -> np.ndarray:
        """Returns the ECEF offset from ``other`` to this point as a numpy vector."""
        if not isinstance(other, ECEFPoint):
            return NotImplemented
        return self.as_array() - other.as_array()


@dataclass(frozen=True)
class ENUPoint:
    """
    Represents a local tangent-plane offset in Y-up axis order.

    The components are stored as (east, up, south), i.e. x=east, y=up, z=south,
    so north is the negation of the third component.

    Attributes:
        east (float): Meters east of the origin.
        up (float): Meters above the origin's tangent plane.
        south (float): Meters south of the origin.
    """
    east: float
    up: float
    south: float

    def __post_init__(self):
        for name in ("east", "up", "south"):
            object.__setattr__(self, name, check_finite(name, getattr(self, name)))

    @property
    def north(self) -> float:
        """Meters north of the origin, i.e. ``-south``."""
        return -self.south

    @classmethod
    def from_enu(cls, east: float, north: float, up: float) -> "ENUPoint":
        """
        Builds a point from the canonical east-north-up triple.

        Args:
            east (float): Meters east.
            north (float): Meters north.
            up (float): Meters up.

        Returns:
            ENUPoint: The point in Y-up order.
        """
        return cls(east=east, up=up, south=-north)

    @classmethod
    def from_array(cls, v) -> "ENUPoint":
        """Builds a point from a Y-up ordered (east, up, south) vector."""
        e, u, s = as_vector3(v, "ENU vector")
        return cls(float(e), float(u), float(s))

    def as_enu(self) -> tuple[float, float, float]:
        """Returns the canonical (east, north, up) triple."""
        return (self.east, self.north, self.up)

    def as_array(self) -> np.ndarray:
        """Returns (east, up, south) as a float64 numpy vector."""
        return np.array([self.east, self.up, self.south], dtype=float)
