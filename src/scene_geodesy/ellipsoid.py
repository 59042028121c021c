"""WGS84 reference ellipsoid constants."""

WGS84_A: float = 6378137.0  # semi-major axis, meters
WGS84_B: float = 6356752.314245  # semi-minor axis, meters
WGS84_E2: float = 1.0 - (WGS84_B * WGS84_B) / (WGS84_A * WGS84_A)  # first eccentricity squared
