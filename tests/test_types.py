from __future__ import annotations

import math

import numpy as np
import pytest

from scene_geodesy import (
    WGS84_A,
    WGS84_B,
    WGS84_E2,
    ECEFPoint,
    ENUPoint,
    GeodeticCoordinate,
    InvalidInputError,
    SolverConfig,
    wrap_longitude,
)


def test_wgs84_constants():
    assert WGS84_A == 6378137.0
    assert WGS84_B == 6356752.314245
    assert WGS84_E2 == pytest.approx(0.00669437999, rel=1e-9)


def test_geodetic_coordinate_defaults_and_tuple():
    c = GeodeticCoordinate(35.6762, 139.6503)
    assert c.alt_m == 0.0
    assert c.as_tuple() == (35.6762, 139.6503, 0.0)


@pytest.mark.parametrize("lat", [90.0001, -90.5, 180.0])
def test_latitude_out_of_range_rejected(lat):
    with pytest.raises(InvalidInputError):
        GeodeticCoordinate(lat, 0.0)


@pytest.mark.parametrize(
    "lat,lon,alt",
    [(math.nan, 0.0, 0.0), (0.0, math.inf, 0.0), (0.0, 0.0, -math.inf), ("north", 0.0, 0.0)],
)
def test_non_finite_geodetic_rejected(lat, lon, alt):
    with pytest.raises(InvalidInputError):
        GeodeticCoordinate(lat, lon, alt)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        ECEFPoint(0.0, math.nan, 0.0)


def test_poles_and_negative_altitude_accepted():
    assert GeodeticCoordinate(90.0, 0.0).lat_deg == 90.0
    assert GeodeticCoordinate(-90.0, 0.0, -430.0).alt_m == -430.0


def test_longitude_preserved_raw():
    c = GeodeticCoordinate(10.0, 190.0)
    assert c.lon_deg == 190.0
    assert c.normalized().lon_deg == -170.0
    assert c.normalized().lat_deg == 10.0


@pytest.mark.parametrize(
    "lon,expected",
    [(0.0, 0.0), (179.5, 179.5), (180.0, -180.0), (-180.0, -180.0), (540.0, -180.0), (-190.0, 170.0), (725.0, 5.0)],
)
def test_wrap_longitude(lon, expected):
    assert wrap_longitude(lon) == pytest.approx(expected, abs=1e-12)


def test_enu_point_axis_order():
    p = ENUPoint.from_enu(east=1.0, north=2.0, up=3.0)
    assert (p.east, p.up, p.south) == (1.0, 3.0, -2.0)
    assert p.north == 2.0
    assert p.as_enu() == (1.0, 2.0, 3.0)
    np.testing.assert_array_equal(p.as_array(), [1.0, 3.0, -2.0])


def test_ecef_point_array_helpers():
    a = ECEFPoint.from_array([1.0, 2.0, 3.0])
    b = ECEFPoint(0.5, 0.5, 0.5)
    np.testing.assert_array_equal(a - b, [0.5, 1.5, 2.5])
    with pytest.raises(InvalidInputError):
        ECEFPoint.from_array([1.0, 2.0])


def test_solver_config_validation():
    assert SolverConfig().iterations == 10
    with pytest.raises(InvalidInputError):
        SolverConfig(iterations=0)
    with pytest.raises(InvalidInputError):
        SolverConfig(iterations=2.5)
    with pytest.raises(InvalidInputError):
        SolverConfig(polar_axis_tolerance_m=-1.0)


def test_public_accessors_are_documented():
    from scene_geodesy import RigidTransform4

    members = [
        GeodeticCoordinate.as_tuple,
        GeodeticCoordinate.normalized,
        ECEFPoint.from_array,
        ECEFPoint.as_array,
        ECEFPoint.__sub__,
        ENUPoint.north,
        ENUPoint.as_enu,
        ENUPoint.as_array,
        RigidTransform4.matrix,
        RigidTransform4.rotation,
        RigidTransform4.translation,
        RigidTransform4.__matmul__,
    ]
    for member in members:
        assert member.__doc__ and member.__doc__.strip()
