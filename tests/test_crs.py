from __future__ import annotations

import numpy as np
import pytest

pytest.importorskip("pyproj")

from scene_geodesy import DEFAULT_SCENE_ORIGIN, GeodeticCoordinate, geodetic_to_enu, to_ecef
from scene_geodesy.crs import (
    make_geocentric_crs,
    make_geodetic_crs,
    make_topocentric_transformer,
    topocentric_to_enu_point,
)


def test_crs_factories():
    assert make_geocentric_crs().to_epsg() == 4978
    assert make_geodetic_crs().to_epsg() == 4979
    assert make_geodetic_crs().is_geographic


def test_geocentric_crs_agrees_with_to_ecef():
    from pyproj import Transformer

    tr = Transformer.from_crs(make_geodetic_crs(), make_geocentric_crs(), always_xy=True)
    for g in [GeodeticCoordinate(-27.5913, -48.5966, 12.0), GeodeticCoordinate(64.1466, -21.9426, 40.0)]:
        x, y, z = tr.transform(g.lon_deg, g.lat_deg, g.alt_m)
        np.testing.assert_allclose(to_ecef(g).as_array(), [x, y, z], atol=1e-4)


def test_topocentric_transformer_matches_geodetic_to_enu():
    origin = GeodeticCoordinate(DEFAULT_SCENE_ORIGIN.lat_deg, DEFAULT_SCENE_ORIGIN.lon_deg, 15.0)
    tr = make_topocentric_transformer(origin)
    for g in [
        GeodeticCoordinate(35.6586, 139.7454, 333.0),
        GeodeticCoordinate(35.7101, 139.8107, 634.0),
        GeodeticCoordinate(35.30, 139.20, -20.0),
    ]:
        e, n, u = tr.transform(g.lon_deg, g.lat_deg, g.alt_m)
        expected = topocentric_to_enu_point(e, n, u)
        got = geodetic_to_enu(g, origin)
        np.testing.assert_allclose(got.as_array(), expected.as_array(), atol=1e-4)


def test_topocentric_to_enu_point_remaps_axes():
    p = topocentric_to_enu_point(3.0, 4.0, 5.0)
    np.testing.assert_array_equal(p.as_array(), [3.0, 5.0, -4.0])
