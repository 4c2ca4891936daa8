"""Tests for the geodesic engine boundary helpers."""

import pytest
from geographiclib.geodesic import Geodesic

from perpendicular_snap.core.geometry import (
    geodesic_direct,
    geodesic_inverse,
    get_geodesic,
    normalize_azimuth,
)
from perpendicular_snap.core.models import SnapOptions


class TestNormalizeAzimuth:
    """Tests for normalize_azimuth."""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0.0),
        (90.0, 90.0),
        (180.0, 180.0),
        (-180.0, 180.0),
        (270.0, -90.0),
        (-270.0, 90.0),
        (540.0, 180.0),
        (-190.0, 170.0),
    ])
    def test_wraps_into_half_open_range(self, value, expected):
        assert normalize_azimuth(value) == pytest.approx(expected)


class TestGetGeodesic:
    """Tests for get_geodesic."""

    def test_default_is_wgs84(self):
        assert get_geodesic() is Geodesic.WGS84
        assert get_geodesic(SnapOptions()) is Geodesic.WGS84

    def test_custom_ellipsoid(self):
        # GRS80
        opts = SnapOptions(semi_major_axis=6378137.0, flattening=1 / 298.257222101)
        geod = get_geodesic(opts)
        assert geod is not Geodesic.WGS84
        assert geod.a == 6378137.0
        assert geod.f == pytest.approx(1 / 298.257222101)

    def test_custom_ellipsoid_is_cached(self):
        opts = SnapOptions(semi_major_axis=6377397.155, flattening=1 / 299.1528128)
        assert get_geodesic(opts) is get_geodesic(opts)

    def test_sphere(self):
        geod = get_geodesic(SnapOptions(semi_major_axis=6371000.0, flattening=0.0))
        _, distance = geodesic_inverse(geod, (0.0, 0.0), (0.0, 1.0))
        assert distance == pytest.approx(6371000.0 * 3.141592653589793 / 180.0, rel=1e-12)


class TestInverseDirect:
    """Tests for geodesic_inverse and geodesic_direct."""

    def test_inverse_due_north(self):
        azimuth, distance = geodesic_inverse(Geodesic.WGS84, (0.0, 0.0), (1.0, 0.0))
        assert azimuth == pytest.approx(0.0, abs=1e-12)
        # One degree of latitude at the equator
        assert distance == pytest.approx(110574.4, abs=1.0)

    def test_direct_inverts_inverse(self):
        start = (-33.9, 151.2)
        end = (-34.1, 151.5)
        azimuth, distance = geodesic_inverse(Geodesic.WGS84, start, end)
        lat, lon = geodesic_direct(Geodesic.WGS84, start, azimuth, distance)
        assert lat == pytest.approx(end[0], abs=1e-9)
        assert lon == pytest.approx(end[1], abs=1e-9)

    def test_direct_accepts_unwrapped_azimuth(self):
        start = (45.0, 7.0)
        a = geodesic_direct(Geodesic.WGS84, start, 260.0, 1000.0)
        b = geodesic_direct(Geodesic.WGS84, start, -100.0, 1000.0)
        assert a[0] == pytest.approx(b[0], abs=1e-12)
        assert a[1] == pytest.approx(b[1], abs=1e-12)
