"""
Unit tests for geodesy module (zones, longitude shift, projection adapter).
"""
import pytest
from hexgeogrids.geodesy import (
    UTMZone,
    _transformers,
    central_meridian,
    lla_from_utm,
    shift_lon,
    shift_needed,
    utm_from_lla,
    utm_zone,
)


@pytest.mark.unit
class TestShift:
    """Test suite for shift_needed and shift_lon."""

    def test_shift_needed_values(self):
        """Test shift values for a few longitudes."""
        assert shift_needed(2) == 1
        assert shift_needed(17) == -2
        assert shift_needed(18) == 3

    def test_shift_needed_negative_longitudes(self):
        """Test that mod is taken into [0, 6) for negative longitudes."""
        assert shift_needed(-1) == -2
        assert shift_needed(-180) == 3
        assert shift_needed(-74) == -1

    def test_shift_needed_range(self):
        """Test that shifts are always in (-3, 3]."""
        for lon in range(-180, 181):
            assert -3 < shift_needed(lon) <= 3

    def test_shift_lon_only_changes_longitude(self):
        """Test that latitude passes through a shift unchanged."""
        assert shift_lon(10.5, -20.25, 2) == (12.5, -20.25)
        assert shift_lon(10.5, -20.25, -2) == (8.5, -20.25)


@pytest.mark.unit
class TestUTMZone:
    """Test suite for utm_zone function."""

    def test_zone_prime_meridian(self):
        """Test zone at the equator on the prime meridian."""
        assert utm_zone(0, 0) == UTMZone(31, True)

    def test_zone_southern_hemisphere(self):
        """Test that southern latitudes are flagged as not north."""
        assert utm_zone(-10, -74) == UTMZone(18, False)

    def test_zone_new_york(self):
        """Test zone for New York City."""
        assert utm_zone(40.7128, -74.0060) == UTMZone(18, True)

    def test_zone_antimeridian(self):
        """Test zones either side of the antimeridian."""
        assert utm_zone(0, -180) == UTMZone(1, True)
        assert utm_zone(0, 180) == UTMZone(1, True)
        assert utm_zone(0, 179.9) == UTMZone(60, True)

    def test_zone_polar(self):
        """Test that polar latitudes use zone 0 (UPS)."""
        assert utm_zone(85, 10) == UTMZone(0, True)
        assert utm_zone(-81, 10) == UTMZone(0, False)
        assert utm_zone(85, 10).is_polar

    def test_zone_limits_still_utm(self):
        """Test that 84N and 80S are still inside UTM."""
        assert utm_zone(84, 0).zone == 31
        assert utm_zone(-80, 0).zone == 31

    def test_shifted_anchor_on_central_meridian(self):
        """Test that every integer anchor shifts onto its zone's central meridian."""
        for lon in range(-180, 181):
            zone = utm_zone(0, lon)
            shifted = lon + shift_needed(lon)
            assert (central_meridian(zone) - shifted) % 360 == 0

    def test_central_meridian_values(self):
        """Test central meridians of a few zones."""
        assert central_meridian(UTMZone(31, True)) == 3
        assert central_meridian(UTMZone(18, True)) == -75
        assert central_meridian(UTMZone(1, False)) == -177


@pytest.mark.unit
class TestConverters:
    """Test suite for utm_from_lla and lla_from_utm."""

    def test_central_meridian_false_easting(self):
        """Test that the central meridian maps to easting 500 km."""
        x, y = utm_from_lla(UTMZone(31, True))(0.0, 3.0)
        assert x == pytest.approx(500000.0, abs=1e-6)
        assert y == pytest.approx(0.0, abs=1e-6)

    def test_northing_at_45_degrees(self):
        """Test northing at 45N on the central meridian (0.9996 x meridian arc)."""
        x, y = utm_from_lla(UTMZone(31, True))(45.0, 3.0)
        assert x == pytest.approx(500000.0, abs=1e-6)
        assert y == pytest.approx(4982950.4, abs=1.0)

    def test_southern_false_northing(self):
        """Test that southern zones use a 10,000 km false northing."""
        _, y = utm_from_lla(UTMZone(31, False))(-10.0, 3.0)
        assert 8.8e6 < y < 9.0e6

    def test_polar_pole_maps_to_false_origin(self):
        """Test that UPS maps the pole to (2000 km, 2000 km)."""
        x, y = utm_from_lla(UTMZone(0, True))(90.0, 0.0)
        assert x == pytest.approx(2000000.0, abs=1e-3)
        assert y == pytest.approx(2000000.0, abs=1e-3)

    def test_roundtrip(self):
        """Test that the inverse converter recovers the input point."""
        zone = UTMZone(18, True)
        x, y = utm_from_lla(zone)(40.7128, -74.0060)
        lat, lon, alt = lla_from_utm(zone)(x, y)

        assert lat == pytest.approx(40.7128, abs=1e-9)
        assert lon == pytest.approx(-74.0060, abs=1e-9)
        assert alt == 0.0

    def test_roundtrip_polar_south(self):
        """Test round trip through the southern UPS zone."""
        zone = UTMZone(0, False)
        x, y = utm_from_lla(zone)(-85.5, 47.0)
        lat, lon, _ = lla_from_utm(zone)(x, y)

        assert lat == pytest.approx(-85.5, abs=1e-9)
        assert lon == pytest.approx(47.0, abs=1e-9)

    def test_transformers_built_once_per_zone(self):
        """Test that converters for the same zone share transformers."""
        zone = UTMZone(33, True)
        assert _transformers(zone) is _transformers(UTMZone(33, True))
        assert _transformers(zone) is not _transformers(UTMZone(33, False))
