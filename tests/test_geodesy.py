"""
Tests for great-circle distances, the earth radius table and coordinate
normalisation.
"""

import math

import pytest

from geostats.core.geodesy import (
    to_radians,
    to_degrees,
    haversine_distance,
    vincenty_distance,
    vincenty_distance_km,
    distance,
    coords_from,
)
from geostats.core.models import (
    GeoPoint,
    DistanceOptions,
    DistanceMethod,
    EARTH_RADII,
    UnknownUnitError,
    validate_earth_radius,
    WGS84_MEAN_RADIUS,
)

LONDON = (-0.1, 51.5)
PARIS = (2.35, 48.85)


class TestAngles:
    """Tests for degree/radian conversion."""

    def test_round_trip(self):
        assert to_degrees(to_radians(123.456)) == pytest.approx(123.456)

    def test_known_values(self):
        assert to_radians(180.0) == pytest.approx(math.pi)
        assert to_degrees(math.pi / 2) == pytest.approx(90.0)


class TestHaversine:
    """Tests for haversine_distance."""

    @pytest.mark.parametrize("radius", [1.0, 6371.009, WGS84_MEAN_RADIUS])
    def test_zero_distance(self, radius):
        assert haversine_distance(0, 0, 0, 0, radius) == 0.0

    def test_london_paris(self):
        d = haversine_distance(*LONDON, *PARIS, 6_371_000)
        assert d == pytest.approx(343_000, abs=2_000)

    def test_default_radius_is_meters(self):
        assert haversine_distance(*LONDON, *PARIS) == haversine_distance(*LONDON, *PARIS, WGS84_MEAN_RADIUS)

    def test_result_uses_radius_unit(self):
        m = haversine_distance(*LONDON, *PARIS, 6_371_000.0)
        km = haversine_distance(*LONDON, *PARIS, 6_371.0)
        assert km == pytest.approx(m / 1000.0)

    def test_quarter_circle(self):
        assert haversine_distance(0, 0, 90, 0, 1.0) == pytest.approx(math.pi / 2)
        assert haversine_distance(0, 0, 0, 90, 1.0) == pytest.approx(math.pi / 2)

    def test_antipodal(self):
        assert haversine_distance(0, 0, 180, 0, 1.0) == pytest.approx(math.pi)

    def test_symmetric(self):
        assert haversine_distance(*LONDON, *PARIS) == pytest.approx(haversine_distance(*PARIS, *LONDON))


class TestVincenty:
    """Tests for vincenty_distance."""

    def test_zero_distance(self):
        assert vincenty_distance(10, 20, 10, 20) == 0.0

    def test_agrees_with_haversine(self):
        assert vincenty_distance(*LONDON, *PARIS) == pytest.approx(haversine_distance(*LONDON, *PARIS), rel=1e-9)

    def test_result_uses_radius_unit(self):
        assert vincenty_distance(*LONDON, *PARIS, 6_371.0) == pytest.approx(343.0, abs=2.0)

    def test_antipodal(self):
        assert vincenty_distance(0, 0, 180, 0, 1.0) == pytest.approx(math.pi)
        assert vincenty_distance(0, 30, 180, -30, 1.0) == pytest.approx(math.pi)

    def test_km_variant(self):
        km = vincenty_distance_km(*LONDON, *PARIS)
        assert km == pytest.approx(vincenty_distance(*LONDON, *PARIS) / 1000.0)
        assert km == pytest.approx(343.0, abs=2.0)


class TestEarthRadius:
    """Tests for the unit lookup table."""

    @pytest.mark.parametrize(
        "unit, expected",
        [
            ("m", 6_371_008.7714),
            ("metres", 6_371_008.7714),
            ("km", 6_371.009),
            ("KM", 6_371.009),
            ("Kilometers", 6_371.009),
            ("mi", 3_958.761),
            ("nm", 3_440.070),
            ("NauticalMiles", 3_440.070),
            ("yd", 6_967_420),
            ("ft", 20_902_260),
            ("feets", 20_902_260),
        ],
    )
    def test_known_units(self, unit, expected):
        assert validate_earth_radius(unit) == expected

    def test_every_table_key_resolves(self):
        for unit, radius in EARTH_RADII.items():
            assert validate_earth_radius(unit.upper()) == radius

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError, match="furlongs") as excinfo:
            validate_earth_radius("furlongs")
        assert excinfo.value.unit == "furlongs"

    def test_unknown_unit_is_value_error(self):
        with pytest.raises(ValueError):
            validate_earth_radius("parsec")


class TestDistanceDispatch:
    """Tests for distance() with DistanceOptions."""

    def test_default_is_haversine_meters(self):
        d = distance(GeoPoint(*LONDON), GeoPoint(*PARIS))
        assert d == pytest.approx(haversine_distance(*LONDON, *PARIS, validate_earth_radius("m")))

    def test_unit_option(self):
        opts = DistanceOptions(unit="mi")
        assert distance(LONDON, PARIS, opts) == pytest.approx(213.0, abs=2.0)

    def test_vincenty_option(self):
        opts = DistanceOptions(method="vincenty", unit="km")
        assert opts.method is DistanceMethod.VINCENTY
        assert distance(LONDON, PARIS, opts) == pytest.approx(
            vincenty_distance(*LONDON, *PARIS, 6_371.009)
        )

    def test_explicit_radius(self):
        opts = DistanceOptions(earth_radius=1.0)
        assert distance((0, 0), (180, 0), opts) == pytest.approx(math.pi)


class TestCoordsFrom:
    """Tests for coords_from."""

    def test_lat_lng_sequence(self):
        assert coords_from([51.05, 34.4]) == (34.4, 51.05)

    def test_lng_lat_sequence(self):
        assert coords_from([34.4, 51.05], "[lng, lat]") == (34.4, 51.05)

    @pytest.mark.parametrize(
        "coords, fmt",
        [
            ({"latitude": 51.05, "longitude": 34.4}, "{ latitude, longitude }"),
            ({"lat": 51.05, "lon": 34.4}, "{lat,lon}"),
            ({"lat": 51.05, "lng": 34.4}, "{LNG,LAT}"),
            ({"lat": 51.05, "long": 34.4}, "{lat,long}"),
        ],
    )
    def test_mappings(self, coords, fmt):
        assert coords_from(coords, fmt) == (34.4, 51.05)

    def test_geojson(self):
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [34.4, 51.05]}}
        assert coords_from(feature, "geojson") == (34.4, 51.05)

    def test_unknown_format_passes_through(self):
        value = {"x": 1, "y": 2}
        assert coords_from(value, "xy") is value
