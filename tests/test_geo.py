"""Tests for great-circle distance helpers."""
import pytest
from hypothesis import given, strategies as st

from wanderly.domain.services.geo import distance_km, km_to_miles, travel_minutes
from wanderly.domain.value_objects.coordinates import Coordinates, Location
from wanderly.domain.value_objects.enums import TravelMode

latitudes = st.floats(min_value=-90, max_value=90, allow_nan=False)
longitudes = st.floats(min_value=-180, max_value=180, allow_nan=False)
points = st.builds(Coordinates, lat=latitudes, lng=longitudes)


@pytest.mark.unit
class TestDistanceKm:
    """Test haversine distance."""

    def test_one_degree_of_longitude_on_equator(self):
        d = distance_km(Coordinates(0, 0), Coordinates(0, 1))
        assert d == pytest.approx(111.195, abs=0.001)

    def test_accepts_locations_with_address(self):
        red_fort = Location(lat=28.6562, lng=77.2410, address="New Delhi")
        taj_mahal = Location(lat=27.1751, lng=78.0421, address="Agra")
        assert 175 < distance_km(red_fort, taj_mahal) < 190

    def test_antipodes_are_half_the_circumference_apart(self):
        d = distance_km(Coordinates(0, 0), Coordinates(0, 180))
        assert d == pytest.approx(6371 * 3.141592653589793, rel=1e-9)

    @given(points)
    def test_distance_to_self_is_zero(self, p):
        assert distance_km(p, p) == 0

    @given(points, points)
    def test_distance_is_symmetric(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-9)

    @given(points, points)
    def test_distance_is_non_negative(self, a, b):
        assert distance_km(a, b) >= 0


@pytest.mark.unit
def test_km_to_miles():
    assert km_to_miles(10) == pytest.approx(6.21371)
    assert km_to_miles(0) == 0


@pytest.mark.unit
@pytest.mark.parametrize("mode, minutes", [
    (TravelMode.DRIVING, 25),
    (TravelMode.WALKING, 125),
    ("transit", 38),
])
def test_travel_minutes_by_mode(mode, minutes):
    assert travel_minutes(12.5, mode) == minutes


@pytest.mark.unit
def test_travel_minutes_defaults_to_driving():
    assert travel_minutes(111.195) == 222
