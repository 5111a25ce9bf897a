import itertools
import math

import pytest

from glasscoverage.geo import (
    coordinates_from_zip,
    distance_miles,
    haversine_miles,
    is_within_service_area,
)
from glasscoverage.models import Coordinate

LOS_ANGELES = Coordinate(34.05, -118.25)


def test_haversine_zero_distance() -> None:
    assert haversine_miles(40.0, -88.0, 40.0, -88.0) == 0.0


def test_haversine_known_distance_approx() -> None:
    # Chicago to New York is roughly 711 miles.
    dist = haversine_miles(41.8781, -87.6298, 40.7128, -74.0060)
    assert 680 <= dist <= 740


def test_resolve_known_prefixes() -> None:
    assert coordinates_from_zip("90210") == Coordinate(34.05, -118.25)
    assert coordinates_from_zip("92101") == Coordinate(32.72, -117.16)
    assert coordinates_from_zip("10001") == Coordinate(40.71, -74.01)
    assert coordinates_from_zip("60601") == Coordinate(41.88, -87.63)


def test_resolve_uses_only_first_three_characters() -> None:
    assert coordinates_from_zip("90210") == coordinates_from_zip("90299")
    assert coordinates_from_zip("92101-1234") == coordinates_from_zip("921")
    assert coordinates_from_zip("921ab") == coordinates_from_zip("92101")


@pytest.mark.parametrize("zip_code", ["", None, "1", "92", "99999", "abcde"])
def test_resolve_not_found_returns_none(zip_code) -> None:
    assert coordinates_from_zip(zip_code) is None


def test_los_angeles_to_san_diego() -> None:
    la = coordinates_from_zip("90210")
    sd = coordinates_from_zip("92101")
    assert 111 <= distance_miles(la, sd) <= 113
    assert is_within_service_area(sd, la, 150) is True
    assert is_within_service_area(sd, la, 50) is False


def test_new_york_to_los_angeles() -> None:
    dist = distance_miles(coordinates_from_zip("10001"), coordinates_from_zip("90210"))
    assert 2400 <= dist <= 2500


def test_distance_identity_and_symmetry() -> None:
    points = [coordinates_from_zip(z) for z in ("02108", "33101", "60601", "90210", "98101", "34001")]
    for a in points:
        assert distance_miles(a, a) == 0
    for a, b in itertools.combinations(points, 2):
        assert distance_miles(a, b) == distance_miles(b, a)


def test_triangle_inequality() -> None:
    points = [coordinates_from_zip(z) for z in ("02108", "33101", "80202", "90210", "99201")]
    for a, b, c in itertools.permutations(points, 3):
        assert distance_miles(a, c) <= distance_miles(a, b) + distance_miles(b, c) + 1e-9


def test_boundary_is_inclusive() -> None:
    assert is_within_service_area(LOS_ANGELES, LOS_ANGELES, 0) is True

    sd = coordinates_from_zip("92101")
    exact = distance_miles(sd, LOS_ANGELES)
    assert is_within_service_area(sd, LOS_ANGELES, exact) is True
    assert is_within_service_area(sd, LOS_ANGELES, exact - 0.001) is False


def test_negative_radius_is_never_in_range() -> None:
    assert is_within_service_area(LOS_ANGELES, LOS_ANGELES, -1) is False


def test_antipodal_points_are_half_the_circumference() -> None:
    expected = math.pi * 3959
    assert haversine_miles(-74.6, 0.0, 74.6, 180.0) == pytest.approx(expected)
    for lat in range(-90, 91, 5):
        point = Coordinate(float(lat), 10.0)
        opposite = Coordinate(float(-lat), -170.0)
        assert distance_miles(point, opposite) == pytest.approx(expected)
