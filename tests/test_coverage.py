from glasscoverage.coverage import CoverageChecker
from glasscoverage.geo import coordinates_from_zip
from glasscoverage.models import AppConfig, ServiceLocation


def _location(location_id: str, lat: float, lng: float, radius: float, active: bool = True) -> ServiceLocation:
    return ServiceLocation(
        id=location_id,
        name=location_id.title(),
        city=location_id.title(),
        state="CA",
        zip="00000",
        phone="(555) 000-0000",
        lat=lat,
        lng=lng,
        service_radius=radius,
        is_active=active,
    )


def test_zip_inside_default_service_area() -> None:
    result = CoverageChecker().check_zip("92101")

    assert result.covered is True
    assert result.serving is not None
    assert result.serving.location.id == "ca-san-diego"
    assert "San Diego" in result.message
    assert result.matches[0].location.id == "ca-san-diego"


def test_closest_in_range_location_serves() -> None:
    result = CoverageChecker().check_zip("90210")

    assert result.covered is True
    assert result.serving.location.id == "ca-los-angeles"


def test_unresolved_zip_falls_back_to_phone() -> None:
    checker = CoverageChecker(fallback_phone="(555) 123-4567")
    result = checker.check_zip("99999")

    assert result.covered is False
    assert result.coordinate is None
    assert result.matches == []
    assert "(555) 123-4567" in result.message


def test_blank_zip_is_not_found() -> None:
    result = CoverageChecker().check_zip(None)

    assert result.covered is False
    assert result.zip_code == ""


def test_resolved_zip_outside_every_radius() -> None:
    # Grand Canyon prefix sits well outside Phoenix and Las Vegas radii.
    result = CoverageChecker().check_zip("86301")

    assert result.coordinate is not None
    assert result.covered is False
    assert result.serving is None
    assert len(result.matches) == 3
    assert all(not m.in_range for m in result.matches)
    assert "miles from our nearest" in result.message


def test_nearest_sorted_and_limited() -> None:
    checker = CoverageChecker(
        locations=[
            _location("far", 37.77, -122.42, 40),
            _location("near", 32.72, -117.16, 10),
            _location("middle", 34.05, -118.25, 60),
        ],
        nearest_limit=2,
    )
    matches = checker.nearest(coordinates_from_zip("92101"))

    assert [m.location.id for m in matches] == ["near", "middle"]
    assert matches[0].distance_miles < matches[1].distance_miles


def test_inactive_locations_ignored() -> None:
    checker = CoverageChecker(
        locations=[
            _location("closed", 32.72, -117.16, 50, active=False),
            _location("open", 34.05, -118.25, 60),
        ]
    )
    result = checker.check_zip("92101")

    assert [m.location.id for m in result.matches] == ["open"]
    assert result.covered is False


def test_from_config_uses_configured_locations() -> None:
    config = AppConfig(
        fallback_phone="(555) 999-0000",
        nearest_limit=1,
        locations=[_location("only", 40.71, -74.01, 25)],
    )
    checker = CoverageChecker.from_config(config)

    assert [loc.id for loc in checker.locations] == ["only"]
    result = checker.check_zip("10001")
    assert result.covered is True
    assert result.serving.location.id == "only"


def test_check_point_explicit_radius() -> None:
    checker = CoverageChecker()
    la = coordinates_from_zip("90210")
    sd = coordinates_from_zip("92101")

    assert checker.check_point(sd, la, 150) is True
    assert checker.check_point(sd, la, 50) is False
