import dataclasses

import pytest

from glasscoverage.models import Coordinate
from glasscoverage.zip_table import ZIP_PREFIX_COORDINATES, covered_prefixes


def test_keys_are_three_digit_prefixes() -> None:
    for prefix in ZIP_PREFIX_COORDINATES:
        assert len(prefix) == 3
        assert prefix.isdigit()


def test_coordinates_in_range() -> None:
    for coordinate in ZIP_PREFIX_COORDINATES.values():
        assert -90 <= coordinate.latitude <= 90
        assert -180 <= coordinate.longitude <= 180


def test_table_has_gaps() -> None:
    assert "999" not in ZIP_PREFIX_COORDINATES
    assert "000" not in ZIP_PREFIX_COORDINATES


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ZIP_PREFIX_COORDINATES["999"] = Coordinate(0.0, 0.0)  # type: ignore[index]


def test_coordinate_is_immutable() -> None:
    coordinate = ZIP_PREFIX_COORDINATES["100"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        coordinate.latitude = 0.0  # type: ignore[misc]


def test_covered_prefixes_sorted() -> None:
    prefixes = covered_prefixes()
    assert prefixes == sorted(prefixes)
    assert prefixes[0] == "010"
    assert len(prefixes) == len(ZIP_PREFIX_COORDINATES)
