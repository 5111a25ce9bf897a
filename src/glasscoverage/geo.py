from __future__ import annotations

import math

from glasscoverage.models import Coordinate
from glasscoverage.zip_table import ZIP_PREFIX_COORDINATES

EARTH_RADIUS_MILES = 3959.0
ZIP_PREFIX_LENGTH = 3


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push a past 1 for near-antipodal points.
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_miles(a: Coordinate, b: Coordinate) -> float:
    return haversine_miles(a.latitude, a.longitude, b.latitude, b.longitude)


def zip_prefix(zip_code: str | None) -> str | None:
    if not zip_code or len(zip_code) < ZIP_PREFIX_LENGTH:
        return None
    return zip_code[:ZIP_PREFIX_LENGTH]


def coordinates_from_zip(zip_code: str | None) -> Coordinate | None:
    prefix = zip_prefix(zip_code)
    if prefix is None:
        return None
    return ZIP_PREFIX_COORDINATES.get(prefix)


def is_within_service_area(point: Coordinate, center: Coordinate, radius_miles: float) -> bool:
    # Inclusive: a point exactly on the radius is in the area.
    return distance_miles(point, center) <= radius_miles
