from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from glasscoverage.geo import coordinates_from_zip, distance_miles, is_within_service_area
from glasscoverage.locations import DEFAULT_PHONE, DEFAULT_SERVICE_LOCATIONS, active_locations
from glasscoverage.models import AppConfig, Coordinate, ServiceLocation

LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class LocationMatch:
    location: ServiceLocation
    distance_miles: float
    in_range: bool


@dataclass(slots=True)
class CoverageResult:
    zip_code: str
    coordinate: Coordinate | None
    covered: bool
    message: str
    serving: LocationMatch | None = None
    matches: list[LocationMatch] = field(default_factory=list)


class CoverageChecker:
    def __init__(
        self,
        locations: Iterable[ServiceLocation] = DEFAULT_SERVICE_LOCATIONS,
        fallback_phone: str = DEFAULT_PHONE,
        nearest_limit: int = 3,
    ) -> None:
        self.locations = active_locations(locations)
        self.fallback_phone = fallback_phone
        self.nearest_limit = nearest_limit

    @classmethod
    def from_config(cls, config: AppConfig) -> "CoverageChecker":
        locations = config.locations if config.locations is not None else DEFAULT_SERVICE_LOCATIONS
        return cls(
            locations=locations,
            fallback_phone=config.fallback_phone,
            nearest_limit=config.nearest_limit,
        )

    def nearest(self, point: Coordinate, limit: int | None = None) -> list[LocationMatch]:
        matches = [
            LocationMatch(
                location=location,
                distance_miles=distance_miles(point, location.coordinate),
                in_range=is_within_service_area(point, location.coordinate, location.service_radius),
            )
            for location in self.locations
        ]
        matches.sort(key=lambda m: m.distance_miles)
        if limit is None:
            limit = self.nearest_limit
        return matches[:limit]

    def check_point(self, point: Coordinate, center: Coordinate, radius_miles: float) -> bool:
        return is_within_service_area(point, center, radius_miles)

    def check_zip(self, zip_code: str | None) -> CoverageResult:
        cleaned = (zip_code or "").strip()
        coordinate = coordinates_from_zip(cleaned)
        if coordinate is None:
            LOG.info("zip=%s unresolved; falling back to phone confirmation", cleaned)
            return CoverageResult(
                zip_code=cleaned,
                coordinate=None,
                covered=False,
                message=(
                    f"We couldn't place ZIP {cleaned or '(blank)'} on our map. "
                    f"Please call {self.fallback_phone} to confirm coverage."
                ),
            )

        LOG.debug("zip=%s resolved to %s", cleaned, coordinate)
        ranked = self.nearest(coordinate, limit=len(self.locations))
        serving = next((m for m in ranked if m.in_range), None)
        matches = ranked[: self.nearest_limit]

        if serving is not None:
            message = (
                f"Good news! ZIP {cleaned} is served by our {serving.location.name}, "
                f"{serving.location.state} mobile team."
            )
        elif matches:
            closest = matches[0]
            message = (
                f"ZIP {cleaned} is about {closest.distance_miles:.0f} miles from our nearest "
                f"service area ({closest.location.name}, {closest.location.state}). "
                f"Please call {self.fallback_phone} to confirm coverage."
            )
        else:
            message = f"Please call {self.fallback_phone} to confirm coverage."

        LOG.info(
            "zip=%s covered=%s serving=%s",
            cleaned,
            serving is not None,
            serving.location.id if serving else None,
        )
        return CoverageResult(
            zip_code=cleaned,
            coordinate=coordinate,
            covered=serving is not None,
            message=message,
            serving=serving,
            matches=matches,
        )
