from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float

    @property
    def lat(self) -> float:
        return self.latitude

    @property
    def lng(self) -> float:
        return self.longitude

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


class ServiceLocation(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    address: str = "Mobile Service"
    city: str
    state: str = Field(min_length=2, max_length=2)
    zip: str
    phone: str
    lat: float
    lng: float
    service_radius: float = Field(gt=0)
    is_active: bool = True

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


class AppConfig(BaseModel):
    fallback_phone: str = "(760) 715-3400"
    nearest_limit: int = Field(default=3, ge=1, le=10)
    default_radius_miles: float = Field(default=50.0, gt=0)
    locations: list[ServiceLocation] | None = None
