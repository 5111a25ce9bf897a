from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from glasscoverage import __version__
from glasscoverage.config import load_config
from glasscoverage.coverage import CoverageChecker, LocationMatch
from glasscoverage.geo import coordinates_from_zip, distance_miles, zip_prefix
from glasscoverage.locations import locations_in_state
from glasscoverage.models import AppConfig

LOG = logging.getLogger(__name__)

app = FastAPI(title="Auto Glass Service Coverage")

ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = ROOT / "config.yaml"


def _load_app_config() -> AppConfig:
    return load_config(CONFIG_PATH if CONFIG_PATH.exists() else None)


def _build_checker(config: AppConfig | None = None) -> CoverageChecker:
    return CoverageChecker.from_config(config or _load_app_config())


def _require_zip(zip_code: str, field_name: str = "zip_code") -> str:
    value = zip_code.strip()
    if not value:
        raise HTTPException(status_code=400, detail=f"{field_name} is required")
    return value


def _match_payload(match: LocationMatch) -> dict[str, object]:
    return {
        "id": match.location.id,
        "name": match.location.name,
        "state": match.location.state,
        "phone": match.location.phone,
        "service_radius": match.location.service_radius,
        "distance_miles": round(match.distance_miles, 1),
        "in_range": match.in_range,
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/app-meta")
def app_meta() -> dict[str, object]:
    return {"version": __version__}


@app.get("/zip/{zip_code}")
def zip_lookup(zip_code: str) -> dict[str, object]:
    coordinate = coordinates_from_zip(zip_code)
    if coordinate is None:
        raise HTTPException(status_code=404, detail=f"No coordinates for ZIP {zip_code}")
    return {"zip_code": zip_code, "prefix": zip_prefix(zip_code), **coordinate.as_dict()}


@app.get("/distance")
def zip_distance(from_zip: str = "", to_zip: str = "") -> dict[str, object]:
    origin_zip = _require_zip(from_zip, "from_zip")
    target_zip = _require_zip(to_zip, "to_zip")
    origin = coordinates_from_zip(origin_zip)
    target = coordinates_from_zip(target_zip)
    unresolved = [z for z, c in ((origin_zip, origin), (target_zip, target)) if c is None]
    if unresolved:
        raise HTTPException(status_code=404, detail=f"No coordinates for ZIP {', '.join(unresolved)}")
    return {
        "from_zip": origin_zip,
        "to_zip": target_zip,
        "distance_miles": round(distance_miles(origin, target), 1),
    }


@app.get("/coverage")
def coverage(zip_code: str = "", radius_miles: float | None = None, center_zip: str = "") -> JSONResponse:
    value = _require_zip(zip_code)
    if radius_miles is not None and radius_miles <= 0:
        raise HTTPException(status_code=400, detail="radius_miles must be positive")
    config = _load_app_config()
    checker = _build_checker(config)

    if center_zip.strip():
        point = coordinates_from_zip(value)
        center = coordinates_from_zip(center_zip.strip())
        if point is None or center is None:
            return JSONResponse(
                {
                    "zip_code": value,
                    "center_zip": center_zip.strip(),
                    "covered": False,
                    "message": f"Please call {checker.fallback_phone} to confirm coverage.",
                }
            )
        radius = radius_miles if radius_miles is not None else config.default_radius_miles
        covered = checker.check_point(point, center, radius)
        LOG.info("zip=%s center=%s radius=%s covered=%s", value, center_zip.strip(), radius, covered)
        return JSONResponse(
            {
                "zip_code": value,
                "center_zip": center_zip.strip(),
                "radius_miles": radius,
                "distance_miles": round(distance_miles(point, center), 1),
                "covered": covered,
            }
        )

    result = checker.check_zip(value)
    return JSONResponse(
        {
            "zip_code": result.zip_code,
            "coordinate": result.coordinate.as_dict() if result.coordinate else None,
            "covered": result.covered,
            "message": result.message,
            "serving": _match_payload(result.serving) if result.serving else None,
            "nearest": [_match_payload(m) for m in result.matches],
        }
    )


@app.get("/locations")
def locations(state: str = "") -> JSONResponse:
    checker = _build_checker()
    rows = locations_in_state(checker.locations, state) if state.strip() else checker.locations
    return JSONResponse(
        {
            "count": len(rows),
            "locations": [location.model_dump(mode="json") for location in rows],
        }
    )
