from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from glasscoverage import __version__, api


@pytest.fixture
def client(tmp_path: Path, monkeypatch) -> TestClient:
    monkeypatch.setattr(api, "CONFIG_PATH", tmp_path / "missing.yaml")
    return TestClient(api.app)


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_zip_lookup(client: TestClient) -> None:
    response = client.get("/zip/90210")
    assert response.status_code == 200
    assert response.json() == {"zip_code": "90210", "prefix": "902", "lat": 34.05, "lng": -118.25}


def test_zip_lookup_not_found(client: TestClient) -> None:
    assert client.get("/zip/99999").status_code == 404


def test_distance(client: TestClient) -> None:
    payload = client.get("/distance", params={"from_zip": "90210", "to_zip": "92101"}).json()
    assert 111 <= payload["distance_miles"] <= 113


def test_coverage_requires_zip(client: TestClient) -> None:
    assert client.get("/coverage").status_code == 400


def test_coverage_default_locations(client: TestClient) -> None:
    payload = client.get("/coverage", params={"zip_code": "92101"}).json()
    assert payload["covered"] is True
    assert payload["serving"]["id"] == "ca-san-diego"
    assert payload["coordinate"] == {"lat": 32.72, "lng": -117.16}


def test_coverage_unknown_zip_is_not_an_error(client: TestClient) -> None:
    response = client.get("/coverage", params={"zip_code": "99999"})
    assert response.status_code == 200
    assert response.json()["covered"] is False
    assert "(760) 715-3400" in response.json()["message"]


def test_coverage_against_explicit_center(client: TestClient) -> None:
    params = {"zip_code": "92101", "center_zip": "90210"}
    assert client.get("/coverage", params={**params, "radius_miles": 150}).json()["covered"] is True
    assert client.get("/coverage", params={**params, "radius_miles": 50}).json()["covered"] is False
    assert client.get("/coverage", params={**params, "radius_miles": -5}).status_code == 400


def test_locations_by_state(client: TestClient) -> None:
    payload = client.get("/locations", params={"state": "ca"}).json()
    assert payload["count"] == 10
    assert all(row["state"] == "CA" for row in payload["locations"])


def test_coverage_rejects_non_positive_radius_without_center(client: TestClient) -> None:
    response = client.get("/coverage", params={"zip_code": "92101", "radius_miles": -5})
    assert response.status_code == 400
    assert client.get("/coverage", params={"zip_code": "92101", "radius_miles": 0}).status_code == 400


def test_coverage_unresolved_center_falls_back_to_phone(client: TestClient) -> None:
    response = client.get("/coverage", params={"zip_code": "92101", "center_zip": "99999"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["covered"] is False
    assert payload["center_zip"] == "99999"
    assert "(760) 715-3400" in payload["message"]


def test_locations_without_filter(client: TestClient) -> None:
    payload = client.get("/locations").json()
    assert payload["count"] == 113
    assert len(payload["locations"]) == 113


def test_app_meta(client: TestClient) -> None:
    assert client.get("/app-meta").json() == {"version": __version__}
