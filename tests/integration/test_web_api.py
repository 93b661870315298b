"""Integration tests for the REST API."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from smartwall.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


def _wall(*widths: int, **extra: Any) -> dict[str, Any]:
    wall: dict[str, Any] = {
        "width_mm": 5700,
        "height_mm": 2500,
        "modules": [
            {"id": f"m{i}", "width_mm": width} for i, width in enumerate(widths, 1)
        ],
    }
    wall.update(extra)
    return wall


class TestHealthAndCatalog:
    """Tests for the read-only endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_cross_origin_without_credentials(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "https://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers

    def test_catalog(self, client: TestClient) -> None:
        data = client.get("/api/v1/catalog").json()

        assert data["widths_mm"] == [400, 600, 800, 1000, 1100, 1200]
        assert data["width_max_mm"] == 6000
        assert data["quotation_width_max_mm"] == 10000
        assert data["capacity_tolerance_mm"] == 100


class TestDimensionsEndpoint:
    """Tests for POST /api/v1/dimensions."""

    def test_valid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/dimensions",
            json={"width": "5.7m", "height": "2500", "accessories": {"tv": True}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["width_mm"] == 5700
        assert data["is_valid"] is True
        assert data["hints"] == ["TV requires 2 x 1000mm modules (2000mm)"]

    def test_unreadable_is_missing(self, client: TestClient) -> None:
        data = client.post("/api/v1/dimensions", json={"width": "abc"}).json()

        assert data["width_mm"] is None
        assert data["width_status"] == "missing"
        assert data["is_valid"] is False

    def test_overlong_width_is_missing(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/dimensions", json={"width": "9" * 40, "height": "2500"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["width_mm"] is None
        assert data["width_status"] == "missing"

    def test_oversize(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/dimensions", json={"width": 6001, "height": 2500}
        ).json()

        assert data["is_oversize"] is True
        assert data["width_status"] == "oversize"


class TestWallEndpoints:
    """Tests for the /api/v1/wall endpoints."""

    def test_add_refused_then_accepted(self, client: TestClient) -> None:
        wall = _wall(1200, 1200, 1200, 1200)
        refused = client.post(
            "/api/v1/wall/add", json={"wall": wall, "width_mm": 1200}
        ).json()

        assert refused["accepted"] is False
        assert refused["fit"] == "too_large"
        assert refused["wall"]["total_width_mm"] == 4800
        assert refused["wall"]["utilization_percent"] == 84.2

        accepted = client.post(
            "/api/v1/wall/add", json={"wall": wall, "width_mm": 600}
        ).json()
        assert accepted["accepted"] is True
        assert accepted["wall"]["total_width_mm"] == 5400
        assert len(accepted["placed"]) == 1

    def test_add_non_catalog_width(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/wall/add", json={"wall": _wall(), "width_mm": 500}
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_wall"

    def test_out_of_bounds_wall(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/wall/add",
            json={"wall": _wall(width_mm=800), "width_mm": 400},
        )
        assert response.status_code == 422

    def test_oversize_wall_with_quotation(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/wall/add",
            json={
                "wall": _wall(width_mm=7000, allow_custom_quotation=True),
                "width_mm": 1200,
            },
        )

        assert response.status_code == 200
        assert response.json()["wall"]["is_oversize"] is True

    def test_reserve(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/wall/reserve", json={"wall": _wall(1200), "slot": "tv"}
        ).json()

        assert data["accepted"] is True
        assert [m["accessory_slot"] for m in data["placed"]] == ["tv", "tv"]
        assert data["wall"]["total_width_mm"] == 3200

    def test_reserve_unknown_slot(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/wall/reserve", json={"wall": _wall(), "slot": "sofa"}
        )
        assert response.status_code == 422

    def test_remove(self, client: TestClient) -> None:
        wall = _wall(1200, 800)
        removed = client.post(
            "/api/v1/wall/remove", json={"wall": wall, "module_id": "m1"}
        ).json()
        unknown = client.post(
            "/api/v1/wall/remove", json={"wall": wall, "module_id": "zz"}
        ).json()

        assert removed["removed"] is True
        assert removed["wall"]["total_width_mm"] == 800
        assert unknown["removed"] is False
        assert unknown["wall"]["total_width_mm"] == 2000

    def test_clear(self, client: TestClient) -> None:
        data = client.post("/api/v1/wall/clear", json={"wall": _wall(1200)}).json()

        assert data["modules"] == []
        assert data["state"] == "empty"
        assert data["remaining_mm"] == 5700

    def test_palette(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/wall/palette", json={"wall": _wall(1200, 1200, 1200, 1200)}
        ).json()
        palette = {item["width_mm"]: item for item in data["palette"]}

        assert data["remaining_mm"] == 900
        assert palette[800]["status"] == "optimal"
        assert palette[1200]["is_enabled"] is False

    def test_completion(self, client: TestClient) -> None:
        wall = _wall(1200, accessories={"tv": True})
        advisory = client.post("/api/v1/wall/completion", json={"wall": wall}).json()
        strict = client.post(
            "/api/v1/wall/completion",
            json={"wall": wall, "accessory_enforcement": "strict"},
        ).json()

        assert advisory["is_complete"] is True
        assert advisory["warnings"]
        assert strict["is_complete"] is False


class TestRecommendationsEndpoint:
    """Tests for POST /api/v1/recommendations."""

    def test_recommendations(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/recommendations", json={"width": "5.7m"}
        ).json()

        assert data["width_mm"] == 5700
        assert 0 < len(data["configurations"]) <= 5
        assert data["configurations"][0]["is_optimal"] is True

    def test_invalid_width(self, client: TestClient) -> None:
        response = client.post("/api/v1/recommendations", json={"width": "abc"})

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_dimension"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/validate",
            json={
                "config": {
                    "wall": {"width": "5.7m", "height": 2500},
                    "modules": [{"width": 1200}],
                }
            },
        ).json()

        assert data["is_valid"] is True
        assert data["exit_code"] == 0

    def test_errors(self, client: TestClient) -> None:
        data = client.post(
            "/api/v1/validate",
            json={"config": {"wall": {"width": "800", "height": 2500}}},
        ).json()

        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "wall.width"

    def test_schema_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "9"}}
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"
