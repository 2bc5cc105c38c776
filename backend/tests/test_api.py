"""Tests for the FastAPI application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from archbudget.api.app import create_app
from archbudget.config import Settings
from archbudget.data.repository import CostDataRepository
from archbudget.data.seed import SEED_COST_RANGES, SEED_ENGINEERING_COSTS
from archbudget.engine import BudgetEngine

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> TestClient:
    engine = BudgetEngine(CostDataRepository(SEED_COST_RANGES, SEED_ENGINEERING_COSTS))
    return TestClient(create_app(settings=Settings(), engine=engine))


def _addition_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "building_type": "Mid-Range Standard Residential",
        "tier": 1,
        "new_area_ft2": 1000,
        "existing_area_ft2": 4407,
        "site_area_m2": 972.98,
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# GET /api/health, /api/building-types
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "ok",
            "version": "0.1.0",
            "cost_data_version": "2025.1",
        }

    def test_building_types(self, client: TestClient) -> None:
        resp = client.get("/api/building-types")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 4
        assert data[1] == {"building_type": "Mid-Range Standard Residential", "tiers": [1, 2, 3]}

    def test_engine_created_lazily(self) -> None:
        client = TestClient(create_app(settings=Settings()))
        resp = client.get("/api/building-types")
        assert resp.status_code == 200
        assert len(resp.json()) == 4


# ---------------------------------------------------------------------------
# POST /api/budget
# ---------------------------------------------------------------------------


class TestBudget:
    def test_reference_project(self, client: TestClient) -> None:
        resp = client.post("/api/budget", json=_addition_payload())
        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["total_cost"]["proposed"] == pytest.approx(1_676_170.0, abs=0.01)
        assert result["minimum_budgets"]["shell"] == pytest.approx(1_106_272.2, abs=0.01)
        assert result["working_budget"] == pytest.approx(1_676_170.0, abs=0.01)
        assert resp.json()["summary_dict"]["proposed_formatted"] == "$1,676,170"

    def test_working_budget_override(self, client: TestClient) -> None:
        resp = client.post(
            "/api/budget?working_budget_override=1500000", json=_addition_payload()
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["working_budget"] == 1_500_000

    def test_negative_area_is_client_error(self, client: TestClient) -> None:
        resp = client.post("/api/budget", json=_addition_payload(new_area_ft2=-5))
        assert resp.status_code == 422

    def test_missing_field_is_client_error(self, client: TestClient) -> None:
        payload = _addition_payload()
        del payload["tier"]
        resp = client.post("/api/budget", json=payload)
        assert resp.status_code == 422

    def test_unknown_building_type_is_not_found(self, client: TestClient) -> None:
        resp = client.post("/api/budget", json=_addition_payload(building_type="Warehouse"))
        assert resp.status_code == 404
        assert resp.json()["detail"] == "No cost data for building type 'Warehouse' tier 1"


# ---------------------------------------------------------------------------
# POST /api/fee-matrix
# ---------------------------------------------------------------------------


class TestFeeMatrix:
    def test_uses_settings_defaults(self, client: TestClient) -> None:
        resp = client.post("/api/fee-matrix", json={"budget": _addition_payload()})
        assert resp.status_code == 200
        data = resp.json()
        assert data["inputs"]["complexity_multiplier"] == pytest.approx(0.3)
        assert data["inputs"]["discount_rate"] == pytest.approx(0.15)
        assert data["inputs"]["average_billable_rate"] == pytest.approx(172.17)
        assert data["totals"]["market_fee"] > 0

    def test_explicit_parameters(self, client: TestClient) -> None:
        resp = client.post(
            "/api/fee-matrix",
            json={
                "budget": _addition_payload(),
                "complexity_multiplier": 0,
                "discount_rate": 0,
                "average_billable_rate": 200,
            },
        )
        assert resp.status_code == 200
        assert resp.json()["inputs"]["average_billable_rate"] == 200

    def test_unknown_building_type(self, client: TestClient) -> None:
        resp = client.post(
            "/api/fee-matrix", json={"budget": _addition_payload(building_type="Barn")}
        )
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# POST /api/projects/calculate, /api/staffing-plan
# ---------------------------------------------------------------------------


class TestProjectAndStaffing:
    def test_project_calculation(self, client: TestClient) -> None:
        resp = client.post(
            "/api/projects/calculate",
            json={
                "project_name": "Maple Street Residence",
                "building_type": "Mid-Range Standard Residential",
                "new_building_area": 2000,
                "existing_building_area": 1000,
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["calculations"]["total_budget"] == pytest.approx(875_000)
        assert data["average_pricing_per_hour"] == 164
        assert len(data["hours"]) == 6

    def test_project_validation(self, client: TestClient) -> None:
        resp = client.post(
            "/api/projects/calculate",
            json={"project_name": "", "building_type": "Mid-Range Standard Residential"},
        )
        assert resp.status_code == 422

    def test_staffing_plan(self, client: TestClient) -> None:
        resp = client.post(
            "/api/staffing-plan", json={"total_area_ft2": 5000, "hours_factor": 0.22}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["hours_plan"]["total_hours_planned"] == 1100
        assert len(data["scenarios"]) == 4
        assert "Admin" in data["hours_matrix"]["role_totals"]


# ---------------------------------------------------------------------------
# GET /api/sample-budget
# ---------------------------------------------------------------------------


class TestSampleBudget:
    def test_sample_budget(self, client: TestClient) -> None:
        resp = client.get("/api/sample-budget")
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"]["total_cost"]["low"] == pytest.approx(1_622_100.0)
        assert data["summary_dict"]["total_cost_range_formatted"] == "$1.6M - $1.7M"
        assert "description" in data
