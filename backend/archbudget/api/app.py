"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from archbudget.config import Settings, configure_logging, load_settings
from archbudget.data.seed import COST_DATA_VERSION
from archbudget.engine import ENGINE_VERSION
from archbudget.exceptions import ArchBudgetError, CostDataNotFoundError, InvalidInputError
from archbudget.models.budget import BudgetInput
from archbudget.models.project import ProjectInput  # noqa: TCH001 (FastAPI resolves at runtime)
from archbudget.models.staffing import StaffingInput  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from archbudget.engine import BudgetEngine

logger = logging.getLogger(__name__)

SAMPLE_BUDGET_INPUT = BudgetInput(
    building_type="Mid-Range Standard Residential",
    tier=1,
    new_area_ft2=1000,
    existing_area_ft2=4407,
    site_area_m2=972.98,
)


class FeeMatrixRequest(BaseModel):
    """Project input plus fee parameters; omitted parameters use settings."""

    budget: BudgetInput
    complexity_multiplier: float | None = Field(default=None, ge=0)
    discount_rate: float | None = Field(default=None, ge=0, le=1)
    average_billable_rate: float | None = Field(default=None, gt=0)


def create_app(
    *,
    settings: Settings | None = None,
    engine: BudgetEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings; loaded from the environment when omitted.
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created via create_default_engine on first
        request.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)

    app = FastAPI(title="ArchBudget", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.settings = settings
    app.state.engine = engine

    def _get_engine() -> BudgetEngine:
        eng: BudgetEngine | None = app.state.engine
        if eng is not None:
            return eng
        from archbudget.factory import create_default_engine

        eng = create_default_engine(app.state.settings)
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    @app.exception_handler(CostDataNotFoundError)
    async def _cost_data_not_found(
        request: Request, exc: CostDataNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidInputError)
    async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ArchBudgetError)
    async def _archbudget_error(request: Request, exc: ArchBudgetError) -> JSONResponse:
        logger.exception("Calculation error on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "cost_data_version": COST_DATA_VERSION,
        }

    # ------------------------------------------------------------------
    # GET /api/building-types
    # ------------------------------------------------------------------

    @app.get("/api/building-types")
    def building_types() -> list[dict[str, Any]]:
        repository = _get_engine().repository
        return [
            {"building_type": bt, "tiers": repository.list_tiers(bt)}
            for bt in repository.list_building_types()
        ]

    # ------------------------------------------------------------------
    # POST /api/budget
    # ------------------------------------------------------------------

    @app.post("/api/budget")
    def budget(
        budget_input: BudgetInput,
        working_budget_override: float | None = Query(default=None, ge=0),
    ) -> dict[str, Any]:
        result = _get_engine().calculate(
            budget_input, working_budget_override=working_budget_override
        )
        return {
            "result": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/fee-matrix
    # ------------------------------------------------------------------

    @app.post("/api/fee-matrix")
    def fee_matrix(fee_request: FeeMatrixRequest) -> dict[str, Any]:
        cfg: Settings = app.state.settings
        result = _get_engine().fee_matrix(
            fee_request.budget,
            complexity_multiplier=(
                fee_request.complexity_multiplier
                if fee_request.complexity_multiplier is not None
                else cfg.complexity_multiplier
            ),
            discount_rate=(
                fee_request.discount_rate
                if fee_request.discount_rate is not None
                else cfg.discount_rate
            ),
            average_billable_rate=(
                fee_request.average_billable_rate
                if fee_request.average_billable_rate is not None
                else cfg.average_billable_rate
            ),
        )
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/projects/calculate
    # ------------------------------------------------------------------

    @app.post("/api/projects/calculate")
    def calculate_project(project: ProjectInput) -> dict[str, Any]:
        from archbudget.project_calculator import ProjectCalculator

        calculator = ProjectCalculator(_get_engine().repository)
        return calculator.calculate(project).model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/staffing-plan
    # ------------------------------------------------------------------

    @app.post("/api/staffing-plan")
    def staffing_plan(staffing_input: StaffingInput) -> dict[str, Any]:
        from archbudget.staffing import StaffingPlanner

        return StaffingPlanner().plan(staffing_input).model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/sample-budget
    # ------------------------------------------------------------------

    @app.get("/api/sample-budget")
    def sample_budget() -> dict[str, Any]:
        result = _get_engine().calculate(SAMPLE_BUDGET_INPUT)
        return {
            "result": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
            "description": (
                "A 1,000 SF addition to a 4,407 SF mid-range residence on a "
                "973 m² site, budgeted at tier 1 cost data."
            ),
        }

    return app
