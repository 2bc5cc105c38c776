"""Staffing plan models: role rates, phase hours, pricing and scenarios."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from archbudget.models.enums import StaffRole

DEFAULT_MARKUP = 1.0
DEFAULT_SCENARIO_DISCOUNT = 0.35


class StaffingInput(BaseModel):
    """Inputs for a bottom-up staffing plan.

    ``total_hours`` overrides the hours derived from
    ``total_area_ft2 * hours_factor`` when given.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    total_area_ft2: float = Field(ge=0)
    hours_factor: float = Field(ge=0)
    total_hours: int | None = Field(default=None, ge=0)
    markup: float = Field(default=DEFAULT_MARKUP, ge=0)
    firm_discount: float = Field(default=DEFAULT_SCENARIO_DISCOUNT, ge=0, le=1)
    market_discount: float = Field(default=DEFAULT_SCENARIO_DISCOUNT, ge=0, le=1)


class RoleRate(BaseModel):
    labor_per_hour: float
    overhead_per_hour: float
    cost_per_hour: float
    price_per_hour: float


class RateCard(BaseModel):
    roles: dict[StaffRole, RoleRate]
    simple_average_rate: float
    weighted_average_rate: float = 0.0


class PhaseHours(BaseModel):
    name: str
    months: int | None = None
    percent: float
    hours: int


class HoursPlan(BaseModel):
    total_area_ft2: float
    hours_factor: float
    total_hours_planned: int
    phases: list[PhaseHours]
    total_months: int


class HoursMatrix(BaseModel):
    """Whole hours per phase and role after rounding."""

    matrix: dict[str, dict[StaffRole, int]]
    role_totals: dict[StaffRole, int]
    rounded_grand_total: int
    planned_grand_total: int


class RolePricing(BaseModel):
    hours: int
    price_per_hour: float
    pricing: float
    labor: float
    overhead: float
    total_cost: float
    profit: float
    margin: float


class PricingTotals(BaseModel):
    hours: int
    pricing: float
    labor: float
    overhead: float
    total_cost: float
    profit: float
    margin: float


class ProjectPricing(BaseModel):
    by_role: dict[StaffRole, RolePricing]
    totals: PricingTotals


class RateScenario(BaseModel):
    name: str
    by_role: dict[StaffRole, float]
    total: float
    pct_of_project_budget: float


class StaffingPlan(BaseModel):
    inputs: StaffingInput
    rate_card: RateCard
    hours_plan: HoursPlan
    hours_matrix: HoursMatrix
    pricing: ProjectPricing
    scenarios: list[RateScenario]

    def scenario(self, name: str) -> RateScenario | None:
        for item in self.scenarios:
            if item.name == name:
                return item
        return None
