"""Comprehensive project models: inputs, budgets, fees and phase hours."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from archbudget.models.enums import EngineeringDiscipline


class ProjectInput(BaseModel):
    """Everything a proposal needs to price one project.

    ``site_area`` is in square metres; building areas are in square feet.
    Optional overrides replace the looked-up or default value when given.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    project_name: str = Field(min_length=1)
    building_type: str = Field(min_length=1)
    design_level: int = Field(default=2, ge=1, le=3)
    category: int = Field(default=3, ge=1, le=5)
    new_building_area: float = Field(default=0.0, ge=0)
    existing_building_area: float = Field(default=0.0, ge=0)
    site_area: float = Field(default=0.0, ge=0)
    historic_multiplier: float = Field(default=1.0, ge=1)
    remodel_multiplier: float = Field(default=0.5, ge=0, le=1)

    new_construction_target_cost: float | None = Field(default=None, gt=0)
    remodel_target_cost: float | None = Field(default=None, gt=0)
    shell_share_override: float | None = Field(default=None, ge=0, le=1)
    interior_share_override: float | None = Field(default=None, ge=0, le=1)
    landscape_share_override: float | None = Field(default=None, ge=0, le=1)
    engineering_percentage_overrides: dict[EngineeringDiscipline, float] = Field(
        default_factory=dict
    )

    labor_rate_override: float | None = Field(default=None, gt=0)
    overhead_rate_override: float | None = Field(default=None, ge=0)
    markup_factor_override: float | None = Field(default=None, gt=0)
    fee_adjustments: dict[str, float] = Field(default_factory=dict)

    @property
    def total_area(self) -> float:
        return self.new_building_area + self.existing_building_area


class ProjectCalculation(BaseModel):
    """Construction cost rates and budgets for a project."""

    new_cost_min: float
    new_cost_max: float
    new_cost_target: float
    remodel_cost_min: float
    remodel_cost_max: float
    remodel_cost_target: float
    new_budget: float
    remodel_budget: float
    total_budget: float
    shell_budget_total: float
    interior_budget_total: float
    landscape_budget_total: float
    architecture_budget: float
    engineering_budgets: dict[EngineeringDiscipline, float]

    @property
    def engineering_total(self) -> float:
        return sum(self.engineering_budgets.values())


class ProjectFee(BaseModel):
    """One fee line item (scope) on a proposal."""

    scope: str
    percent_of_cost: float | None = None
    rate_per_sq_ft: float
    market_fee: float
    in_house_fee: float
    hours: float
    coordination_fee: float = 0.0
    consultant_fee: float = 0.0
    is_inhouse: bool


class ProjectHours(BaseModel):
    """In-house hours for one design phase split by role."""

    phase: str
    phase_percent: float
    total_hours: float
    designer1_hours: float
    designer2_hours: float
    architect_hours: float
    engineer_hours: float
    principal_hours: float


class ProjectCalculationResult(BaseModel):
    project_name: str
    category_multiplier: float
    average_pricing_per_hour: float
    calculations: ProjectCalculation
    fees: list[ProjectFee]
    hours: list[ProjectHours]
    assumptions: list[str] = Field(default_factory=list)

    @property
    def total_market_fee(self) -> float:
        return sum(f.market_fee for f in self.fees)

    @property
    def total_in_house_hours(self) -> float:
        return sum(h.total_hours for h in self.hours)
