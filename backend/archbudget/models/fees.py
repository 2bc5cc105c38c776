"""Fee matrix input and output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from archbudget.models.result import BudgetCalculationResult  # noqa: TCH001 (pydantic resolves at runtime)


class FeeMatrixInput(BaseModel):
    """A computed budget plus the firm's pricing parameters.

    ``complexity_multiplier`` is an uplift (0.1 = 10 % above the base fee
    curve); ``discount_rate`` is applied to in-house fees.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    budget_result: BudgetCalculationResult
    complexity_multiplier: float = Field(default=0.0, ge=0)
    discount_rate: float = Field(default=0.0, ge=0, le=1)
    average_billable_rate: float = Field(gt=0)


class ScanningFee(BaseModel):
    """Scan-to-BIM fee for existing building or site area."""

    service: str
    area: float
    rate: float
    fee: float
    discounted_fee: float
    hours: float


class DisciplineFee(BaseModel):
    """Fee for one design discipline.

    In-house disciplines carry a discounted fee and hours; consultant
    disciplines carry a consultant fee instead.
    """

    discipline: str
    budget: float
    percentage: float
    fee: float
    discounted_fee: float | None = None
    consultant_fee: float | None = None
    rate_psf: float
    hours: float | None = None
    is_internal: bool


class FeeTotals(BaseModel):
    market_fee: float
    consultant_total: float
    discounted_total: float
    overall_percentage: float
    rate_per_ft2: float
    total_hours: float


class HourlyFactor(BaseModel):
    hf_value: float
    raw_design_hours: float
    total_building_area: float


class CostBase(BaseModel):
    """Discounted in-house fees split into shell, interior and landscape."""

    shell_cost_base: float
    interior_cost_base: float
    landscape_cost_base: float


class FeeMatrixResult(BaseModel):
    """Complete fee schedule derived from a budget result."""

    inputs: FeeMatrixInput
    scanning_fees: list[ScanningFee] = Field(default_factory=list)
    discipline_fees: list[DisciplineFee] = Field(default_factory=list)
    totals: FeeTotals
    hourly_factor: HourlyFactor
    cost_base: CostBase

    def fee_for(self, discipline: str) -> DisciplineFee | None:
        for fee in self.discipline_fees:
            if fee.discipline == discipline:
                return fee
        return None
