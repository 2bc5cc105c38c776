"""Budget calculation output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from archbudget.models.budget import BudgetInput  # noqa: TCH001 (pydantic resolves at runtime)


class AllInRate(BaseModel):
    """All-in construction cost bounds in $/ft²."""

    min_psf: float
    max_psf: float


class AreaSummary(BaseModel):
    total_sf: float


class TotalCost(BaseModel):
    """Total construction cost bounds and the proposed (blended) figure."""

    low: float
    high: float
    proposed: float

    @model_validator(mode="after")
    def low_le_proposed_le_high(self) -> TotalCost:
        if not (self.low <= self.proposed <= self.high):
            msg = (
                f"Must satisfy low <= proposed <= high, "
                f"got {self.low} <= {self.proposed} <= {self.high}"
            )
            raise ValueError(msg)
        return self


class Shares(BaseModel):
    """Fractional split of the construction budget (sums to ~1.0)."""

    shell: float
    interior: float
    landscape: float


class MinimumBudgets(BaseModel):
    shell: float
    interior: float
    landscape: float

    @property
    def total(self) -> float:
        return self.shell + self.interior + self.landscape


class ConstructionRatios(BaseModel):
    """Fractions of total area that are new construction vs. existing remodel."""

    new_construction: float
    existing_remodel: float


class DisciplineSplit(BaseModel):
    """A discipline budget split into new-construction and remodel portions."""

    total: float
    new_construction: float
    existing_remodel: float


class BudgetCalculationResult(BaseModel):
    """Complete cost/budget breakdown for one project.

    ``engineering_budgets`` is keyed by discipline label and always carries
    a ``"sum"`` entry. ``working_budget`` is the basis for all downstream
    fee percentages.
    """

    inputs: BudgetInput
    all_in: AllInRate
    area: AreaSummary
    total_cost: TotalCost
    shares: Shares
    minimum_budgets: MinimumBudgets
    design_shares: dict[str, float] = Field(default_factory=dict)
    engineering_budgets: dict[str, float] = Field(default_factory=dict)
    architecture_budget: float
    working_budget: float
    construction_ratios: ConstructionRatios
    discipline_breakdown: dict[str, DisciplineSplit] = Field(default_factory=dict)
    notes: list[str] = Field(default_factory=list)

    @property
    def engineering_total(self) -> float:
        return self.engineering_budgets.get("sum", 0.0)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from archbudget.formatting import (
            format_budget_range,
            format_currency,
            format_percentage,
            format_rate_psf,
        )

        return {
            "building_type": self.inputs.building_type,
            "tier": self.inputs.tier,
            "total_sf_formatted": f"{self.area.total_sf:,.0f} SF",
            "all_in_rate_formatted": format_rate_psf(
                self.all_in.min_psf, self.all_in.max_psf
            ),
            "total_cost_range_formatted": format_budget_range(
                self.total_cost.low, self.total_cost.high
            ),
            "proposed_formatted": format_currency(self.total_cost.proposed),
            "working_budget_formatted": format_currency(self.working_budget),
            "minimum_budgets": {
                "shell": format_currency(self.minimum_budgets.shell),
                "interior": format_currency(self.minimum_budgets.interior),
                "landscape": format_currency(self.minimum_budgets.landscape),
            },
            "design_shares": {
                name: format_percentage(share)
                for name, share in self.design_shares.items()
            },
            "num_notes": len(self.notes),
        }
